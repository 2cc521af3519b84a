"""
TubeBrief Streamlit UI — main entry point.

Run with: ``streamlit run tubebrief/ui/app.py``
"""

import logging

import streamlit as st

from tubebrief.core.config import get_settings
from tubebrief.services.workflow import WorkflowSnapshot
from tubebrief.ui.navigation import PAGE_PATHS, render_navbar
from tubebrief.ui.utils import forget_gate_state, is_signed_in

settings = get_settings()
logging.basicConfig(level=settings.log_level)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=settings.app_name,
    page_icon="\U0001f3ac",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
_DEFAULTS = {
    "api_base_url": settings.api_base_url,
    "workflow": WorkflowSnapshot(),
    "nav_menu_open": False,
}

for key, value in _DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = value

# ---------------------------------------------------------------------------
# Navigation (multipage)
# ---------------------------------------------------------------------------
signed_in = is_signed_in()

pages = {
    "home": st.Page(PAGE_PATHS["home"], title="Home", icon="\U0001f3e0", default=True),
    "pricing": st.Page(PAGE_PATHS["pricing"], title="Pricing", icon="\U0001f4b3"),
}
if signed_in:
    pages["dashboard"] = st.Page(
        PAGE_PATHS["dashboard"], title="Dashboard", icon="\U0001f4ca"
    )

nav = st.navigation(list(pages.values()), position="hidden")
render_navbar(pages, app_name=settings.app_name, is_signed_in=signed_in)

# The subscription gate is re-checked every time the dashboard is entered.
forget_gate_state(on_dashboard="dashboard" in pages and nav == pages["dashboard"])
nav.run()
