"""
Home page — product pitch and entry points.
"""

import streamlit as st

from tubebrief.core.config import get_settings
from tubebrief.ui.navigation import PAGE_PATHS
from tubebrief.ui.utils import is_signed_in

settings = get_settings()

st.title(settings.app_name)
st.subheader("Turn any YouTube video into an AI briefing")
st.write(
    "Paste a link, and we fetch the transcript and hand it to an AI analyst "
    "that pulls out the key points. Save the analyses you want to keep."
)

if is_signed_in():
    st.page_link(PAGE_PATHS["dashboard"], label="Go to your dashboard", icon="▶️")
else:
    st.info("Sign in to start analyzing videos.")
st.page_link(PAGE_PATHS["pricing"], label="See pricing", icon="💳")
