"""
Upsell card shown to visitors without an active subscription.
"""

import streamlit as st

from tubebrief.ui.navigation import PAGE_PATHS


def render_upsell(load_error: str | None = None) -> None:
    """Render the "Premium Access Required" card linking to the pricing page."""
    with st.container(border=True):
        st.page_link(PAGE_PATHS["home"], label="← Back")
        st.header("Premium Access Required")
        if load_error:
            st.caption(load_error)
        st.write("Please subscribe to access this feature")
        st.page_link(PAGE_PATHS["pricing"], label="View Plans", icon="💳")
