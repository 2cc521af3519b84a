"""
Pricing page — the upsell target. Checkout itself is handled externally.
"""

import streamlit as st

from tubebrief.core.config import get_settings

settings = get_settings()

st.header("Pricing")

with st.container(border=True):
    st.subheader("Premium")
    st.markdown(
        "- Transcript retrieval for any public video with captions\n"
        "- AI analysis of the full transcript\n"
        "- Unlimited saved analyses"
    )
    if settings.pricing_url:
        st.link_button("Subscribe", settings.pricing_url, type="primary")
    else:
        st.caption("Subscriptions are not open yet. Check back soon.")
