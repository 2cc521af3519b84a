"""
Video link input form.
"""

import streamlit as st


def render_youtube_input(
    is_loading: bool = False, form_key: str = "youtube_input", value: str = ""
) -> str | None:
    """Render the link form; return the submitted link, or None if not submitted.

    While ``is_loading`` the field and button are disabled. ``form_key``
    keeps a second copy of the form (drawn while a run is in flight) from
    clashing with the first.
    """
    with st.form(form_key, clear_on_submit=False, border=False):
        url = st.text_input(
            "YouTube video URL",
            value=value,
            placeholder="https://www.youtube.com/watch?v=...",
            disabled=is_loading,
            key=f"{form_key}_url",
        )
        submitted = st.form_submit_button(
            "Analyzing..." if is_loading else "Analyze video",
            type="primary",
            disabled=is_loading,
            key=f"{form_key}_submit",
        )
    if submitted and url.strip():
        return url.strip()
    return None
