"""
Error display with a single retry action.
"""

from collections.abc import Callable

import streamlit as st


def render_error(message: str, on_retry: Callable[[], None]) -> None:
    with st.container(border=True):
        st.error(message)
        st.button("Try again", key="error_retry", on_click=on_retry)
