"""
Transcript results — the video the transcript was fetched for.

The transcript itself stays in session state for the analysis step and is
not rendered.
"""

from collections.abc import Callable

import streamlit as st

from tubebrief.core.utils import watch_url


def render_transcript_results(video_id: str, on_reset: Callable[[], None]) -> None:
    col_title, col_reset = st.columns([4, 1])
    with col_title:
        st.subheader("Video")
    with col_reset:
        st.button("Analyze another video", key="transcript_reset", on_click=on_reset)
    st.video(watch_url(video_id))
