"""
AI analysis display components.

Renders the analysis text (or its scoped error) and lets the user store the
analysis in their saved history.
"""

import logging

import streamlit as st

from tubebrief.services.api_client import APIError
from tubebrief.ui.utils import run_with_client

logger = logging.getLogger(__name__)


def _save(video_id: str, analysis: str) -> None:
    try:
        run_with_client(lambda client: client.save_analysis(video_id, analysis))
    except APIError as exc:
        st.session_state["_save_error"] = exc.message
    else:
        st.session_state["_saved_video_id"] = video_id
        st.session_state.pop("_save_error", None)
        logger.info("Saved analysis for %s", video_id)


def render_analysis_results(
    analysis: str | None,
    is_loading: bool,
    video_id: str,
    error: str | None = None,
) -> None:
    """Render the analysis card.

    Args:
        analysis: Analysis markdown, or None while pending / after failure.
        is_loading: True while the analysis request is in flight.
        video_id: Video the analysis belongs to (used when saving).
        error: Analysis-scoped failure message; the transcript stays visible.
    """
    with st.container(border=True):
        st.subheader("AI Analysis")

        if is_loading:
            with st.spinner("Analyzing transcript..."):
                st.caption("This can take up to a couple of minutes.")
            return

        if error:
            st.error(error)
            return

        if not analysis:
            st.info("No analysis available yet.")
            return

        st.markdown(analysis)

        if st.session_state.get("_saved_video_id") == video_id:
            st.success("Analysis saved.")
        else:
            st.button(
                "Save analysis",
                key=f"save_analysis_{video_id}",
                on_click=_save,
                args=(video_id, analysis),
            )
        save_error = st.session_state.get("_save_error")
        if save_error:
            st.warning(f"Could not save analysis: {save_error}")
