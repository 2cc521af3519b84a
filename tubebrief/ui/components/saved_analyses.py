"""
Saved analyses list.
"""

import streamlit as st

from tubebrief.core.models import SavedAnalysis
from tubebrief.core.utils import watch_url


def render_saved_analyses(analyses: list[SavedAnalysis], error: str | None = None) -> None:
    """Render saved analyses newest first, each in a collapsible card."""
    if error:
        st.error(f"Could not load saved analyses: {error}")
        return
    if not analyses:
        st.info("No saved analyses yet. Analyze a video and save the result.")
        return

    st.caption(f"{len(analyses)} saved analysis(es)")
    for item in analyses:
        created = item.created_at.strftime("%Y-%m-%d %H:%M") if item.created_at else ""
        with st.expander(f"{item.video_id}  |  {created}" if created else item.video_id):
            st.markdown(f"[Watch on YouTube]({watch_url(item.video_id)})")
            st.markdown(item.analysis)
