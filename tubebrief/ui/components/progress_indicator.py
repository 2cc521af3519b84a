"""
Progress indicator for the dashboard workflow stages.
"""

import streamlit as st

from tubebrief.core.models import TOTAL_STAGES, WorkflowStage
from tubebrief.services.workflow import WorkflowSnapshot


def render_progress(snapshot: WorkflowSnapshot) -> None:
    """Render a progress bar plus a checklist of the workflow stages."""
    stage = snapshot.stage
    st.progress(
        snapshot.progress,
        text=f"Step {int(stage)} of {TOTAL_STAGES}: {stage.label}",
    )
    for step in WorkflowStage:
        if step is WorkflowStage.IDLE:
            continue
        if step < stage:
            st.markdown(f"✅ {step.label}")
        elif step == stage:
            st.markdown(f"⏳ **{step.label}**")
        else:
            st.caption(step.label)
