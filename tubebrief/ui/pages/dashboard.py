"""
Dashboard page — subscription gate plus the link -> transcript -> analysis
workflow and the saved-analyses history.

UX flow: input -> progress (stages 1-4) -> video + analysis (stage 5)
Any transcript-phase failure replaces the flow with an error card whose
"Try again" button resets the run.
"""

import streamlit as st

from tubebrief.core.config import get_settings
from tubebrief.services.api_client import APIError
from tubebrief.services.subscription import GateView
from tubebrief.services.workflow import (
    Failed,
    WorkflowOrchestrator,
    WorkflowSnapshot,
    transition,
)
from tubebrief.ui.components.analysis_results import render_analysis_results
from tubebrief.ui.components.error_display import render_error
from tubebrief.ui.components.progress_indicator import render_progress
from tubebrief.ui.components.saved_analyses import render_saved_analyses
from tubebrief.ui.components.transcript_results import render_transcript_results
from tubebrief.ui.components.upsell import render_upsell
from tubebrief.ui.components.youtube_input import render_youtube_input
from tubebrief.ui.utils import GATE_STATE_KEY, reset_workflow, resolve_gate, run_with_client

settings = get_settings()

# ---------------------------------------------------------------------------
# Subscription gate (re-resolved each time the dashboard is entered)
# ---------------------------------------------------------------------------
if GATE_STATE_KEY not in st.session_state:
    with st.spinner("Loading your account..."):
        st.session_state[GATE_STATE_KEY] = resolve_gate()

gate = st.session_state[GATE_STATE_KEY]
if gate.view is not GateView.dashboard:
    render_upsell(load_error=gate.error)
    st.stop()


def _run(url: str) -> None:
    """Run one submission, redrawing progress as each stage completes."""
    placeholder = st.empty()

    def _show(snap: WorkflowSnapshot) -> None:
        with placeholder.container():
            if snap.show_progress:
                render_progress(snap)
            elif snap.is_analyzing:
                st.info("Transcript ready. Analyzing transcript...")

    async def _submit(client):
        orchestrator = WorkflowOrchestrator(client, on_change=_show)
        return await orchestrator.submit(url)

    reset_workflow()
    try:
        st.session_state.workflow = run_with_client(_submit)
    except APIError as exc:
        st.session_state.workflow = transition(st.session_state.workflow, Failed(exc.message))
    st.rerun()


snapshot: WorkflowSnapshot = st.session_state.workflow

# ---------------------------------------------------------------------------
# Workflow card
# ---------------------------------------------------------------------------
with st.container(border=True):
    st.markdown(":green[●] **Subscription Active**")
    st.divider()

    if snapshot.show_input:
        input_slot = st.empty()
        with input_slot.container():
            submitted_url = render_youtube_input(is_loading=snapshot.is_loading)
        if submitted_url:
            # Swap in a locked copy of the form for the duration of the run.
            with input_slot.container():
                render_youtube_input(
                    is_loading=True, form_key="youtube_input_running", value=submitted_url
                )
            _run(submitted_url)

    if snapshot.show_progress:
        render_progress(snapshot)

    if snapshot.error:
        render_error(snapshot.error, on_retry=reset_workflow)

    if snapshot.transcript and snapshot.video_id and not snapshot.error:
        render_transcript_results(snapshot.video_id, on_reset=reset_workflow)
        render_analysis_results(
            snapshot.analysis,
            is_loading=snapshot.is_analyzing,
            video_id=snapshot.video_id,
            error=snapshot.analysis_error,
        )

# ---------------------------------------------------------------------------
# Saved analyses
# ---------------------------------------------------------------------------
if not snapshot.is_loading:
    with st.container(border=True):
        st.subheader("Saved Analyses")
        try:
            saved = run_with_client(
                lambda client: client.list_saved_analyses(settings.saved_analyses_limit)
            )
            render_saved_analyses(saved)
        except APIError as exc:
            render_saved_analyses([], error=exc.message)
