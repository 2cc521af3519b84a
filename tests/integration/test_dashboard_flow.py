"""Integration tests: subscription gate and workflow against a fake backend.

Runs the real APIClient, subscription gate and orchestrator end to end; only
the web backend is replaced by the in-process FastAPI app from conftest.
"""

from tubebrief.core.models import WorkflowStage
from tubebrief.services.subscription import GateView, resolve_subscription
from tubebrief.services.workflow import WorkflowOrchestrator, WorkflowSnapshot

VIDEO_URL = "https://youtu.be/dQw4w9WgXcQ"


async def test_end_to_end_run(api_client, backend):
    snapshots: list[WorkflowSnapshot] = []
    orchestrator = WorkflowOrchestrator(api_client, on_change=snapshots.append)

    snapshot = await orchestrator.submit(VIDEO_URL)

    assert snapshot.video_id == "dQw4w9WgXcQ"
    assert len(snapshot.transcript) == 1
    assert snapshot.transcript[0].text == "hi"
    assert snapshot.analysis == "summary"
    assert snapshot.error is None
    assert snapshot.stage == WorkflowStage.ANALYZING_TRANSCRIPT
    assert backend.paths() == ["/api/transcript", "/api/analyze"]
    assert backend.requests[1][2] == {
        "transcript": [{"text": "hi", "start": 0.0, "duration": 1.0}]
    }
    stages = [s.stage for s in snapshots]
    assert stages == sorted(stages)


async def test_transcript_error_message_is_passed_through(api_client, backend):
    backend.transcript_reply = (400, {"error": "Could not retrieve a transcript"})

    snapshot = await WorkflowOrchestrator(api_client).submit(VIDEO_URL)

    assert snapshot.error == "Could not retrieve a transcript"
    assert snapshot.transcript is None
    assert snapshot.analysis is None
    assert backend.paths() == ["/api/transcript"]


async def test_transcript_error_without_message_uses_default(api_client, backend):
    backend.transcript_reply = (500, {})

    snapshot = await WorkflowOrchestrator(api_client).submit(VIDEO_URL)

    assert snapshot.error == "Failed to fetch transcript"


async def test_empty_transcript_stops_before_analysis(api_client, backend):
    backend.transcript_reply = (200, {"transcript": []})

    snapshot = await WorkflowOrchestrator(api_client).submit(VIDEO_URL)

    assert snapshot.error == "No transcript available for this video"
    assert backend.paths() == ["/api/transcript"]


async def test_analysis_failure_is_scoped(api_client, backend):
    backend.analysis_reply = (500, {"error": "Analysis quota exceeded"})

    snapshot = await WorkflowOrchestrator(api_client).submit(VIDEO_URL)

    assert snapshot.error is None
    assert snapshot.transcript is not None
    assert snapshot.analysis_error == "Analysis quota exceeded"
    assert snapshot.stage == WorkflowStage.ANALYZING_TRANSCRIPT


async def test_invalid_link_never_reaches_backend(api_client, backend):
    snapshot = await WorkflowOrchestrator(api_client).submit("https://vimeo.com/76979871")

    assert snapshot.error == "Invalid YouTube URL"
    assert backend.requests == []


# ---------------------------------------------------------------------------
# Subscription gate
# ---------------------------------------------------------------------------


async def test_active_subscription_opens_dashboard(api_client, backend):
    state = await resolve_subscription(api_client)

    assert state.view is GateView.dashboard
    assert backend.paths() == ["/api/user"]


async def test_inactive_subscription_shows_upsell(api_client, backend):
    backend.user_reply = (200, {"id": "user_1", "subscription": {"status": "canceled"}})

    state = await resolve_subscription(api_client)

    assert state.view is GateView.upsell
    assert state.error is None


async def test_user_lookup_failure_fails_closed(api_client, backend):
    backend.user_reply = (401, {})

    state = await resolve_subscription(api_client)

    assert state.view is GateView.upsell
    assert state.error == "Failed to fetch user data"
