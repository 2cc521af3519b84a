"""Dashboard workflow: link -> transcript -> AI analysis.

The run is modelled as an explicit state machine. ``transition()`` is the
only function that computes a new ``WorkflowSnapshot``; the orchestrator
feeds it events from the completion of each awaited step and publishes the
resulting snapshots to an optional listener (the Streamlit progress UI).

Usage::

    async with APIClient() as client:
        orchestrator = WorkflowOrchestrator(client, on_change=render)
        snapshot = await orchestrator.submit("https://youtu.be/dQw4w9WgXcQ")
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from tubebrief.core.exceptions import (
    InvalidVideoURLError,
    TranscriptUnavailableError,
    WorkflowStateError,
)
from tubebrief.core.models import TOTAL_STAGES, TranscriptEntry, WorkflowStage
from tubebrief.core.utils import extract_video_id
from tubebrief.services.api_client import APIClient, APIError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred"
ANALYSIS_FAILED = "Failed to analyze transcript"


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Immutable view of a dashboard run, consumed by the rendering layer."""

    stage: WorkflowStage = WorkflowStage.IDLE
    is_loading: bool = False
    is_analyzing: bool = False
    error: str | None = None
    transcript: tuple[TranscriptEntry, ...] | None = None
    analysis: str | None = None
    analysis_error: str | None = None
    video_id: str | None = None

    @property
    def show_input(self) -> bool:
        return self.transcript is None and self.error is None

    @property
    def show_progress(self) -> bool:
        return self.is_loading and self.stage > WorkflowStage.IDLE

    @property
    def progress(self) -> float:
        return int(self.stage) / TOTAL_STAGES


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Submitted:
    pass


@dataclass(frozen=True)
class UrlValidated:
    video_id: str


@dataclass(frozen=True)
class TranscriptRequested:
    pass


@dataclass(frozen=True)
class TranscriptReceived:
    pass


@dataclass(frozen=True)
class TranscriptLoaded:
    transcript: tuple[TranscriptEntry, ...]


@dataclass(frozen=True)
class AnalysisSucceeded:
    analysis: str


@dataclass(frozen=True)
class AnalysisFailed:
    message: str


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Reset:
    pass


WorkflowEvent = (
    Submitted
    | UrlValidated
    | TranscriptRequested
    | TranscriptReceived
    | TranscriptLoaded
    | AnalysisSucceeded
    | AnalysisFailed
    | Failed
    | Reset
)


def transition(snapshot: WorkflowSnapshot, event: WorkflowEvent) -> WorkflowSnapshot:
    """Return the snapshot that follows ``snapshot`` once ``event`` happens.

    Raises:
        WorkflowStateError: If the event would move the stage backwards
            within a run, or a transcript is loaded empty.
    """
    match event:
        case Reset():
            return WorkflowSnapshot()
        case Submitted():
            return WorkflowSnapshot(stage=WorkflowStage.VALIDATING, is_loading=True)
        case UrlValidated(video_id=video_id):
            new = replace(snapshot, stage=WorkflowStage.FETCHING_TRANSCRIPT, video_id=video_id)
        case TranscriptRequested():
            new = replace(snapshot, stage=WorkflowStage.EXTRACTING_TRANSCRIPT)
        case TranscriptReceived():
            new = replace(snapshot, stage=WorkflowStage.PROCESSING_TRANSCRIPT)
        case TranscriptLoaded(transcript=transcript):
            if not transcript:
                raise WorkflowStateError("Cannot load an empty transcript")
            new = replace(
                snapshot,
                stage=WorkflowStage.ANALYZING_TRANSCRIPT,
                transcript=transcript,
                is_loading=False,
                is_analyzing=True,
            )
        case AnalysisSucceeded(analysis=analysis):
            new = replace(snapshot, analysis=analysis, is_analyzing=False)
        case AnalysisFailed(message=message):
            new = replace(snapshot, analysis_error=message, is_analyzing=False)
        case Failed(message=message):
            new = replace(snapshot, error=message, is_loading=False, is_analyzing=False)
        case _:
            raise WorkflowStateError(f"Unknown workflow event: {event!r}")

    if new.stage < snapshot.stage:
        raise WorkflowStateError(
            f"{type(event).__name__} would move stage {snapshot.stage} back to {new.stage}"
        )
    return new


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class WorkflowOrchestrator:
    """Drives one dashboard's submissions against the backend.

    Each ``submit()`` or ``reset()`` starts a new generation. Events coming
    from an older generation are dropped, so a response that lands after a
    reset (or after a newer submission) never touches the current state.

    Args:
        client: Backend client used for the transcript and analysis calls.
        on_change: Called with every new snapshot (e.g. to redraw progress).
        snapshot: Starting state, e.g. restored from ``st.session_state``.
    """

    def __init__(
        self,
        client: APIClient,
        on_change: Callable[[WorkflowSnapshot], None] | None = None,
        snapshot: WorkflowSnapshot | None = None,
    ) -> None:
        self._client = client
        self._on_change = on_change
        self._snapshot = snapshot or WorkflowSnapshot()
        self._generation = 0

    @property
    def snapshot(self) -> WorkflowSnapshot:
        return self._snapshot

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _dispatch(self, event: WorkflowEvent, generation: int) -> bool:
        """Apply ``event`` if it belongs to the current run; return whether it did."""
        if not self._is_current(generation):
            logger.debug("Dropping stale %s from run %s", type(event).__name__, generation)
            return False

        self._snapshot = transition(self._snapshot, event)
        if self._on_change is not None:
            try:
                self._on_change(self._snapshot)
            except Exception:
                logger.warning(
                    "on_change listener failed at stage %s (non-fatal)",
                    self._snapshot.stage,
                    exc_info=True,
                )
        return True

    def reset(self) -> WorkflowSnapshot:
        """Abandon any in-flight run and return to the initial snapshot."""
        self._generation += 1
        self._dispatch(Reset(), self._generation)
        return self._snapshot

    async def submit(self, url: str) -> WorkflowSnapshot:
        """Run the full sequence for ``url`` and return the final snapshot.

        Never raises for backend or validation failures: they are reported
        through ``snapshot.error`` (transcript phase) or
        ``snapshot.analysis_error`` (analysis phase).
        """
        self._generation += 1
        generation = self._generation
        self._dispatch(Submitted(), generation)

        try:
            transcript = await self._load_transcript(url, generation)
        except (InvalidVideoURLError, TranscriptUnavailableError) as exc:
            logger.info("Run %s stopped: %s", generation, exc.detail)
            self._dispatch(Failed(exc.detail), generation)
            return self._snapshot
        except APIError as exc:
            logger.warning("Transcript request failed (%s): %s", exc.category, exc.message)
            self._dispatch(Failed(exc.message), generation)
            return self._snapshot
        except Exception:
            logger.exception("Unexpected failure while loading transcript for %r", url)
            self._dispatch(Failed(UNKNOWN_ERROR), generation)
            return self._snapshot

        if transcript is None or not self._dispatch(TranscriptLoaded(transcript), generation):
            return self._snapshot

        await self._analyze(transcript, generation)
        return self._snapshot

    async def _load_transcript(
        self, url: str, generation: int
    ) -> tuple[TranscriptEntry, ...] | None:
        """Validate the link and fetch its transcript; None means the run went stale."""
        video_id = extract_video_id(url)
        if video_id is None:
            raise InvalidVideoURLError()
        self._dispatch(UrlValidated(video_id), generation)

        # stage 3 marks the request as in flight
        self._dispatch(TranscriptRequested(), generation)
        response = await self._client.fetch_transcript(url)
        if not self._is_current(generation):
            logger.debug("Discarding transcript for stale run %s", generation)
            return None
        self._dispatch(TranscriptReceived(), generation)

        if not response.transcript:
            raise TranscriptUnavailableError()
        logger.info("Loaded %d transcript entries for %s", len(response.transcript), video_id)
        return tuple(response.transcript)

    async def _analyze(self, transcript: tuple[TranscriptEntry, ...], generation: int) -> None:
        """Request the AI analysis; failures stay scoped to ``analysis_error``."""
        try:
            result = await self._client.analyze_transcript(transcript)
        except APIError as exc:
            logger.warning("Analysis error (%s): %s", exc.category, exc.message)
            self._dispatch(AnalysisFailed(exc.message), generation)
        except Exception:
            logger.exception("Unexpected failure while analyzing transcript")
            self._dispatch(AnalysisFailed(ANALYSIS_FAILED), generation)
        else:
            self._dispatch(AnalysisSucceeded(result.analysis), generation)
