"""
Pydantic v2 request / response models for the backend collaborators.

Every payload crossing the HTTP boundary is validated into one of these
models before it reaches the workflow or the UI.
"""

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUBSCRIPTION_ACTIVE = "active"

# ---------------------------------------------------------------------------
# User / subscription
# ---------------------------------------------------------------------------


class Subscription(BaseModel):
    """Billing status as reported by the subscription provider."""

    status: str | None = None


class UserResponse(BaseModel):
    """GET /api/user response."""

    id: str | None = None
    email: str | None = None
    subscription: Subscription | None = None

    @property
    def is_subscribed(self) -> bool:
        return self.subscription is not None and self.subscription.status == SUBSCRIPTION_ACTIVE


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------


class TranscriptEntry(BaseModel):
    """A single timed transcript segment."""

    model_config = ConfigDict(frozen=True)

    text: str
    start: float
    duration: float


class TranscriptRequest(BaseModel):
    """POST /api/transcript request body."""

    model_config = ConfigDict(populate_by_name=True)

    video_url: str = Field(alias="videoUrl")


class TranscriptResponse(BaseModel):
    """POST /api/transcript response; a missing transcript means empty."""

    transcript: list[TranscriptEntry] = Field(default_factory=list)

    @field_validator("transcript", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


class AnalysisRequest(BaseModel):
    """POST /api/analyze request body."""

    transcript: list[TranscriptEntry]


class AnalysisResponse(BaseModel):
    """POST /api/analyze response."""

    analysis: str


class SaveAnalysisRequest(BaseModel):
    """POST /api/analyses request body."""

    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(alias="videoId")
    analysis: str


class SavedAnalysis(BaseModel):
    """A previously saved analysis returned by GET /api/analyses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    video_id: str = Field(alias="videoId")
    analysis: str
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if isinstance(value, int) else value


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------


class WorkflowStage(IntEnum):
    """Position of a dashboard run in the transcript -> analysis sequence."""

    IDLE = 0
    VALIDATING = 1
    FETCHING_TRANSCRIPT = 2
    EXTRACTING_TRANSCRIPT = 3
    PROCESSING_TRANSCRIPT = 4
    ANALYZING_TRANSCRIPT = 5

    @property
    def label(self) -> str:
        return _STAGE_LABELS[self]


_STAGE_LABELS = {
    WorkflowStage.IDLE: "Waiting for a video link",
    WorkflowStage.VALIDATING: "Validating URL",
    WorkflowStage.FETCHING_TRANSCRIPT: "Fetching video details",
    WorkflowStage.EXTRACTING_TRANSCRIPT: "Extracting transcript",
    WorkflowStage.PROCESSING_TRANSCRIPT: "Processing data",
    WorkflowStage.ANALYZING_TRANSCRIPT: "Analyzing transcript",
}

TOTAL_STAGES = int(max(WorkflowStage))
