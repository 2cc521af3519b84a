"""
TubeBrief exception hierarchy.

Domain failures raised while driving the dashboard workflow inherit from
TubeBriefError so the orchestrator can turn them into a user-facing message.
Transport failures live in ``tubebrief.services.api_client.APIError``.
"""


class TubeBriefError(Exception):
    """Base exception for all TubeBrief errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "TUBEBRIEF_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        super().__init__(detail)


class InvalidVideoURLError(TubeBriefError):
    """Raised when no video identifier can be extracted from a link."""

    def __init__(self, detail: str = "Invalid YouTube URL") -> None:
        super().__init__(detail=detail, code="INVALID_VIDEO_URL")


class TranscriptUnavailableError(TubeBriefError):
    """Raised when the transcript backend answers with an empty transcript."""

    def __init__(self, detail: str = "No transcript available for this video") -> None:
        super().__init__(detail=detail, code="TRANSCRIPT_UNAVAILABLE")


class WorkflowStateError(TubeBriefError):
    """Raised when an event would break the workflow's stage ordering."""

    def __init__(self, detail: str = "Invalid workflow transition") -> None:
        super().__init__(detail=detail, code="WORKFLOW_STATE_ERROR")
