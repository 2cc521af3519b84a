"""
Asynchronous HTTP client for the TubeBrief web backend.

Uses ``httpx.AsyncClient`` so the dashboard workflow can await each call.
Streamlit pages drive it through ``asyncio.run`` and open a fresh client
per run (see ``tubebrief.ui.utils.run_with_client``).
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from tubebrief.core.config import get_settings
from tubebrief.core.models import (
    AnalysisRequest,
    AnalysisResponse,
    SaveAnalysisRequest,
    SavedAnalysis,
    TranscriptEntry,
    TranscriptRequest,
    TranscriptResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_saved_list_adapter = TypeAdapter(list[SavedAnalysis])


class APIError(Exception):
    """User-friendly API error with categorized message.

    Categories: "connection", "timeout", "http", "network", "payload", and
    "auth" when there is no signed-in identity to send.
    ``status_code`` is set only for "http" errors.
    """

    def __init__(
        self,
        message: str,
        category: str = "unknown",
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.category = category
        self.status_code = status_code
        super().__init__(message)


def error_message_from(response: httpx.Response, default: str) -> str:
    """Pick the server-supplied error text out of a failed response.

    Looks at the ``error`` key first, then ``detail``; falls back to
    ``default`` when the body is not JSON or carries neither.
    """
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict):
        for key in ("error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return default


class APIClient:
    """Thin async wrapper around httpx for the user, transcript, analysis
    and saved-analyses endpoints.

    All methods return validated pydantic models or raise ``APIError`` with
    a message suitable for display in the UI.

    Use as an async context manager so the connection pool is closed on the
    event loop that opened it::

        async with APIClient("http://localhost:3000") as client:
            user = await client.get_user()
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        analysis_timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Backend base URL; defaults to ``Settings.api_base_url``.
            token: Bearer token; defaults to ``Settings.api_token``.
            timeout: Default per-request timeout in seconds.
            analysis_timeout: Timeout for ``analyze_transcript``.
            headers: Extra headers sent on every request; an
                ``Authorization`` entry here replaces the service token.
            transport: Custom httpx transport (tests use ``ASGITransport``).
        """
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._analysis_timeout = analysis_timeout or settings.analysis_timeout

        default_headers = {"Accept": "application/json"}
        token = settings.api_token if token is None else token
        if token:
            default_headers["Authorization"] = f"Bearer {token}"
        default_headers.update(headers or {})

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=default_headers,
            timeout=timeout or settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        default_message: str,
        **kwargs,
    ) -> httpx.Response:
        """Execute an HTTP request with user-friendly error handling.

        Args:
            method: HTTP method name ("GET", "POST").
            path: API endpoint path (e.g. "/api/transcript").
            default_message: Shown when a failed response carries no
                ``error``/``detail`` text of its own.
            **kwargs: Passed through to httpx (json, params, timeout, etc.).

        Raises:
            APIError: On connection, timeout, HTTP status, or network errors.
        """
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.ConnectError:
            raise APIError(
                f"Backend service is unreachable at {self._base_url}",
                category="connection",
            ) from None
        except httpx.TimeoutException:
            raise APIError(
                "Request timed out. The server may be overloaded.",
                category="timeout",
            ) from None
        except httpx.HTTPError as exc:
            raise APIError(f"Network error: {exc}", category="network") from None

        if resp.is_error:
            message = error_message_from(resp, default_message)
            logger.warning("%s %s failed with %s: %s", method, path, resp.status_code, message)
            raise APIError(message, category="http", status_code=resp.status_code)
        return resp

    @staticmethod
    def _parse(resp: httpx.Response, model: type[ModelT], default_message: str) -> ModelT:
        try:
            return model.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("Unexpected %s payload: %s", model.__name__, exc)
            raise APIError(default_message, category="payload") from None

    # -- user --

    async def get_user(self) -> UserResponse:
        """Resolve the signed-in user and their subscription status."""
        message = "Failed to fetch user data"
        resp = await self._request("GET", "/api/user", message)
        return self._parse(resp, UserResponse, message)

    # -- transcript --

    async def fetch_transcript(self, video_url: str) -> TranscriptResponse:
        message = "Failed to fetch transcript"
        body = TranscriptRequest(video_url=video_url).model_dump(by_alias=True)
        resp = await self._request("POST", "/api/transcript", message, json=body)
        return self._parse(resp, TranscriptResponse, message)

    # -- analysis --

    async def analyze_transcript(self, transcript: Sequence[TranscriptEntry]) -> AnalysisResponse:
        """Send the transcript entries for AI analysis (uses the longer timeout)."""
        message = "Failed to analyze transcript"
        body = AnalysisRequest(transcript=list(transcript)).model_dump()
        resp = await self._request(
            "POST", "/api/analyze", message, json=body, timeout=self._analysis_timeout
        )
        return self._parse(resp, AnalysisResponse, message)

    # -- saved analyses --

    async def list_saved_analyses(self, limit: int | None = None) -> list[SavedAnalysis]:
        message = "Failed to load saved analyses"
        params = {"limit": limit} if limit else None
        resp = await self._request("GET", "/api/analyses", message, params=params)
        try:
            return _saved_list_adapter.validate_python(resp.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("Unexpected saved analyses payload: %s", exc)
            raise APIError(message, category="payload") from None

    async def save_analysis(self, video_id: str, analysis: str) -> SavedAnalysis:
        message = "Failed to save analysis"
        body = SaveAnalysisRequest(video_id=video_id, analysis=analysis).model_dump(by_alias=True)
        resp = await self._request("POST", "/api/analyses", message, json=body)
        return self._parse(resp, SavedAnalysis, message)
