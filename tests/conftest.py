"""Shared pytest fixtures for the TubeBrief test suite.

Provides transcript payloads, a fake web backend (a small FastAPI app that
mimics the user / transcript / analysis / saved-analyses endpoints) and an
APIClient wired to it through ``httpx.ASGITransport``.
"""

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from httpx import ASGITransport

from tubebrief.core.config import get_settings
from tubebrief.services.api_client import APIClient

VIDEO_URL = "https://youtu.be/dQw4w9WgXcQ"
VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def transcript_payload():
    return [
        {"text": "Never gonna give you up", "start": 0.0, "duration": 2.5},
        {"text": "Never gonna let you down", "start": 2.5, "duration": 2.4},
    ]


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------


class FakeBackend:
    """Configurable stand-in for the external web backend.

    Each ``*_reply`` attribute is either ``(status_code, json_body)`` or a
    ready-made ``Response``. Every request is appended to ``requests`` as
    ``(method, path, json_body_or_None, headers)``.
    """

    def __init__(self) -> None:
        self.user_reply = (
            200,
            {"id": "user_1", "email": "viewer@example.com", "subscription": {"status": "active"}},
        )
        self.transcript_reply = (200, {"transcript": [{"text": "hi", "start": 0, "duration": 1}]})
        self.analysis_reply = (200, {"analysis": "summary"})
        self.saved_reply = (
            200,
            [
                {
                    "id": 1,
                    "videoId": VIDEO_ID,
                    "analysis": "An earlier briefing",
                    "createdAt": "2026-10-01T12:00:00Z",
                }
            ],
        )
        self.requests: list[tuple[str, str, dict | None, dict]] = []
        self.app = self._build_app()

    @staticmethod
    def _respond(reply) -> Response:
        if isinstance(reply, Response):
            return reply
        status_code, body = reply
        return JSONResponse(status_code=status_code, content=body)

    async def _record(self, request: Request) -> dict | None:
        body = await request.json() if request.method == "POST" else None
        self.requests.append(
            (request.method, request.url.path, body, dict(request.headers))
        )
        return body

    def paths(self) -> list[str]:
        return [path for _method, path, _body, _headers in self.requests]

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.get("/api/user")
        async def user(request: Request):
            await self._record(request)
            return self._respond(self.user_reply)

        @app.post("/api/transcript")
        async def transcript(request: Request):
            await self._record(request)
            return self._respond(self.transcript_reply)

        @app.post("/api/analyze")
        async def analyze(request: Request):
            await self._record(request)
            return self._respond(self.analysis_reply)

        @app.get("/api/analyses")
        async def list_analyses(request: Request):
            await self._record(request)
            return self._respond(self.saved_reply)

        @app.post("/api/analyses")
        async def save_analysis(request: Request):
            body = await self._record(request)
            return JSONResponse(
                status_code=201,
                content={"id": "saved_2", **body, "createdAt": "2026-10-19T09:30:00Z"},
            )

        return app


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
async def api_client(backend):
    """APIClient talking to the fake backend in-process."""
    client = APIClient(
        base_url="http://test",
        token="",
        transport=ASGITransport(app=backend.app),
    )
    yield client
    await client.aclose()
