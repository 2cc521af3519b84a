"""UI utility functions."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import streamlit as st

from tubebrief.core.config import get_settings
from tubebrief.services.api_client import APIClient, APIError
from tubebrief.services.subscription import GateState, resolve_subscription
from tubebrief.services.workflow import Reset, WorkflowSnapshot, transition

logger = logging.getLogger(__name__)

T = TypeVar("T")

GATE_STATE_KEY = "gate_state"
IDENTITY_MISSING = "Could not identify your account. Please sign out and sign in again."


def is_signed_in() -> bool:
    """Signed-in flag from Streamlit's OIDC auth (False when auth is not configured)."""
    return bool(st.user.get("is_logged_in", False))


def identity_headers() -> dict[str, str] | None:
    """Headers that tell the backend who the signed-in user is.

    The provider's token is forwarded as the bearer when Streamlit exposes it
    (``expose_tokens`` in the ``[auth]`` config). Otherwise the OIDC ``sub``
    and ``email`` claims are sent as ``X-User-Id`` / ``X-User-Email``.
    Returns None when there is no signed-in user or nothing to identify them.
    """
    user = st.user
    if not user.get("is_logged_in", False):
        return None

    tokens = getattr(user, "tokens", None) or {}
    token = tokens.get("id") or tokens.get("access")
    if token:
        return {"Authorization": f"Bearer {token}"}

    headers = {}
    if user.get("sub"):
        headers["X-User-Id"] = str(user.get("sub"))
    if user.get("email"):
        headers["X-User-Email"] = str(user.get("email"))
    return headers or None


def run_with_client(func: Callable[[APIClient], Awaitable[T]]) -> T:
    """Run ``func`` with a fresh APIClient on a one-off event loop.

    Streamlit scripts are synchronous, and an ``httpx.AsyncClient`` must be
    closed on the loop that opened it, so every call gets its own client.
    The client carries the signed-in user's identity on every request.

    Raises:
        APIError: Category "auth" when there is no identity to forward;
            no request is made.
    """
    identity = identity_headers()
    if identity is None:
        raise APIError(IDENTITY_MISSING, category="auth")

    settings = get_settings()
    base_url = st.session_state.get("api_base_url") or settings.api_base_url

    async def _runner() -> T:
        async with APIClient(base_url=base_url, headers=identity) as client:
            return await func(client)

    return asyncio.run(_runner())


def resolve_gate() -> GateState:
    """Resolve the subscription gate for the current user; never raises."""
    try:
        return run_with_client(resolve_subscription)
    except APIError as exc:
        logger.warning("Subscription check skipped (%s): %s", exc.category, exc.message)
        return GateState(user=None, loading=False, error=exc.message)


def forget_gate_state(on_dashboard: bool) -> None:
    """Drop the cached gate whenever another page is shown.

    Coming back to the dashboard then re-checks the subscription, so a user
    who subscribes (or signs out) in the meantime sees the current state.
    """
    if not on_dashboard:
        st.session_state.pop(GATE_STATE_KEY, None)


def reset_workflow() -> None:
    """Return the dashboard run to its initial state and clear save feedback."""
    current = st.session_state.get("workflow") or WorkflowSnapshot()
    st.session_state["workflow"] = transition(current, Reset())
    st.session_state.pop("_saved_video_id", None)
    st.session_state.pop("_save_error", None)
