"""Subscription gate for the dashboard.

The user record is resolved each time the dashboard is entered. Only a
record whose subscription status is exactly ``"active"`` unlocks the
workflow; anything else, including a failed lookup, falls back to the
upsell view.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from tubebrief.core.models import UserResponse
from tubebrief.services.api_client import APIClient, APIError

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load data"


class GateView(StrEnum):
    """Which dashboard view the gate allows."""

    loading = "loading"
    upsell = "upsell"
    dashboard = "dashboard"


def is_subscribed(user: UserResponse | None) -> bool:
    """Derived access flag; recompute from the record instead of caching it."""
    return user is not None and user.is_subscribed


@dataclass(frozen=True)
class GateState:
    """Result of the mount-time user lookup."""

    user: UserResponse | None = None
    loading: bool = True
    error: str | None = None

    @property
    def view(self) -> GateView:
        if self.loading:
            return GateView.loading
        if self.error is None and is_subscribed(self.user):
            return GateView.dashboard
        return GateView.upsell


async def resolve_subscription(client: APIClient) -> GateState:
    """Fetch the current user and return the resolved gate state.

    Lookup failures never raise: they are reported through ``error`` and
    keep the gate closed.
    """
    try:
        user = await client.get_user()
    except APIError as exc:
        logger.warning("User lookup failed (%s): %s", exc.category, exc.message)
        return GateState(loading=False, error=exc.message or LOAD_FAILED)
    except Exception:
        logger.exception("Unexpected failure while resolving subscription")
        return GateState(loading=False, error=LOAD_FAILED)

    status = user.subscription.status if user.subscription else None
    logger.info("Resolved user %s with subscription status %r", user.id, status)
    return GateState(user=user, loading=False)
