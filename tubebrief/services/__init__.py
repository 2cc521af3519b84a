"""Backend-facing services: HTTP client, subscription gate, dashboard workflow."""

from tubebrief.services.api_client import APIClient, APIError
from tubebrief.services.subscription import GateState, GateView, is_subscribed, resolve_subscription
from tubebrief.services.workflow import WorkflowOrchestrator, WorkflowSnapshot, transition

__all__ = [
    "APIClient",
    "APIError",
    "GateState",
    "GateView",
    "WorkflowOrchestrator",
    "WorkflowSnapshot",
    "is_subscribed",
    "resolve_subscription",
    "transition",
]
