"""
Donation request state machine.

    active ──respond──▶ pending_confirmation ──complete──▶ completed
      │
      └──cancel──▶ cancelled

completed and cancelled are terminal.
"""

from .models import DonationRequest, RequestStatus
from .exceptions import InvalidRequestStateError

ALLOWED_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.ACTIVE: frozenset(
        {RequestStatus.PENDING_CONFIRMATION, RequestStatus.CANCELLED}
    ),
    RequestStatus.PENDING_CONFIRMATION: frozenset({RequestStatus.COMPLETED}),
    RequestStatus.COMPLETED: frozenset(),
    RequestStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)

# Statuses in which a donor is bound to the request.
DONOR_BOUND_STATUSES = frozenset(
    {RequestStatus.PENDING_CONFIRMATION, RequestStatus.COMPLETED}
)


def can_transition(current: RequestStatus, target: RequestStatus) -> bool:
    """Whether the state machine allows current -> target."""
    return target in ALLOWED_TRANSITIONS[current]


def required_status(target: RequestStatus) -> RequestStatus:
    """
    The single status a request must be in to move to target.

    Every reachable status has exactly one predecessor, which is what
    the conditional updates filter on.
    """
    sources = [s for s, targets in ALLOWED_TRANSITIONS.items() if target in targets]
    if len(sources) != 1:
        raise ValueError(f"{target.value} has no unique source status")
    return sources[0]


def ensure_transition(request: DonationRequest, target: RequestStatus) -> None:
    """
    Check that request may move to target.

    Raises:
        InvalidRequestStateError: If the transition is not allowed
    """
    if not can_transition(request.status, target):
        raise InvalidRequestStateError(request.id, request.status.value, target.value)
