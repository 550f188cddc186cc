"""
Donations module exceptions.
"""

from shared.exceptions import (
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)


class DonationRequestNotFoundError(NotFoundError):
    """Raised when a donation request does not exist."""

    def __init__(self, request_id: str):
        super().__init__(
            "Request not found.",
            code="REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class RequestUnavailableError(NotFoundError):
    """
    Raised when responding to a request that is missing or not active.

    Both cases share one error so that non-active requests are
    indistinguishable from missing ones.
    """

    def __init__(self, request_id: str):
        super().__init__(
            "Request not found or is no longer active.",
            code="REQUEST_UNAVAILABLE",
            details={"request_id": request_id},
        )


class DonationRequestAccessDeniedError(ForbiddenError):
    """Raised when someone other than the recipient acts on a request."""

    def __init__(self, request_id: str, action: str):
        super().__init__(
            f"Unauthorized to {action} this request.",
            code="REQUEST_ACCESS_DENIED",
            details={"request_id": request_id, "action": action},
        )


class NotADonorError(ForbiddenError):
    """Raised when a non-donor tries to respond to a request."""

    def __init__(self, user_id: str):
        super().__init__(
            "Only donors can respond to requests.",
            code="NOT_A_DONOR",
            details={"user_id": user_id},
        )


class OwnRequestResponseError(ForbiddenError):
    """Raised when a user responds to a request they created."""

    def __init__(self, request_id: str):
        super().__init__(
            "You cannot respond to your own request.",
            code="OWN_REQUEST",
            details={"request_id": request_id},
        )


class InvalidRequestStateError(InvalidStateError):
    """Raised when a transition is not allowed from the current status."""

    _MESSAGES = {
        "cancelled": "Can only cancel active requests.",
        "completed": "Request must be in pending_confirmation status to complete.",
        "pending_confirmation": "Request is no longer active.",
    }

    def __init__(self, request_id: str, current: str, target: str):
        super().__init__(
            self._MESSAGES.get(target, f"Cannot move request from {current} to {target}."),
            code="INVALID_REQUEST_STATE",
            details={
                "request_id": request_id,
                "current_status": current,
                "target_status": target,
            },
        )


class InvalidBloodTypeError(ValidationError):
    """Raised for an unknown blood type filter value."""

    def __init__(self, value: str):
        super().__init__(
            f"Unknown blood type: {value!r}",
            code="INVALID_BLOOD_TYPE",
            details={"blood_type": value},
        )
