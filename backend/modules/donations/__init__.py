"""
Donations module.

Handles the blood donation request lifecycle.

Public API:
- IDonationService: Interface for request operations
- DonationRequest: A stored request
- CreateDonationRequest: Request to create a donation request
- RequestStatus: Lifecycle status
- Lifecycle exceptions
"""

from .interfaces import IDonationService
from .models import (
    CreateDonationRequest,
    CreateDonationResponse,
    DonationRequest,
    RequestStatus,
    parse_blood_type_filter,
)
from .lifecycle import (
    ALLOWED_TRANSITIONS,
    DONOR_BOUND_STATUSES,
    TERMINAL_STATUSES,
    can_transition,
)
from .exceptions import (
    DonationRequestNotFoundError,
    RequestUnavailableError,
    DonationRequestAccessDeniedError,
    NotADonorError,
    OwnRequestResponseError,
    InvalidRequestStateError,
    InvalidBloodTypeError,
)

__all__ = [
    # Interface
    "IDonationService",
    # Models
    "CreateDonationRequest",
    "CreateDonationResponse",
    "DonationRequest",
    "RequestStatus",
    "parse_blood_type_filter",
    # Lifecycle
    "ALLOWED_TRANSITIONS",
    "DONOR_BOUND_STATUSES",
    "TERMINAL_STATUSES",
    "can_transition",
    # Exceptions
    "DonationRequestNotFoundError",
    "RequestUnavailableError",
    "DonationRequestAccessDeniedError",
    "NotADonorError",
    "OwnRequestResponseError",
    "InvalidRequestStateError",
    "InvalidBloodTypeError",
]
