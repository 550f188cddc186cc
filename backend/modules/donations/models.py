"""
Donation request data models.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import Field, field_validator

from modules.users.models import BloodType, normalize_blood_type
from shared.models import CamelModel

from .exceptions import InvalidBloodTypeError


class RequestStatus(str, Enum):
    """Donation request lifecycle status."""

    ACTIVE = "active"                              # Open for donor response
    PENDING_CONFIRMATION = "pending_confirmation"  # Donor bound, awaiting recipient
    COMPLETED = "completed"                        # Donation confirmed
    CANCELLED = "cancelled"                        # Withdrawn by recipient


class DonationRequest(CamelModel):
    """A blood donation request as stored and returned to clients."""

    id: str = Field(..., description="Request ID (UUID)")
    recipient_id: str = Field(..., description="User who created the request")
    blood_type: BloodType = Field(..., description="Blood type needed")
    location: str = Field(..., description="Where the donation is needed")
    urgency: str = Field(..., description="Urgency label, e.g. 'high'")
    status: RequestStatus = Field(..., description="Lifecycle status")
    donor_id: Optional[str] = Field(None, description="Responding donor, once bound")
    created_at: datetime = Field(..., description="Creation time (server-assigned)")
    cancelled_at: Optional[datetime] = Field(None, description="When cancelled")
    completed_at: Optional[datetime] = Field(None, description="When completed")


class CreateDonationRequest(CamelModel):
    """Request body for POST /api/requests."""

    blood_type: BloodType
    location: str = Field(..., min_length=1, max_length=500)
    urgency: str = Field(..., min_length=1, max_length=50)

    @field_validator("blood_type", mode="before")
    @classmethod
    def clean_blood_type(cls, value: Any) -> Any:
        return normalize_blood_type(value)

    @field_validator("location", "urgency")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class CreateDonationResponse(CamelModel):
    """Response body for a created request."""

    message: str
    id: str


def parse_blood_type_filter(value: Optional[str]) -> Optional[BloodType]:
    """
    Parse the optional ?bloodType= listing filter.

    Raises:
        InvalidBloodTypeError: If the value is not a known blood type
    """
    if value is None or value == "":
        return None
    try:
        return BloodType(normalize_blood_type(value))
    except ValueError:
        raise InvalidBloodTypeError(value)
