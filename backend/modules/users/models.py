"""
User profile data models.

Profiles are stored in the `users` table keyed by the Supabase Auth
user ID. Donors additionally carry a blood type and the date of their
most recent completed donation.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import EmailStr, Field, field_validator

from shared.models import CamelModel


class UserRole(str, Enum):
    """Application role chosen at registration."""

    DONOR = "donor"
    RECIPIENT = "recipient"


class BloodType(str, Enum):
    """ABO/Rh blood groups."""

    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"


_ABO_GROUPS = ("A", "B", "AB", "O")


def normalize_blood_type(value: Any) -> Any:
    """
    Normalize free-form blood type input before enum validation.

    Trims and upper-cases the value. An unescaped "+" in a query string
    arrives as a space, so "A " is read as "A+".
    """
    if isinstance(value, BloodType) or not isinstance(value, str):
        return value
    text = value.lstrip().upper()
    stripped = text.rstrip()
    if stripped in _ABO_GROUPS and text != stripped:
        return stripped + "+"
    return stripped


class UserProfile(CamelModel):
    """A user's stored profile."""

    id: str = Field(..., description="User ID (Supabase Auth UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    role: UserRole = Field(..., description="donor or recipient")
    blood_type: Optional[BloodType] = Field(None, description="Donor blood type")
    last_donation_date: Optional[datetime] = Field(
        None,
        description="When the donor last completed a donation",
    )
    created_at: Optional[datetime] = Field(None, description="Profile creation time")


class RegisterRequest(CamelModel):
    """Request body for POST /api/register."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    name: str = Field(..., min_length=1, max_length=200)
    role: UserRole
    blood_type: Optional[BloodType] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("blood_type", mode="before")
    @classmethod
    def clean_blood_type(cls, value: Any) -> Any:
        if value == "":
            return None
        return normalize_blood_type(value)


class RegisterResponse(CamelModel):
    """Response body for a successful registration."""

    message: str
    uid: str


class UpdateProfileRequest(CamelModel):
    """
    Partial profile update.

    Only name and blood type can change here. email and role are
    immutable after registration; they, and any unknown fields, are
    dropped during parsing.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    blood_type: Optional[BloodType] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("blood_type", mode="before")
    @classmethod
    def clean_blood_type(cls, value: Any) -> Any:
        return normalize_blood_type(value)

    def to_update_fields(self) -> dict[str, Any]:
        """Column/value pairs for the fields the client actually sent."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)
