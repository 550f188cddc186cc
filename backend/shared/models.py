"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for models that cross the HTTP boundary.

    Fields are snake_case in Python and camelCase on the wire; input
    accepts either spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by mutating endpoints."""

    message: str


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection. Application roles
    (donor/recipient) live on the profile, not here.
    """

    id: str = Field(..., description="User ID (UUID from Supabase Auth)")
    email: Optional[str] = Field(None, description="User's email address")
    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
