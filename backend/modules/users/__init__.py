"""
Users module.

Handles registration and user profiles.

Public API:
- IProfileService: Interface for profile operations
- UserProfile, UserRole, BloodType: Profile models
- ProfileNotFoundError and validation exceptions
"""

from .interfaces import IProfileService
from .models import (
    BloodType,
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
    UserProfile,
    UserRole,
    normalize_blood_type,
)
from .exceptions import (
    ProfileNotFoundError,
    BloodTypeRequiredError,
    EmptyProfileUpdateError,
)

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "BloodType",
    "RegisterRequest",
    "RegisterResponse",
    "UpdateProfileRequest",
    "UserProfile",
    "UserRole",
    "normalize_blood_type",
    # Exceptions
    "ProfileNotFoundError",
    "BloodTypeRequiredError",
    "EmptyProfileUpdateError",
]
