"""
User profile module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class ProfileNotFoundError(NotFoundError):
    """Raised when a user has no profile row."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class BloodTypeRequiredError(ValidationError):
    """Raised when a donor registers without a blood type."""

    def __init__(self):
        super().__init__(
            "Blood type is required for donors.",
            code="BLOOD_TYPE_REQUIRED",
        )


class EmptyProfileUpdateError(ValidationError):
    """Raised when an update carries no updatable fields."""

    def __init__(self):
        super().__init__(
            "No updatable profile fields provided.",
            code="EMPTY_PROFILE_UPDATE",
        )
