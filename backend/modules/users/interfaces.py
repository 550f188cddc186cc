"""
User profile module interface.
"""

from typing import Protocol, runtime_checkable

from .models import RegisterRequest, UpdateProfileRequest, UserProfile


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for registration and profile operations.

    The donations module depends on this to resolve a caller's role and
    to confirm that a responding user is a donor.
    """

    async def register(self, request: RegisterRequest) -> str:
        """
        Create an identity account and its paired profile.

        Returns:
            The new user's ID

        Raises:
            ValidationError: If a donor registers without a blood type
            InternalError: If the identity provider or the store fails
        """
        ...

    async def get_profile(self, user_id: str) -> UserProfile:
        """
        Get the profile for a user.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def update_profile(
        self,
        user_id: str,
        request: UpdateProfileRequest,
    ) -> UserProfile:
        """
        Apply a partial update to the user's profile.

        Raises:
            ValidationError: If no updatable fields were sent
            ProfileNotFoundError: If the user has no profile
        """
        ...
