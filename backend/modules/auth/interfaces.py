"""
Authentication module interface.

Other modules should depend on IIdentityService, not the concrete implementation.
This enables testing with mocks and swapping the identity provider.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IIdentityService(Protocol):
    """
    Interface for identity-provider operations.

    Covers the three things the backend needs from the provider:
    verifying bearer tokens, creating accounts at registration, and
    deleting an account when registration has to be rolled back.
    """

    async def verify_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def create_account(self, email: str, password: str, name: str) -> str:
        """
        Create an identity account.

        Returns:
            The new account's user ID

        Raises:
            AccountCreationError: If the provider rejects the request
        """
        ...

    async def delete_account(self, user_id: str) -> None:
        """
        Delete an identity account.

        Raises:
            AccountDeletionError: If the provider call fails
        """
        ...
