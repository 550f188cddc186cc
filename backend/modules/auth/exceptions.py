"""
Authentication module exceptions.

Token failures all answer with the same generic message so a client
cannot learn why a credential was rejected; the reason goes to the log.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, ExternalServiceError

UNAUTHORIZED_MESSAGE = "Unauthorized. Please log in."


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid, malformed or expired."""

    def __init__(self, message: str = UNAUTHORIZED_MESSAGE):
        super().__init__(message, code="INVALID_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no JWT secret to verify tokens with."""

    def __init__(self):
        super().__init__(UNAUTHORIZED_MESSAGE, code="AUTH_NOT_CONFIGURED")


class AccountCreationError(ExternalServiceError):
    """
    Raised when the identity provider refuses to create an account.

    The provider's error code (e.g. email_exists) becomes the response
    `error` field so clients can tell a taken email from an outage.
    """

    def __init__(self, provider_code: Optional[str] = None):
        super().__init__(
            "Error creating user",
            service="supabase_auth",
            code=provider_code or "ACCOUNT_CREATION_FAILED",
            details={"provider_code": provider_code},
        )


class AccountDeletionError(ExternalServiceError):
    """Raised when an identity account could not be removed."""

    def __init__(self, user_id: str):
        super().__init__(
            "Error deleting user account",
            service="supabase_auth",
            code="ACCOUNT_DELETION_FAILED",
            details={"user_id": user_id},
        )
