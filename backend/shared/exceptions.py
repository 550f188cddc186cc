"""
Base exception classes for the DonorLink backend.

Each module should define its own exceptions that inherit from these bases.
Every class carries the HTTP status it maps to, so the API layer can
translate any of them into a JSON response without knowing the module.
"""

from typing import Optional, Any


class DonorLinkError(Exception):
    """
    Base exception for all DonorLink errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DonorLinkError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(DonorLinkError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class ForbiddenError(DonorLinkError):
    """Authenticated, but not allowed to act on this resource."""

    status_code = 403


class NotFoundError(DonorLinkError):
    """Resource not found."""

    status_code = 404


class InvalidStateError(DonorLinkError):
    """Resource exists but is in the wrong state for the operation."""

    status_code = 400


class InternalError(DonorLinkError):
    """Unexpected failure; the message returned to clients stays generic."""

    status_code = 500


class ExternalServiceError(InternalError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
