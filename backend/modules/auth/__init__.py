"""
Authentication module.

Handles JWT validation and identity-account management.

Public API:
- IIdentityService: Interface for identity operations
- IdentityService: Supabase implementation
- JWTPayload: Decoded token claims
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IIdentityService
from .service import IdentityService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    AccountCreationError,
    AccountDeletionError,
)

__all__ = [
    # Interface
    "IIdentityService",
    "IdentityService",
    # Models
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "AccountCreationError",
    "AccountDeletionError",
]
