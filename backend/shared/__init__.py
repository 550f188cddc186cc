"""
Shared infrastructure for DonorLink backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with store error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    DonorLinkError,
    ValidationError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    InvalidStateError,
    InternalError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, CamelModel, MessageResponse

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "DonorLinkError",
    "ValidationError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "InvalidStateError",
    "InternalError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "CamelModel",
    "MessageResponse",
]
