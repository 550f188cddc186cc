"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations with their
collaborators passed in explicitly.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IIdentityService
    from modules.users.interfaces import IProfileService
    from modules.users.repository import ProfileRepository
    from modules.donations.interfaces import IDonationService
    from modules.donations.repository import DonationRequestRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the process. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._identity_service: "IIdentityService | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._profile_service: "IProfileService | None" = None
        self._donation_repository: "DonationRequestRepository | None" = None
        self._donation_service: "IDonationService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase service-role client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def identity(self) -> "IIdentityService":
        """Get the identity service instance."""
        if self._identity_service is None:
            from modules.auth.service import IdentityService
            from shared.config import get_settings
            self._identity_service = IdentityService(
                client=self.db,
                jwt_secret=get_settings().supabase_jwt_secret,
            )
        return self._identity_service

    @property
    def profile_repository(self) -> "ProfileRepository":
        """Get the profile repository instance."""
        if self._profile_repository is None:
            from modules.users.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.db)
        return self._profile_repository

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.users.service import ProfileService
            self._profile_service = ProfileService(
                repository=self.profile_repository,
                identity=self.identity,
            )
        return self._profile_service

    @property
    def donation_repository(self) -> "DonationRequestRepository":
        """Get the donation request repository instance."""
        if self._donation_repository is None:
            from modules.donations.repository import DonationRequestRepository
            self._donation_repository = DonationRequestRepository(self.db)
        return self._donation_repository

    @property
    def donations(self) -> "IDonationService":
        """Get the donation service instance."""
        if self._donation_service is None:
            from modules.donations.service import DonationService
            self._donation_service = DonationService(
                repository=self.donation_repository,
                profiles=self.profiles,
            )
        return self._donation_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._identity_service = None
        self._profile_repository = None
        self._profile_service = None
        self._donation_repository = None
        self._donation_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_identity_service() -> "IIdentityService":
    """FastAPI dependency for the identity service."""
    return get_container().identity


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for the profile service."""
    return get_container().profiles


def get_donation_service() -> "IDonationService":
    """FastAPI dependency for the donation service."""
    return get_container().donations
