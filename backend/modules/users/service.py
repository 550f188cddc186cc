"""
Profile service implementation.

Registration spans two systems (Supabase Auth and the `users` table)
that cannot share a transaction, so a failed profile write is undone by
deleting the identity account that was just created.
"""

import logging
from typing import Any

from modules.auth.interfaces import IIdentityService

from .interfaces import IProfileService
from .models import RegisterRequest, UpdateProfileRequest, UserProfile, UserRole
from .repository import ProfileRepository
from .exceptions import (
    BloodTypeRequiredError,
    EmptyProfileUpdateError,
    ProfileNotFoundError,
)

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """Profile service backed by Supabase Auth and the users table."""

    def __init__(self, repository: ProfileRepository, identity: IIdentityService):
        self._repository = repository
        self._identity = identity

    async def register(self, request: RegisterRequest) -> str:
        """Create the identity account, then the profile row."""
        if request.role == UserRole.DONOR and request.blood_type is None:
            raise BloodTypeRequiredError()

        user_id = await self._identity.create_account(
            email=request.email,
            password=request.password,
            name=request.name,
        )

        data: dict[str, Any] = {
            "id": user_id,
            "name": request.name,
            "email": request.email,
            "role": request.role.value,
        }
        if request.role == UserRole.DONOR:
            data["blood_type"] = request.blood_type.value
            data["last_donation_date"] = None

        try:
            self._repository.create(data)
        except Exception:
            logger.error(
                "Profile write failed for new account %s, removing the account",
                user_id,
            )
            await self._rollback_account(user_id)
            raise

        logger.info("Registered %s %s (%s)", request.role.value, request.name, user_id)
        return user_id

    async def get_profile(self, user_id: str) -> UserProfile:
        profile = self._repository.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def update_profile(
        self,
        user_id: str,
        request: UpdateProfileRequest,
    ) -> UserProfile:
        fields = request.to_update_fields()
        if not fields:
            raise EmptyProfileUpdateError()

        current = await self.get_profile(user_id)
        if current.role == UserRole.RECIPIENT and fields.pop("blood_type", None):
            # Recipients carry no blood type.
            logger.info("Ignoring blood type update for recipient %s", user_id)
            if not fields:
                raise EmptyProfileUpdateError()

        profile = self._repository.update(user_id, fields)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        logger.info("Updated profile %s fields=%s", user_id, sorted(fields))
        return profile

    async def _rollback_account(self, user_id: str) -> None:
        """Delete an identity account whose profile could not be written."""
        try:
            await self._identity.delete_account(user_id)
        except Exception:
            # The profile write error is what the caller sees.
            logger.critical(
                "Could not remove identity account %s after failed registration; "
                "it has no profile and must be deleted manually",
                user_id,
                exc_info=True,
            )
