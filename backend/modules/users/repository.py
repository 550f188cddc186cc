"""
Profile repository for the `users` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import BloodType, UserProfile, UserRole

USERS_TABLE = "users"


class ProfileRepository(BaseRepository[UserProfile]):
    """
    Repository for user profile rows.

    Note: This repository does NOT perform authorization checks.
    Callers pass the authenticated user's own ID.
    """

    def create(self, data: dict[str, Any]) -> UserProfile:
        """
        Insert a profile row.

        Args:
            data: Column values including the identity-provider `id`.

        Returns:
            The stored profile.
        """
        query = self._db.table(USERS_TABLE).insert(data)
        result = self._execute(query, "create profile")
        return self._map_to_profile(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a profile by user ID, or None if it does not exist."""
        query = self._db.table(USERS_TABLE).select("*").eq("id", user_id)
        result = self._execute(query, "get profile")
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def update(self, user_id: str, fields: dict[str, Any]) -> Optional[UserProfile]:
        """
        Merge-update a profile.

        Returns:
            The updated profile, or None if no row matched.
        """
        query = self._db.table(USERS_TABLE).update(fields).eq("id", user_id)
        result = self._execute(query, "update profile")
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        blood_type = data.get("blood_type")
        return UserProfile(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            role=UserRole(data["role"]),
            blood_type=BloodType(blood_type) if blood_type else None,
            last_donation_date=data.get("last_donation_date"),
            created_at=data.get("created_at"),
        )
