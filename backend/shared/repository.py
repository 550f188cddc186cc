"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating store failures into
ExternalServiceError so nothing above the repository sees PostgREST types.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() wrapper that maps store errors to ExternalServiceError
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class ProfileRepository(BaseRepository[UserProfile]):
            def get_by_id(self, user_id: str) -> Optional[UserProfile]:
                query = self._db.table("users").select("*").eq("id", user_id)
                result = self._execute(query, "get profile")
                if not result.data:
                    return None
                return self._map_to_profile(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            query: Any builder exposing execute() (table query or rpc call).
            operation: Short description used in logs and error details.

        Returns:
            The PostgREST response object.

        Raises:
            ExternalServiceError: If the store rejects the query or is unreachable.
        """
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error("Database operation failed (%s): %s", operation, e)
            raise ExternalServiceError(
                "Database operation failed",
                service="supabase",
                code="DATABASE_ERROR",
                details={"operation": operation},
            ) from e
