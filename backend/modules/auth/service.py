"""
Identity service implementation.

Validates Supabase JWT tokens and manages accounts through the
Supabase Auth admin API.
"""

import logging
from datetime import datetime, timezone
import jwt
from pydantic import ValidationError as PayloadValidationError
from supabase import Client

from shared.models import AuthenticatedUser

from .interfaces import IIdentityService
from .models import JWTPayload
from .exceptions import (
    AccountCreationError,
    AccountDeletionError,
    AuthNotConfiguredError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class IdentityService(IIdentityService):
    """
    Supabase-backed identity service.

    Tokens are verified locally with the project's JWT secret; account
    management goes through the service-role client.
    """

    def __init__(self, client: Client, jwt_secret: str):
        self._client = client
        self._jwt_secret = jwt_secret

    async def verify_token(self, token: str) -> AuthenticatedUser:
        """Validate a Supabase JWT and return the authenticated user."""
        if not token:
            raise MissingTokenError()

        if not self._jwt_secret:
            logger.error("Token verification attempted without SUPABASE_JWT_SECRET")
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
                options={"require": ["exp", "iat", "sub"]},
            )
            jwt_payload = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            logger.info("Token verification failed: token expired")
            raise InvalidTokenError()
        except jwt.InvalidTokenError as e:
            logger.info("Token verification failed: %s", e)
            raise InvalidTokenError()
        except PayloadValidationError as e:
            logger.info("Token verification failed: %d invalid claims", e.error_count())
            raise InvalidTokenError()

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
        )

    async def create_account(self, email: str, password: str, name: str) -> str:
        """Create a confirmed Supabase Auth user and return its ID."""
        try:
            response = self._client.auth.admin.create_user(
                {
                    "email": email,
                    "password": password,
                    "email_confirm": True,
                    "user_metadata": {"name": name},
                }
            )
        except Exception as e:
            provider_code = getattr(e, "code", None)
            logger.error("Error creating identity account for %s: %s", email, e)
            raise AccountCreationError(provider_code) from e

        return str(response.user.id)

    async def delete_account(self, user_id: str) -> None:
        """Delete a Supabase Auth user."""
        try:
            self._client.auth.admin.delete_user(user_id)
        except Exception as e:
            logger.error("Error deleting identity account %s: %s", user_id, e)
            raise AccountDeletionError(user_id) from e
