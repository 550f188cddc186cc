"""
Bearer-token authentication dependency.

Extracts the Authorization header and hands the token to the identity
service. Failures raise AuthenticationError subclasses, which the app's
exception handler turns into 401 responses.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IIdentityService
from shared.models import AuthenticatedUser

from ..dependencies import get_identity_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    identity: IIdentityService = Depends(get_identity_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    return await identity.verify_token(credentials.credentials)
