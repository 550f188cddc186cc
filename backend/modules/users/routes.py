"""
Registration and profile endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IProfileService
from .models import (
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
    UserProfile,
)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IProfileService = Depends(get_profile_service),
) -> RegisterResponse:
    """
    Register a new donor or recipient.

    Donors must include a blood type.
    """
    uid = await service.register(request)
    return RegisterResponse(message="User created successfully!", uid=uid)


@router.get("/profile", response_model=UserProfile)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> UserProfile:
    """Get the current user's profile."""
    return await service.get_profile(user.id)


@router.put("/profile", response_model=MessageResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """
    Update the current user's profile.

    email and role cannot be changed and are ignored if sent.
    """
    await service.update_profile(user.id, request)
    return MessageResponse(message="Profile updated!")
