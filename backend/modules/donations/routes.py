"""
Donation request API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from api.middleware.auth import get_current_user
from api.dependencies import get_donation_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IDonationService
from .models import (
    CreateDonationRequest,
    CreateDonationResponse,
    DonationRequest,
    parse_blood_type_filter,
)

router = APIRouter()


@router.post("", response_model=CreateDonationResponse, status_code=201)
async def create_request(
    request: CreateDonationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDonationService = Depends(get_donation_service),
) -> CreateDonationResponse:
    """Create a new blood donation request."""
    created = await service.create_request(user.id, request)
    return CreateDonationResponse(message="Request created successfully", id=created.id)


@router.get("", response_model=list[DonationRequest])
async def list_active_requests(
    blood_type: Optional[str] = Query(
        default=None,
        alias="bloodType",
        description="Only return requests for this blood type (e.g. A+)",
    ),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDonationService = Depends(get_donation_service),
) -> list[DonationRequest]:
    """
    List active requests, most recent first.

    An empty list is returned when nothing matches.
    """
    return await service.list_active(parse_blood_type_filter(blood_type))


@router.get("/my-requests", response_model=list[DonationRequest])
async def list_my_requests(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDonationService = Depends(get_donation_service),
) -> list[DonationRequest]:
    """
    List the current user's requests.

    Recipients get the requests they created; donors get the requests
    they responded to.
    """
    return await service.list_mine(user.id)


@router.post("/{request_id}/respond", response_model=MessageResponse)
async def respond_to_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDonationService = Depends(get_donation_service),
) -> MessageResponse:
    """Respond to an active request as a donor."""
    await service.respond(user.id, request_id)
    return MessageResponse(message="Response recorded. Awaiting recipient confirmation.")


@router.delete("/{request_id}", response_model=MessageResponse)
async def cancel_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDonationService = Depends(get_donation_service),
) -> MessageResponse:
    """Cancel one of your own active requests."""
    await service.cancel(user.id, request_id)
    return MessageResponse(message="Request cancelled successfully.")


@router.post("/{request_id}/complete", response_model=MessageResponse)
async def complete_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDonationService = Depends(get_donation_service),
) -> MessageResponse:
    """
    Confirm that the bound donor has donated.

    Marks the request completed and records the donor's donation date
    in one transaction.
    """
    await service.complete(user.id, request_id)
    return MessageResponse(message="Donation completed successfully.")
