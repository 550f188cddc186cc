"""
Donations module interface.

This is the core business logic interface: the request lifecycle.
The API layer depends on IDonationService for all request operations.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import BloodType
from .models import CreateDonationRequest, DonationRequest


@runtime_checkable
class IDonationService(Protocol):
    """
    Interface for donation request operations.

    Lifecycle: active -> pending_confirmation -> completed, or
    active -> cancelled. completed and cancelled are terminal.
    """

    async def create_request(
        self,
        recipient_id: str,
        request: CreateDonationRequest,
    ) -> DonationRequest:
        """
        Create a new request in ACTIVE status with no donor.

        Returns:
            The created request, including its store-assigned ID
        """
        ...

    async def list_active(
        self,
        blood_type: Optional[BloodType] = None,
    ) -> list[DonationRequest]:
        """
        List active requests, most recent first.

        Args:
            blood_type: Optional exact blood type filter
        """
        ...

    async def list_mine(self, user_id: str) -> list[DonationRequest]:
        """
        List the caller's requests, most recent first.

        Recipients see requests they created; donors see requests they
        responded to.

        Raises:
            ProfileNotFoundError: If the caller has no profile
        """
        ...

    async def respond(self, donor_id: str, request_id: str) -> DonationRequest:
        """
        Bind a donor to an active request.

        Moves the request to PENDING_CONFIRMATION. Of two donors racing
        for the same request, exactly one succeeds.

        Raises:
            ProfileNotFoundError: If the caller has no profile
            ForbiddenError: If the caller is not a donor or owns the request
            NotFoundError: If the request is missing or not active
        """
        ...

    async def cancel(self, user_id: str, request_id: str) -> DonationRequest:
        """
        Cancel an active request.

        Raises:
            NotFoundError: If the request doesn't exist
            ForbiddenError: If the caller didn't create the request
            InvalidStateError: If the request is not active
        """
        ...

    async def complete(self, user_id: str, request_id: str) -> DonationRequest:
        """
        Confirm a donation.

        Atomically marks the request completed and sets the donor's
        last donation date.

        Raises:
            NotFoundError: If the request doesn't exist
            ForbiddenError: If the caller didn't create the request
            InvalidStateError: If the request is not pending confirmation
            InternalError: If the transaction fails (nothing is written)
        """
        ...
