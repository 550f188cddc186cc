"""
Donation request service implementation.

Runs the request lifecycle on top of DonationRequestRepository. Checks
that can be answered from a read (existence, ownership, status) happen
first so callers get precise errors; the write itself is conditional on
the expected status, so a request that changed in between is never
overwritten.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.users.interfaces import IProfileService
from modules.users.models import BloodType, UserRole

from .interfaces import IDonationService
from .lifecycle import ensure_transition, required_status
from .models import CreateDonationRequest, DonationRequest, RequestStatus
from .repository import DonationRequestRepository
from .exceptions import (
    DonationRequestAccessDeniedError,
    DonationRequestNotFoundError,
    InvalidRequestStateError,
    NotADonorError,
    OwnRequestResponseError,
    RequestUnavailableError,
)

logger = logging.getLogger(__name__)


class DonationService(IDonationService):
    """Donation request lifecycle backed by Supabase."""

    def __init__(
        self,
        repository: DonationRequestRepository,
        profiles: IProfileService,
    ):
        self._repository = repository
        self._profiles = profiles

    async def create_request(
        self,
        recipient_id: str,
        request: CreateDonationRequest,
    ) -> DonationRequest:
        """Create a new active request."""
        created = self._repository.create(
            {
                "recipient_id": recipient_id,
                "blood_type": request.blood_type.value,
                "location": request.location,
                "urgency": request.urgency,
                "status": RequestStatus.ACTIVE.value,
                "donor_id": None,
            }
        )
        logger.info(
            "Request %s created by %s (%s, %s)",
            created.id,
            recipient_id,
            created.blood_type.value,
            created.urgency,
        )
        return created

    async def list_active(
        self,
        blood_type: Optional[BloodType] = None,
    ) -> list[DonationRequest]:
        requests = self._repository.list_active(blood_type)
        logger.debug(
            "Listed %d active requests (blood_type=%s)",
            len(requests),
            blood_type.value if blood_type else None,
        )
        return requests

    async def list_mine(self, user_id: str) -> list[DonationRequest]:
        profile = await self._profiles.get_profile(user_id)
        if profile.role == UserRole.RECIPIENT:
            return self._repository.list_by_recipient(user_id)
        return self._repository.list_by_donor(user_id)

    async def respond(self, donor_id: str, request_id: str) -> DonationRequest:
        """Bind the donor and move the request to pending confirmation."""
        profile = await self._profiles.get_profile(donor_id)
        if profile.role != UserRole.DONOR:
            raise NotADonorError(donor_id)

        current = self._repository.get_by_id(request_id)
        if current is None or current.status != RequestStatus.ACTIVE:
            raise RequestUnavailableError(request_id)
        if current.recipient_id == donor_id:
            raise OwnRequestResponseError(request_id)

        target = RequestStatus.PENDING_CONFIRMATION
        updated = self._repository.transition(
            request_id,
            required_status(target),
            {"status": target.value, "donor_id": donor_id},
        )
        if updated is None:
            # Another donor got there first.
            raise RequestUnavailableError(request_id)

        logger.info("Donor %s responded to request %s", donor_id, request_id)
        return updated

    async def cancel(self, user_id: str, request_id: str) -> DonationRequest:
        current = self._get_owned(user_id, request_id, action="cancel")
        target = RequestStatus.CANCELLED
        ensure_transition(current, target)

        updated = self._repository.transition(
            request_id,
            required_status(target),
            {
                "status": target.value,
                "cancelled_at": datetime.now(timezone.utc).isoformat(),
            },
        )
        if updated is None:
            raise InvalidRequestStateError(request_id, current.status.value, target.value)

        logger.info("Request %s cancelled by %s", request_id, user_id)
        return updated

    async def complete(self, user_id: str, request_id: str) -> DonationRequest:
        current = self._get_owned(user_id, request_id, action="complete")
        target = RequestStatus.COMPLETED
        ensure_transition(current, target)

        updated = self._repository.complete(request_id, user_id)
        if updated is None:
            raise InvalidRequestStateError(request_id, current.status.value, target.value)

        logger.info(
            "Request %s completed; donor %s last donation set to %s",
            request_id,
            updated.donor_id,
            updated.completed_at,
        )
        return updated

    def _get_owned(self, user_id: str, request_id: str, action: str) -> DonationRequest:
        """Load a request and check the caller created it."""
        request = self._repository.get_by_id(request_id)
        if request is None:
            raise DonationRequestNotFoundError(request_id)
        if request.recipient_id != user_id:
            logger.warning(
                "User %s tried to %s request %s owned by %s",
                user_id,
                action,
                request_id,
                request.recipient_id,
            )
            raise DonationRequestAccessDeniedError(request_id, action)
        return request
