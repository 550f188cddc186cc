"""
Donation request repository.

Encapsulates all Supabase queries for the `donation_requests` table and
the `complete_donation` database function.

Status changes are conditional updates: the UPDATE filters on the status
the request is expected to be in, and an empty result means another
request changed it first.
"""

import uuid
from typing import Any, Optional

from shared.repository import BaseRepository
from modules.users.models import BloodType
from .models import DonationRequest, RequestStatus

REQUESTS_TABLE = "donation_requests"
COMPLETE_DONATION_FN = "complete_donation"


def _is_valid_id(request_id: str) -> bool:
    """Request IDs are UUIDs; anything else cannot match a row."""
    try:
        uuid.UUID(request_id)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


class DonationRequestRepository(BaseRepository[DonationRequest]):
    """
    Repository for donation request data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership and roles.
    """

    def create(self, data: dict[str, Any]) -> DonationRequest:
        """
        Insert a new request.

        The database assigns id and created_at.
        """
        query = self._db.table(REQUESTS_TABLE).insert(data)
        result = self._execute(query, "create request")
        return self._map_to_request(result.data[0])

    def get_by_id(self, request_id: str) -> Optional[DonationRequest]:
        """Get a request by ID, or None if it does not exist."""
        if not _is_valid_id(request_id):
            return None
        query = self._db.table(REQUESTS_TABLE).select("*").eq("id", request_id)
        result = self._execute(query, "get request")
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def list_active(self, blood_type: Optional[BloodType] = None) -> list[DonationRequest]:
        """
        List active requests, most recent first.

        Args:
            blood_type: Optional exact blood type filter.
        """
        query = (
            self._db.table(REQUESTS_TABLE)
            .select("*")
            .eq("status", RequestStatus.ACTIVE.value)
        )
        if blood_type:
            query = query.eq("blood_type", blood_type.value)

        result = self._execute(query.order("created_at", desc=True), "list active requests")
        return [self._map_to_request(r) for r in result.data]

    def list_by_recipient(self, recipient_id: str) -> list[DonationRequest]:
        """List requests created by a recipient, most recent first."""
        return self._list_by("recipient_id", recipient_id)

    def list_by_donor(self, donor_id: str) -> list[DonationRequest]:
        """List requests a donor has responded to, most recent first."""
        return self._list_by("donor_id", donor_id)

    def transition(
        self,
        request_id: str,
        expected_status: RequestStatus,
        changes: dict[str, Any],
    ) -> Optional[DonationRequest]:
        """
        Update a request only if it is still in expected_status.

        Args:
            request_id: The request UUID.
            expected_status: Status the row must have for the update to apply.
            changes: Column values to write (including the new status).

        Returns:
            The updated request, or None if no row matched.
        """
        if not _is_valid_id(request_id):
            return None
        query = (
            self._db.table(REQUESTS_TABLE)
            .update(changes)
            .eq("id", request_id)
            .eq("status", expected_status.value)
        )
        result = self._execute(query, "update request status")
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def complete(self, request_id: str, recipient_id: str) -> Optional[DonationRequest]:
        """
        Complete a donation atomically.

        Calls the complete_donation function, which in one transaction
        marks the request completed and stamps the donor's
        last_donation_date. If the donor row cannot be updated the
        function raises and neither write is kept.

        Returns:
            The completed request, or None if it was not pending
            confirmation for this recipient.
        """
        if not _is_valid_id(request_id):
            return None
        query = self._db.rpc(
            COMPLETE_DONATION_FN,
            {"p_request_id": request_id, "p_recipient_id": recipient_id},
        )
        result = self._execute(query, "complete donation")
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _list_by(self, column: str, user_id: str) -> list[DonationRequest]:
        query = (
            self._db.table(REQUESTS_TABLE)
            .select("*")
            .eq(column, user_id)
            .order("created_at", desc=True)
        )
        result = self._execute(query, f"list requests by {column}")
        return [self._map_to_request(r) for r in result.data]

    def _map_to_request(self, data: dict[str, Any]) -> DonationRequest:
        """Map database row to DonationRequest model."""
        donor_id = data.get("donor_id")
        return DonationRequest(
            id=str(data["id"]),
            recipient_id=str(data["recipient_id"]),
            blood_type=BloodType(data["blood_type"]),
            location=data["location"],
            urgency=data["urgency"],
            status=RequestStatus(data["status"]),
            donor_id=str(donor_id) if donor_id else None,
            created_at=data["created_at"],
            cancelled_at=data.get("cancelled_at"),
            completed_at=data.get("completed_at"),
        )
