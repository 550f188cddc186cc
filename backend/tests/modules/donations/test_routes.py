"""Tests for the donation request endpoints."""

import pytest

from modules.users.models import BloodType, UserRole
from tests.conftest import auth_headers_for

RECIPIENT = "recipient-1"
DONOR = "donor-1"
OTHER_DONOR = "donor-2"


@pytest.fixture
def users(profile_repository):
    profile_repository.add(RECIPIENT, UserRole.RECIPIENT)
    profile_repository.add(DONOR, UserRole.DONOR, BloodType.O_NEGATIVE)
    profile_repository.add(OTHER_DONOR, UserRole.DONOR, BloodType.A_POSITIVE)


def _create(client, blood_type="O-", user_id=RECIPIENT) -> str:
    response = client.post(
        "/api/requests",
        json={"bloodType": blood_type, "location": "City Hospital", "urgency": "high"},
        headers=auth_headers_for(user_id),
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestAuthRequired:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("post", "/api/requests"),
            ("get", "/api/requests"),
            ("get", "/api/requests/my-requests"),
            ("post", "/api/requests/some-id/respond"),
            ("delete", "/api/requests/some-id"),
            ("post", "/api/requests/some-id/complete"),
        ],
    )
    def test_missing_token(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
        assert response.json()["message"] == "No token provided"

    def test_invalid_token(self, client):
        response = client.get(
            "/api/requests",
            headers={"Authorization": "Bearer garbage"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized. Please log in."


class TestCreateAndList:
    def test_create(self, client, users, donation_repository):
        response = client.post(
            "/api/requests",
            json={"bloodType": "O-", "location": "City Hospital", "urgency": "high"},
            headers=auth_headers_for(RECIPIENT),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Request created successfully"
        row = donation_repository.rows[body["id"]]
        assert row["status"] == "active"
        assert row["recipient_id"] == RECIPIENT

    def test_create_missing_fields(self, client, users, donation_repository):
        response = client.post(
            "/api/requests",
            json={"bloodType": "O-"},
            headers=auth_headers_for(RECIPIENT),
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("Missing or invalid fields.")
        assert donation_repository.rows == {}

    def test_list_active(self, client, users):
        older = _create(client, "O-")
        newer = _create(client, "A+")

        response = client.get("/api/requests", headers=auth_headers_for(DONOR))

        assert response.status_code == 200
        body = response.json()
        assert [r["id"] for r in body] == [newer, older]
        assert body[0]["bloodType"] == "A+"
        assert body[0]["recipientId"] == RECIPIENT
        assert body[0]["status"] == "active"

    def test_list_filtered(self, client, users):
        _create(client, "O-")
        match = _create(client, "A+")

        response = client.get(
            "/api/requests",
            params={"bloodType": "A+"},
            headers=auth_headers_for(DONOR),
        )

        assert [r["id"] for r in response.json()] == [match]

    def test_list_filter_with_unescaped_plus(self, client, users):
        match = _create(client, "A+")

        response = client.get("/api/requests?bloodType=A+", headers=auth_headers_for(DONOR))

        assert [r["id"] for r in response.json()] == [match]

    def test_list_filter_no_match(self, client, users):
        _create(client, "O-")

        response = client.get(
            "/api/requests",
            params={"bloodType": "B-"},
            headers=auth_headers_for(DONOR),
        )

        assert response.status_code == 200
        assert response.json() == []

    def test_list_filter_unknown(self, client, users):
        response = client.get(
            "/api/requests",
            params={"bloodType": "X"},
            headers=auth_headers_for(DONOR),
        )
        assert response.status_code == 400

    def test_my_requests(self, client, users):
        mine = _create(client)
        client.post(f"/api/requests/{mine}/respond", headers=auth_headers_for(DONOR))

        as_recipient = client.get("/api/requests/my-requests", headers=auth_headers_for(RECIPIENT))
        as_donor = client.get("/api/requests/my-requests", headers=auth_headers_for(DONOR))
        as_other = client.get("/api/requests/my-requests", headers=auth_headers_for(OTHER_DONOR))

        assert [r["id"] for r in as_recipient.json()] == [mine]
        assert as_donor.json()[0]["donorId"] == DONOR
        assert as_other.json() == []


class TestLifecycle:
    def test_happy_path(self, client, users, donation_repository, profile_repository):
        request_id = _create(client)

        responded = client.post(
            f"/api/requests/{request_id}/respond",
            headers=auth_headers_for(DONOR),
        )
        assert responded.status_code == 200
        assert responded.json()["message"] == (
            "Response recorded. Awaiting recipient confirmation."
        )

        completed = client.post(
            f"/api/requests/{request_id}/complete",
            headers=auth_headers_for(RECIPIENT),
        )
        assert completed.status_code == 200
        assert completed.json()["message"] == "Donation completed successfully."

        assert donation_repository.rows[request_id]["status"] == "completed"
        assert profile_repository.rows[DONOR]["last_donation_date"] is not None

        profile = client.get("/api/profile", headers=auth_headers_for(DONOR)).json()
        assert profile["lastDonationDate"] is not None

    def test_respond_after_cancel(self, client, users):
        request_id = _create(client)

        cancelled = client.delete(
            f"/api/requests/{request_id}",
            headers=auth_headers_for(RECIPIENT),
        )
        assert cancelled.status_code == 200
        assert cancelled.json()["message"] == "Request cancelled successfully."

        response = client.post(
            f"/api/requests/{request_id}/respond",
            headers=auth_headers_for(DONOR),
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Request not found or is no longer active."

    def test_second_responder_gets_404(self, client, users):
        request_id = _create(client)
        client.post(f"/api/requests/{request_id}/respond", headers=auth_headers_for(DONOR))

        response = client.post(
            f"/api/requests/{request_id}/respond",
            headers=auth_headers_for(OTHER_DONOR),
        )
        assert response.status_code == 404

    def test_recipient_cannot_respond(self, client, users):
        request_id = _create(client)

        response = client.post(
            f"/api/requests/{request_id}/respond",
            headers=auth_headers_for(RECIPIENT),
        )
        assert response.status_code == 403

    def test_cancel_by_other_user(self, client, users, donation_repository):
        request_id = _create(client)

        response = client.delete(
            f"/api/requests/{request_id}",
            headers=auth_headers_for(DONOR),
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Unauthorized to cancel this request."
        assert donation_repository.rows[request_id]["status"] == "active"

    def test_cancel_missing(self, client, users):
        response = client.delete(
            "/api/requests/does-not-exist",
            headers=auth_headers_for(RECIPIENT),
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Request not found."

    def test_cancel_pending(self, client, users):
        request_id = _create(client)
        client.post(f"/api/requests/{request_id}/respond", headers=auth_headers_for(DONOR))

        response = client.delete(
            f"/api/requests/{request_id}",
            headers=auth_headers_for(RECIPIENT),
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Can only cancel active requests."

    def test_complete_active(self, client, users):
        request_id = _create(client)

        response = client.post(
            f"/api/requests/{request_id}/complete",
            headers=auth_headers_for(RECIPIENT),
        )
        assert response.status_code == 400
        assert response.json()["message"] == (
            "Request must be in pending_confirmation status to complete."
        )

    def test_complete_by_donor(self, client, users):
        request_id = _create(client)
        client.post(f"/api/requests/{request_id}/respond", headers=auth_headers_for(DONOR))

        response = client.post(
            f"/api/requests/{request_id}/complete",
            headers=auth_headers_for(DONOR),
        )
        assert response.status_code == 403

    def test_complete_store_failure(self, client, users, donation_repository, profile_repository):
        request_id = _create(client)
        client.post(f"/api/requests/{request_id}/respond", headers=auth_headers_for(DONOR))
        donation_repository.fail_complete = True

        response = client.post(
            f"/api/requests/{request_id}/complete",
            headers=auth_headers_for(RECIPIENT),
        )

        assert response.status_code == 500
        assert "details" not in response.json()
        assert donation_repository.rows[request_id]["status"] == "pending_confirmation"
        assert profile_repository.rows[DONOR]["last_donation_date"] is None
