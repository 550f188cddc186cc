"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock
import jwt  # PyJWT

from fastapi.testclient import TestClient

from api import app
from api.dependencies import (
    get_donation_service,
    get_identity_service,
    get_profile_service,
    reset_container,
)
from modules.donations.service import DonationService
from modules.users.service import ProfileService
from modules.auth.service import IdentityService
from tests.fakes import (
    FakeDonationRequestRepository,
    FakeIdentityService,
    FakeProfileRepository,
)


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token shaped like a Supabase access token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers_for(user_id: str) -> dict[str, str]:
    """Authorization headers carrying a valid token for user_id."""
    return {"Authorization": f"Bearer {create_test_token(user_id=user_id)}"}


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def identity_service() -> IdentityService:
    """Identity service verifying tokens with the test secret."""
    return IdentityService(client=MagicMock(), jwt_secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_headers(test_user_id: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return auth_headers_for(test_user_id)


@pytest.fixture
def profile_repository():
    """In-memory profile store."""
    return FakeProfileRepository()


@pytest.fixture
def donation_repository(profile_repository):
    """In-memory donation request store sharing the profile store."""
    return FakeDonationRequestRepository(profile_repository)


@pytest.fixture
def fake_identity():
    """Identity service that records account creation and deletion."""
    return FakeIdentityService()


@pytest.fixture
def client(identity_service, fake_identity, profile_repository, donation_repository):
    """
    Test client with the real services wired to in-memory stores.

    Tokens are verified with the test secret; account creation goes to
    the fake identity service.
    """
    profiles = ProfileService(repository=profile_repository, identity=fake_identity)
    donations = DonationService(repository=donation_repository, profiles=profiles)

    app.dependency_overrides[get_identity_service] = lambda: identity_service
    app.dependency_overrides[get_profile_service] = lambda: profiles
    app.dependency_overrides[get_donation_service] = lambda: donations
    yield TestClient(app)
    app.dependency_overrides.clear()
