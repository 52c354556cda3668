"""
Pytest configuration for Django app tests.
"""

from django.test import Client as DjangoClient

import pytest

from apps.web.core.models import User
from apps.web.core.tokens import issue_token


@pytest.fixture
def api_client() -> DjangoClient:
    """Django test client for API requests."""
    return DjangoClient()


@pytest.fixture
def user() -> User:
    """Create a test customer account."""
    return User.objects.create_user(
        email="asha@example.com",
        name="Asha",
        password="testpass123",
    )


@pytest.fixture
def other_user() -> User:
    """A second account, for isolation checks."""
    return User.objects.create_user(
        email="ravi@example.com",
        name="Ravi",
        password="testpass456",
    )


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    """Headers carrying a session token for `user`."""
    return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(user)}"}


@pytest.fixture
def other_auth_headers(other_user: User) -> dict[str, str]:
    return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(other_user)}"}
