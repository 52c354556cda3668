"""Tests for session token signing and verification."""

from django.core import signing

import pytest

from apps.web.core.exceptions import AuthError
from apps.web.core.tokens import TOKEN_SALT, issue_token, resolve_token


@pytest.mark.django_db
class TestSessionTokens:
    """Tests for issue_token / resolve_token."""

    def test_round_trip(self, user):
        assert resolve_token(issue_token(user)) == user.pk

    def test_tampered_token_is_rejected(self, user):
        token = issue_token(user)

        with pytest.raises(AuthError) as exc_info:
            resolve_token(token[:-2] + "xx")

        assert exc_info.value.message == AuthError.INVALID_TOKEN
        assert exc_info.value.status == 401

    def test_other_secret_is_rejected(self, user, settings):
        token = issue_token(user)
        settings.SESSION_TOKEN_SECRET = "rotated"

        with pytest.raises(AuthError):
            resolve_token(token)

    def test_expired_token_is_rejected(self, user, settings):
        token = issue_token(user)
        settings.SESSION_TOKEN_MAX_AGE_DAYS = -1

        with pytest.raises(AuthError) as exc_info:
            resolve_token(token)

        assert exc_info.value.message == AuthError.INVALID_TOKEN

    def test_payload_without_uid_is_rejected(self, settings):
        token = signing.dumps(
            {"sub": "someone"}, key=settings.SESSION_TOKEN_SECRET, salt=TOKEN_SALT
        )

        with pytest.raises(AuthError):
            resolve_token(token)
