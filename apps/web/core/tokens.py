"""
Session tokens - signed, time-limited credentials carrying the user id.

Tokens are produced with django.core.signing, so they are tamper-evident
and carry their own timestamp. Nothing is stored server-side.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from django.conf import settings
from django.core import signing

from .exceptions import AuthError

if TYPE_CHECKING:
    from .models import User

TOKEN_SALT = "apps.web.core.tokens.session"


def issue_token(user: "User") -> str:
    """Sign a session token for the given user."""
    return signing.dumps(
        {"uid": user.pk},
        key=settings.SESSION_TOKEN_SECRET,
        salt=TOKEN_SALT,
    )


def resolve_token(token: str) -> int:
    """
    Verify a session token and return the user id it carries.

    Raises:
        AuthError: If the signature is bad, the token expired, or the
            payload has no user id.
    """
    try:
        payload = signing.loads(
            token,
            key=settings.SESSION_TOKEN_SECRET,
            salt=TOKEN_SALT,
            max_age=timedelta(days=settings.SESSION_TOKEN_MAX_AGE_DAYS),
        )
    except signing.BadSignature as exc:  # SignatureExpired is a subclass
        raise AuthError(AuthError.INVALID_TOKEN) from exc

    user_id = payload.get("uid") if isinstance(payload, dict) else None
    if not isinstance(user_id, int):
        raise AuthError(AuthError.INVALID_TOKEN)
    return user_id
