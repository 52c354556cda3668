"""
Auth API views - registration and login.

Both return {token, user}; the token is then sent as
`Authorization: Bearer <token>` to the per-user endpoints.
"""

import logging

from django.db import IntegrityError
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from foodcourt_schemas import AuthResponse, AuthUser

from apps.web.accounts.serializers import LoginRequest, RegisterRequest
from apps.web.core.decorators import handles_errors
from apps.web.core.exceptions import ValidationError
from apps.web.core.models import User
from apps.web.core.responses import json_response, parse_body
from apps.web.core.tokens import issue_token

logger = logging.getLogger(__name__)

# Same answer for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid email or password"


def _auth_response(user: User) -> JsonResponse:
    """Issue a session token and wrap it with the public user fields."""
    response = AuthResponse(
        token=issue_token(user),
        user=AuthUser(id=str(user.pk), name=user.name, email=user.email),
    )
    return json_response(response.model_dump(mode="json"))


@csrf_exempt
@require_POST
@handles_errors("Failed to register")
def register(request: HttpRequest) -> JsonResponse:
    """
    POST /api/auth/register

    Request body: {name, email, password}
    Response: {token, user} or 400
    """
    body = parse_body(request, RegisterRequest)
    if not body.is_complete:
        raise ValidationError("All fields are required")

    users = User.objects
    email = users.normalize_email(body.email.strip())

    if users.filter(email=email).exists():
        raise ValidationError("Email already in use")

    try:
        user = users.create_user(
            email=email, name=body.name.strip(), password=body.password
        )
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        raise ValidationError("Email already in use") from e

    logger.info("Registered user %s", user.pk)
    return _auth_response(user)


@csrf_exempt
@require_POST
@handles_errors("Failed to login")
def login(request: HttpRequest) -> JsonResponse:
    """
    POST /api/auth/login

    Request body: {email, password}
    Response: {token, user} or 400 with a message that does not reveal
    which of the two was wrong.
    """
    body = parse_body(request, LoginRequest)
    users = User.objects

    user = users.filter(
        email=users.normalize_email(body.email.strip()), is_active=True
    ).first()
    if user is None or not user.check_password(body.password):
        raise ValidationError(INVALID_CREDENTIALS)

    return _auth_response(user)
