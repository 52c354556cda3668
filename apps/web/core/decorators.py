"""
Decorators for request handling and validation.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest, JsonResponse

from .exceptions import APIError, AuthError
from .responses import error_response
from .tokens import resolve_token

logger = logging.getLogger(__name__)


def handles_errors(message: str) -> Callable[..., Any]:
    """
    Decorator that turns exceptions into JSON error responses.

    APIError subclasses keep their own status and message. Anything else is
    logged with its traceback and surfaced as a 500 carrying `message`, so
    internals never leak to the caller.

    Usage:
        @handles_errors("Failed to load cart")
        def cart(request):
            ...
    """

    def decorator(view_func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
            try:
                return view_func(request, *args, **kwargs)
            except APIError as e:
                return error_response(e.message, status=e.status, details=e.details)
            except Exception:
                logger.exception("%s %s: %s", request.method, request.path, message)
                return error_response(message, status=500)

        return wrapper

    return decorator


def token_required(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator that requires a valid `Authorization: Bearer <token>` header.

    On success the resolved user id is attached as request.user_id, which
    UserScopedManager.for_user() reads. Place it inside handles_errors so
    AuthError becomes a 401.

    Usage:
        @handles_errors("Failed to load orders")
        @token_required
        def orders(request):
            ...
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        # Lazy import to avoid circular dependency
        from .models import User

        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme != "Bearer" or not token.strip():
            raise AuthError(AuthError.NO_TOKEN)

        user_id = resolve_token(token.strip())
        if not User.objects.filter(pk=user_id, is_active=True).exists():
            raise AuthError(AuthError.INVALID_TOKEN)

        request.user_id = user_id  # type: ignore[attr-defined]
        return view_func(request, *args, **kwargs)

    return wrapper
