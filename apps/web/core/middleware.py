"""
CORS middleware - lets the browser client call the JSON API.
"""

from collections.abc import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse


class CorsMiddleware:
    """
    Middleware that adds CORS headers to /api/ responses.

    Preflight (OPTIONS) requests are answered directly with 200 so the
    views never see them.
    """

    ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
    ALLOWED_HEADERS = "Authorization, Content-Type"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        # Only the API is cross-origin
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        if request.method == "OPTIONS":
            response = HttpResponse(status=200)
        else:
            response = self.get_response(request)

        for key, value in self._cors_headers().items():
            response[key] = value
        return response

    def _cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": settings.CORS_ALLOWED_ORIGIN,
            "Access-Control-Allow-Methods": self.ALLOWED_METHODS,
            "Access-Control-Allow-Headers": self.ALLOWED_HEADERS,
        }
