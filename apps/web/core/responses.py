"""
JSON request/response helpers shared by the API views.
"""

import json
from typing import Any, TypeVar

from django.http import HttpRequest, JsonResponse

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

_M = TypeVar("_M", bound=BaseModel)


def json_response(data: Any, status: int = 200) -> JsonResponse:
    """Create a JSON response; lists are allowed at the top level."""
    return JsonResponse(data, status=status, safe=False)


def error_response(
    message: str, status: int, details: list[dict[str, Any]] | None = None
) -> JsonResponse:
    """Create the error body every API route uses."""
    body: dict[str, Any] = {"message": message}
    if details:
        body["details"] = details
    return json_response(body, status=status)


def dump(model: BaseModel) -> dict[str, Any]:
    """Serialize a contract model with its camelCase wire names."""
    return model.model_dump(mode="json", by_alias=True)


def parse_body(request: HttpRequest, schema: type[_M]) -> _M:
    """
    Decode and validate a JSON request body.

    An empty body counts as {} so schemas with defaults still apply.

    Raises:
        ValidationError: On undecodable JSON or schema violations.
    """
    try:
        body = json.loads(request.body or b"{}")
    except json.JSONDecodeError as exc:
        raise ValidationError("Invalid JSON in request body") from exc

    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        return schema.model_validate(body)
    except PydanticValidationError as e:
        details = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        raise ValidationError("Invalid request body", details=details) from e
