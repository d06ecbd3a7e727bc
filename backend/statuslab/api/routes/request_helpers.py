"""Request Helpers — explicit body and header reading for the status code routes.

Invariants:
    - read_resource_request is only called after the Content-Type check passed
    - Empty or malformed bodies raise InvalidRequestBodyError (→ 400), never 500
    - Repeated headers are seen as one comma-joined value, never only the first
"""

from fastapi import Request
from pydantic import ValidationError

from statuslab.core.errors import ErrorContext, InvalidRequestBodyError
from statuslab.schemas.resource import ResourceRequest


async def read_resource_request(request: Request) -> ResourceRequest:
    """Decode the raw body into a ResourceRequest."""
    raw = await request.body()
    if not raw.strip():
        raise InvalidRequestBodyError(
            "A JSON request body is required.",
            ErrorContext(path=request.url.path),
        )
    try:
        return ResourceRequest.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidRequestBodyError(
            "Request body must be a JSON object with an optional string 'name'.",
            ErrorContext(path=request.url.path, field_name="name"),
        ) from e


def joined_header(request: Request, name: str) -> str | None:
    """All values of a repeated header joined with ',' (None when absent)."""
    values = request.headers.getlist(name)
    if not values:
        return None
    return ",".join(values)
