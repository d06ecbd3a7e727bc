"""Response Documentation — OpenAPI `responses=` entries per route.

Invariants:
    - Every status code a route can emit is listed for that route
    - Codes with a JSON body reference MessageResponse; 204 and redirects do not
"""

from http import HTTPStatus
from typing import Any

from pydantic import BaseModel

_BODYLESS = {HTTPStatus.NO_CONTENT, HTTPStatus.MOVED_PERMANENTLY, HTTPStatus.PERMANENT_REDIRECT}


class MessageResponse(BaseModel):
    """Shape shared by every JSON outcome; extra fields vary per endpoint."""
    message: str


def status_responses(*codes: int) -> dict[int | str, dict[str, Any]]:
    """Build the `responses=` mapping for the given status codes."""
    responses: dict[int | str, dict[str, Any]] = {}
    for code in codes:
        status = HTTPStatus(code)
        entry: dict[str, Any] = {"description": status.phrase}
        if status not in _BODYLESS:
            entry["model"] = MessageResponse
        responses[code] = entry
    return responses
