"""Header Decisions — authorization and media-type predicates.

Invariants:
    - A present but empty Authorization header counts as present
    - forbidden: missing header → 401, wrong value → 403, exact VALID_TOKEN → 200
    - VALID_TOKEN comparison is ordinal (byte-for-byte, case-sensitive)
    - Accept check is a case-sensitive substring test, no q-value parsing
    - Content-Type check is a case-insensitive whole-value equality
      ("application/json; charset=utf-8" is rejected)
"""

from statuslab.core.domain_types import JSON_MEDIA_TYPE, VALID_TOKEN, VALIDATED_CREATED_ID
from statuslab.core.outcomes import StatusOutcome, created, respond

MISSING_AUTHORIZATION = "Unauthorized: Missing Authorization header."


def decide_authorization_present(authorization: str | None) -> StatusOutcome:
    if authorization is None:
        return respond(401, MISSING_AUTHORIZATION)
    return respond(200, "Authorization header present.")


def decide_token(authorization: str | None) -> StatusOutcome:
    """401 when the header is missing, 403 when it's the wrong token."""
    if authorization is None:
        return respond(401, MISSING_AUTHORIZATION)
    if authorization != VALID_TOKEN:
        return respond(403, "Forbidden: Invalid token.")
    return respond(200, "Valid token provided.")


def decide_negotiation(accept: str | None) -> StatusOutcome:
    if accept is None or JSON_MEDIA_TYPE not in accept:
        return respond(
            406,
            "Not Acceptable: Only application/json responses are supported.",
        )
    return respond(200, "Content negotiation successful. You accept JSON.")


def is_json_media_type(content_type: str | None) -> bool:
    return content_type is not None and content_type.lower() == JSON_MEDIA_TYPE


def decide_validated_content(
    content_type: str | None, name: str | None,
) -> StatusOutcome:
    """415 on any other media type, then 400 without a name, else 201."""
    if not is_json_media_type(content_type):
        return respond(
            415, "Unsupported Media Type: Only application/json is accepted.",
        )
    if not name:
        return respond(400, "Bad Request: 'Name' is required.")
    return created("Resource created", VALIDATED_CREATED_ID, resource={"name": name})
