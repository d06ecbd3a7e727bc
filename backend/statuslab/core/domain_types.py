"""Domain Types — named values shared by the decision functions.

Invariants:
    - ResourceId wraps int — the only resource that "exists" is EXISTING_RESOURCE_ID
    - Literal comparisons (token, duplicate name) live here, nowhere else
    - All simulated upstream failures encoded as an Enum — no raw status integers in routes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Fixed ids for conflict/unprocessable/validate-content mirror the simulated creations
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ResourceId = NewType("ResourceId", int)

EXISTING_RESOURCE_ID = ResourceId(1)
CONFLICT_CREATED_ID = ResourceId(2)
UNPROCESSABLE_CREATED_ID = ResourceId(3)
VALIDATED_CREATED_ID = ResourceId(1)


# ─── Literals ────────────────────────────────────────────────────

VALID_TOKEN = "Bearer VALID_TOKEN"
DUPLICATE_NAME = "Duplicate"
JSON_MEDIA_TYPE = "application/json"
MIN_NAME_LENGTH = 3
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
RATE_LIMIT = 5


# ─── Enums ───────────────────────────────────────────────────────

class UpstreamFault(int, Enum):
    """Backend failures simulated by an explicit boolean flag."""
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504


class RedirectKind(int, Enum):
    """Permanent redirects — they differ only in method preservation."""
    MOVED_PERMANENTLY = 301     # clients may downgrade POST to GET
    PERMANENT_REDIRECT = 308    # clients must reuse the original method
