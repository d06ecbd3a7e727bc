"""Query Decisions — predicates over query-string values.

Invariants:
    - badrequest accepts exactly the 32-bit signed integers (optional sign,
      ASCII whitespace padding allowed), nothing else
    - toomany rejects strictly above RATE_LIMIT; the limit itself is accepted
    - Repeated calls with the same arguments return equal outcomes
"""

import re

from statuslab.core.domain_types import INT32_MAX, INT32_MIN, RATE_LIMIT
from statuslab.core.outcomes import StatusOutcome, respond

# Padding is ASCII whitespace only (tab, LF, VT, FF, CR, space).
_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*")


def parse_int32(value: str) -> int | None:
    """Parse a 32-bit integer or return None. Rejects '1_000', '1.0', '٣'."""
    if not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def decide_query_value(value: str | None) -> StatusOutcome:
    if not value:
        return respond(400, "Bad Request: 'value' query parameter is required.")
    if parse_int32(value) is None:
        return respond(400, "Bad Request: 'value' must be an integer.")
    return respond(200, "Valid query parameter received.")


def decide_rate(requests: int) -> StatusOutcome:
    if requests > RATE_LIMIT:
        return respond(429, "Too Many Requests: Rate limit exceeded.")
    return respond(200, "Request accepted.", requests=requests)
