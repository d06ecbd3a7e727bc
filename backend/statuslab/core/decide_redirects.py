"""Redirect Decisions — unconditional permanent redirects.

Invariants:
    - 301 and 308 outcomes carry no body, only a location
    - The target URL is supplied by the caller (settings or router), never built here
"""

from statuslab.core.domain_types import RedirectKind
from statuslab.core.outcomes import StatusOutcome, redirect, respond


def decide_redirect(kind: RedirectKind, location: str) -> StatusOutcome:
    if not location:
        raise ValueError("redirect location must not be empty")
    return redirect(kind.value, location)


def decide_target() -> StatusOutcome:
    return respond(200, "POST processed correctly at target endpoint.")
