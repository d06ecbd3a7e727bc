"""Status Outcomes — the immutable result every decision function returns.

Invariants:
    - Exactly one StatusOutcome is selected per request
    - Outcomes are frozen; payload is copied into a read-only mapping
    - message is None only for body-less outcomes (204, redirects)

Design Decisions:
    - Frozen dataclass over Pydantic model: core/ stays free of framework imports
      (ADR: ExMA impureim sandwich)
    - created_id carried separately from payload: the emitter turns it into a
      Location header, the core never builds URLs
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class StatusOutcome:
    """A (status code, message, payload) triple selected by a predicate."""
    status_code: int
    message: str | None = None
    payload: Mapping[str, Any] = field(default_factory=dict)
    created_id: int | None = None
    location: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @property
    def has_body(self) -> bool:
        return self.message is not None

    @property
    def is_redirect(self) -> bool:
        return self.location is not None

    def body(self) -> dict[str, Any]:
        """JSON body: message first, then endpoint-specific fields."""
        return {"message": self.message, **self.payload}


def respond(status_code: int, message: str, **payload: Any) -> StatusOutcome:
    return StatusOutcome(status_code, message, payload)


def created(message: str, resource_id: int, **payload: Any) -> StatusOutcome:
    return StatusOutcome(201, message, payload, created_id=resource_id)


def no_content() -> StatusOutcome:
    return StatusOutcome(204)


def redirect(status_code: int, location: str) -> StatusOutcome:
    return StatusOutcome(status_code, location=location)
