"""Resource Decisions — pure predicates for the simulated resource endpoints.

Invariants:
    - Nothing is stored: create/delete/conflict only describe what would happen
    - Every 201 outcome carries created_id; the caller turns it into a Location header
    - resource payload echoes the request as {"name": ...}

Design Decisions:
    - Functions take plain values (name, id) instead of request objects: core/
      never imports schemas or FastAPI (ADR: ExMA impureim sandwich)
"""

from statuslab.core.domain_types import (
    CONFLICT_CREATED_ID,
    DUPLICATE_NAME,
    EXISTING_RESOURCE_ID,
    MIN_NAME_LENGTH,
    UNPROCESSABLE_CREATED_ID,
    ResourceId,
)
from statuslab.core.outcomes import StatusOutcome, created, no_content, respond

NAME_REQUIRED = "Bad Request: 'Name' is required."


def _echo(name: str | None) -> dict:
    return {"name": name}


def decide_ok() -> StatusOutcome:
    return respond(200, "Everything is OK!")


def decide_create(name: str | None, resource_id: int) -> StatusOutcome:
    """400 without a name, otherwise 201 naming the requested id."""
    if not name:
        return respond(400, NAME_REQUIRED)
    return created(
        f"Resource created {resource_id}", ResourceId(resource_id),
        resource=_echo(name),
    )


def decide_delete(resource_id: int) -> StatusOutcome:
    # Any id "deletes" successfully.
    return no_content()


def decide_lookup(resource_id: int) -> StatusOutcome:
    if resource_id != EXISTING_RESOURCE_ID:
        return respond(404, f"Resource with id {resource_id} not found.")
    return respond(200, "Resource found.", id=resource_id)


def decide_conflict(name: str | None) -> StatusOutcome:
    """409 when the name matches the pre-existing "Duplicate", any case."""
    if name is not None and name.casefold() == DUPLICATE_NAME.casefold():
        return respond(409, "Conflict: Resource already exists.")
    return created("Resource created", CONFLICT_CREATED_ID, resource=_echo(name))


def decide_unprocessable(name: str | None) -> StatusOutcome:
    if not name or len(name) < MIN_NAME_LENGTH:
        return respond(
            422,
            "Unprocessable Entity: 'Name' must be at least "
            f"{MIN_NAME_LENGTH} characters long.",
        )
    return created(
        "Resource created", UNPROCESSABLE_CREATED_ID, resource=_echo(name),
    )
