"""Resource Schemas — the single request body shared by the creation endpoints.

Invariants:
    - name is optional at the schema level: emptiness is a decision, not a
      validation error (the endpoints answer 400/422 with their own messages)
    - Unknown fields are ignored; "name" and "Name" both bind

Design Decisions:
    - Plain BaseModel with Optional field over Field(min_length=...): a schema
      failure would surface as the generic validation envelope, not the
      endpoint-specific message
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ResourceRequest(BaseModel):
    """Incoming resource description — discarded once the response is sent."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(
        None, validation_alias=AliasChoices("name", "Name"),
    )
