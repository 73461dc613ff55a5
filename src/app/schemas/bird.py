"""Bird request and response schemas.

BirdParams is the permitted input for create and update: name, species
and likes. Any other key in the body is dropped during validation.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class BirdParams(BaseModel):
    """Permitted bird fields.

    Create uses every field (defaults included); update uses only the
    fields present in the request body (``model_dump(exclude_unset=True)``).
    """

    model_config = {"extra": "ignore"}

    name: str | None = Field(default=None, max_length=100)
    species: str | None = Field(default=None, max_length=100)
    likes: int = Field(default=0, ge=0)


class BirdResponse(BaseModel):
    """A stored bird."""

    model_config = {"from_attributes": True}

    id: int
    name: str | None
    species: str | None
    likes: int
    created_at: datetime
    updated_at: datetime
