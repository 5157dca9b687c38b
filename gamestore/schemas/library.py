"""Schemas for library add/remove."""

from pydantic import BaseModel, Field

from gamestore.schemas.auth import CAMEL_CONFIG


class LibraryChangeRequest(BaseModel):
    model_config = CAMEL_CONFIG

    # Clients send either the numeric id or its string form.
    game_id: int | str | None = Field(default=None, description="Game id")


class LibraryChangeResponse(BaseModel):
    """Result of add/remove: message plus the library's game ids in insertion order."""

    message: str
    library: list[int]
