"""Schemas for catalog games."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from gamestore.schemas.auth import CAMEL_CONFIG

# Columns a client may set on create/update.
GAME_FIELDS = ("title", "description", "price", "cover_url", "genre", "release_date")


class GameCreate(BaseModel):
    model_config = CAMEL_CONFIG

    title: str | None = None
    description: str | None = None
    price: float | None = None
    cover_url: str | None = None
    genre: str | None = None
    release_date: date | None = None


class GameUpdate(GameCreate):
    """Partial update: only fields present in the body are applied."""


class GameOut(BaseModel):
    model_config = CAMEL_CONFIG

    id: int
    title: str
    description: str = ""
    price: float = 0
    cover_url: str = ""
    genre: str = ""
    release_date: date | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human-readable result")
