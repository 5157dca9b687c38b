"""Catalog store: CRUD and title search over games."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from gamestore.core.errors import NotFound, ValidationError
from gamestore.models import MAX_ID, Game
from gamestore.schemas.game import GAME_FIELDS
from gamestore.services.library import purge_game

logger = logging.getLogger(__name__)

# Values used when a create request leaves a field out.
GAME_DEFAULTS: dict[str, Any] = {
    "description": "",
    "price": 0,
    "cover_url": "",
    "genre": "",
    "release_date": None,
}


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _check_fields(fields: dict[str, Any]) -> None:
    if "title" in fields and (fields["title"] is None or not str(fields["title"]).strip()):
        raise ValidationError("Title required")
    if fields.get("price") is not None and fields["price"] < 0:
        raise ValidationError("Price must be non-negative")


def list_games(session: Session, query: str | None = None) -> list[Game]:
    """All games, newest first, optionally filtered by case-insensitive title substring."""
    q = session.query(Game)
    if query:
        q = q.filter(Game.title.ilike(f"%{_escape_like(query)}%", escape="\\"))
    return q.order_by(Game.created_at.desc(), Game.id.desc()).all()


def get_game(session: Session, game_id: int) -> Game:
    if not 1 <= game_id <= MAX_ID:
        raise NotFound()
    game = session.get(Game, game_id)
    if game is None:
        raise NotFound()
    return game


def create_game(session: Session, fields: dict[str, Any], owner_id: int | None) -> Game:
    """Create a game owned by owner_id. title is required; other fields default."""
    if not fields.get("title"):
        raise ValidationError("Title required")
    _check_fields(fields)
    values = {**GAME_DEFAULTS}
    for name in GAME_FIELDS:
        if fields.get(name) is not None:
            values[name] = fields[name]
    game = Game(**values, created_by=owner_id)
    session.add(game)
    session.commit()
    session.refresh(game)
    logger.info("Game created: id=%s title=%r created_by=%s", game.id, game.title, owner_id)
    return game


def update_game(session: Session, game_id: int, fields: dict[str, Any]) -> Game:
    """
    Apply a partial update. Only fields present in `fields` change; a null for an
    optional text field resets it to its default.
    """
    game = get_game(session, game_id)
    _check_fields(fields)
    for name in GAME_FIELDS:
        if name not in fields:
            continue
        value = fields[name]
        if value is None:
            value = GAME_DEFAULTS[name]
        setattr(game, name, value)
    session.commit()
    session.refresh(game)
    return game


def delete_game(session: Session, game_id: int) -> None:
    """Delete a game and remove it from every user's library in one commit."""
    game = get_game(session, game_id)
    purged = purge_game(session, game.id)
    session.delete(game)
    session.commit()
    logger.info("Game deleted: id=%s library_entries_removed=%s", game_id, purged)
