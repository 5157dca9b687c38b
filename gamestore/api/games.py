"""Game catalog: public reads, authenticated writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from gamestore.api.deps import require
from gamestore.core.database import get_db
from gamestore.core.policy import Action
from gamestore.schemas.auth import TokenClaims
from gamestore.schemas.game import GameCreate, GameOut, GameUpdate, MessageResponse
from gamestore.services import catalog

router = APIRouter()


@router.get("", response_model=list[GameOut])
def list_games(
    db: Annotated[Session, Depends(get_db)],
    q: Annotated[str | None, Query(description="Case-insensitive title substring")] = None,
) -> list[GameOut]:
    """All games, newest first."""
    return [GameOut.model_validate(g) for g in catalog.list_games(db, q)]


@router.get("/{game_id}", response_model=GameOut)
def get_game(game_id: int, db: Annotated[Session, Depends(get_db)]) -> GameOut:
    return GameOut.model_validate(catalog.get_game(db, game_id))


@router.post("", response_model=GameOut)
def create_game(
    body: GameCreate,
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[TokenClaims, Depends(require(Action.CREATE_GAME))],
) -> GameOut:
    game = catalog.create_game(db, body.model_dump(), owner_id=claims.id)
    return GameOut.model_validate(game)


@router.put("/{game_id}", response_model=GameOut)
def update_game(
    game_id: int,
    body: GameUpdate,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(require(Action.UPDATE_GAME))],
) -> GameOut:
    """Partial update: fields missing from the body are left unchanged."""
    game = catalog.update_game(db, game_id, body.model_dump(exclude_unset=True))
    return GameOut.model_validate(game)


@router.delete("/{game_id}", response_model=MessageResponse)
def delete_game(
    game_id: int,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(require(Action.DELETE_GAME))],
) -> MessageResponse:
    """Delete a game; it is also removed from every user's library."""
    catalog.delete_game(db, game_id)
    return MessageResponse(message="Deleted")
