"""The caller's own game library."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamestore.api.deps import get_current_claims, require
from gamestore.core.database import get_db
from gamestore.core.policy import Action
from gamestore.schemas.auth import TokenClaims
from gamestore.schemas.game import GameOut
from gamestore.schemas.library import LibraryChangeRequest, LibraryChangeResponse
from gamestore.services import library

router = APIRouter()


@router.get("", response_model=list[GameOut])
def get_library(
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> list[GameOut]:
    return [GameOut.model_validate(g) for g in library.list_for_user(db, claims.id)]


@router.post("/add", response_model=LibraryChangeResponse)
def add_to_library(
    body: LibraryChangeRequest,
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[TokenClaims, Depends(require(Action.ADD_TO_LIBRARY))],
) -> LibraryChangeResponse:
    ids = library.add_to_library(db, claims.id, body.game_id)
    return LibraryChangeResponse(message="Added", library=ids)


@router.post("/remove", response_model=LibraryChangeResponse)
def remove_from_library(
    body: LibraryChangeRequest,
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[TokenClaims, Depends(require(Action.REMOVE_FROM_LIBRARY))],
) -> LibraryChangeResponse:
    ids = library.remove_from_library(db, claims.id, body.game_id)
    return LibraryChangeResponse(message="Removed", library=ids)
