"""Library relation: which games each user owns, and cleanup when games go away."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gamestore.core.errors import AlreadyPresent, NotFound, ValidationError
from gamestore.models import MAX_ID, Game, LibraryEntry, User

logger = logging.getLogger(__name__)


def coerce_game_id(raw: int | str | None) -> int:
    """
    Turn a client-supplied game id into an int.

    Missing ids are a ValidationError; ids that cannot name any game are NotFound.
    """
    if raw is None or raw == "":
        raise ValidationError("gameId required")
    if isinstance(raw, bool):
        raise NotFound("Game not found")
    try:
        game_id = int(raw)
    except (TypeError, ValueError):
        raise NotFound("Game not found") from None
    if not 1 <= game_id <= MAX_ID:
        raise NotFound("Game not found")
    return game_id


def _require_user(session: Session, user_id: int) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def library_ids(session: Session, user_id: int) -> list[int]:
    """Game ids in the user's library, in the order they were added."""
    rows = (
        session.query(LibraryEntry.game_id)
        .filter(LibraryEntry.user_id == user_id)
        .order_by(LibraryEntry.id)
        .all()
    )
    return [game_id for (game_id,) in rows]


def list_for_user(session: Session, user_id: int) -> list[Game]:
    """Resolve the user's library into full game records."""
    _require_user(session, user_id)
    return (
        session.query(Game)
        .join(LibraryEntry, LibraryEntry.game_id == Game.id)
        .filter(LibraryEntry.user_id == user_id)
        .order_by(LibraryEntry.id)
        .all()
    )


def add_to_library(session: Session, user_id: int, game_id: int | str | None) -> list[int]:
    """
    Add a game to the user's library and return the updated id list.

    Adding a game twice raises AlreadyPresent. Concurrent adds of the same pair are
    resolved by the unique constraint: the loser also gets AlreadyPresent.
    """
    gid = coerce_game_id(game_id)
    if session.get(Game, gid) is None:
        raise NotFound("Game not found")
    _require_user(session, user_id)

    exists = (
        session.query(LibraryEntry.id)
        .filter(LibraryEntry.user_id == user_id, LibraryEntry.game_id == gid)
        .first()
    )
    if exists is not None:
        raise AlreadyPresent()

    session.add(LibraryEntry(user_id=user_id, game_id=gid))
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise AlreadyPresent() from e
    logger.info("Library add: user_id=%s game_id=%s", user_id, gid)
    return library_ids(session, user_id)


def remove_from_library(session: Session, user_id: int, game_id: int | str | None) -> list[int]:
    """Remove a game from the user's library. Removing an absent game changes nothing."""
    if game_id is None or game_id == "":
        raise ValidationError("gameId required")
    _require_user(session, user_id)
    try:
        gid = coerce_game_id(game_id)
    except NotFound:
        # An id that names no game cannot be in any library.
        return library_ids(session, user_id)

    removed = (
        session.query(LibraryEntry)
        .filter(LibraryEntry.user_id == user_id, LibraryEntry.game_id == gid)
        .delete(synchronize_session=False)
    )
    session.commit()
    if removed:
        logger.info("Library remove: user_id=%s game_id=%s", user_id, gid)
    return library_ids(session, user_id)


def purge_game(session: Session, game_id: int) -> int:
    """
    Delete every library entry pointing at game_id. Does not commit, so the
    caller can remove the game itself in the same transaction.
    """
    return (
        session.query(LibraryEntry)
        .filter(LibraryEntry.game_id == game_id)
        .delete(synchronize_session=False)
    )
