"""Authorization policy: decide whether a token's holder may perform an action."""

from enum import Enum

from gamestore.core.errors import Forbidden
from gamestore.schemas.auth import TokenClaims


class Action(str, Enum):
    CREATE_GAME = "create_game"
    UPDATE_GAME = "update_game"
    DELETE_GAME = "delete_game"
    ADD_TO_LIBRARY = "add_to_library"
    REMOVE_FROM_LIBRARY = "remove_from_library"


CATALOG_WRITES = frozenset({Action.CREATE_GAME, Action.UPDATE_GAME, Action.DELETE_GAME})


def is_allowed(claims: TokenClaims, action: Action, admin_only_catalog_writes: bool) -> bool:
    """
    Pure allow/deny decision.

    Catalog writes need the admin flag only when admin_only_catalog_writes is set;
    library changes only ever touch the caller's own library and are always allowed.
    """
    if action in CATALOG_WRITES and admin_only_catalog_writes:
        return claims.is_admin
    return True


def enforce(claims: TokenClaims, action: Action, admin_only_catalog_writes: bool) -> None:
    """Raise Forbidden when is_allowed denies the action."""
    if not is_allowed(claims, action, admin_only_catalog_writes):
        raise Forbidden()
