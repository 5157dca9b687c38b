"""SQLAlchemy ORM models."""

from gamestore.models.base import MAX_ID, Base
from gamestore.models.game import Game
from gamestore.models.library import LibraryEntry
from gamestore.models.user import User

__all__ = ["MAX_ID", "Base", "Game", "LibraryEntry", "User"]
