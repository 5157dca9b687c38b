"""Core app configuration, database, security and authorization."""

from gamestore.core.config import Settings, get_settings
from gamestore.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
