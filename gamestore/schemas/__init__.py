"""Pydantic request/response schemas."""

from gamestore.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    UserOut,
)
from gamestore.schemas.game import GameCreate, GameOut, GameUpdate, MessageResponse
from gamestore.schemas.health import HealthResponse
from gamestore.schemas.library import LibraryChangeRequest, LibraryChangeResponse

__all__ = [
    "AuthResponse",
    "GameCreate",
    "GameOut",
    "GameUpdate",
    "HealthResponse",
    "LibraryChangeRequest",
    "LibraryChangeResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "TokenClaims",
    "UserOut",
]
