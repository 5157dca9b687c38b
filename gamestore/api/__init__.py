"""API routes."""

from fastapi import APIRouter

from gamestore.api import auth, games, health, library

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(games.router, prefix="/games", tags=["games"])
router.include_router(library.router, prefix="/library", tags=["library"])
router.include_router(health.router, prefix="/health", tags=["health"])
