"""Registration and login; both return a JWT plus the public user record."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamestore.api.deps import get_app_settings
from gamestore.core.config import Settings
from gamestore.core.database import get_db
from gamestore.core.security import create_access_token
from gamestore.models import User
from gamestore.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserOut
from gamestore.services.credentials import authenticate, register_user

router = APIRouter()


def _auth_response(user: User, settings: Settings) -> AuthResponse:
    return AuthResponse(
        token=create_access_token(user, settings),
        user=UserOut.model_validate(user),
    )


@router.post("/register", response_model=AuthResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthResponse:
    """
    Create an account and log it in.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = register_user(db, settings, body.username, body.email, body.password)
    return _auth_response(user, settings)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthResponse:
    """Authenticate with email or username and password; returns a JWT."""
    user = authenticate(db, body.email_or_username, body.password)
    return _auth_response(user, settings)
