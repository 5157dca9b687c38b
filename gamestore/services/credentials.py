"""Credential store: registration, identity lookup and password checks."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gamestore.core.errors import DuplicateIdentity, InvalidCredentials, NotFound, ValidationError
from gamestore.core.security import USERNAME_MIN_LEN, hash_password, verify_password
from gamestore.models import User

if TYPE_CHECKING:
    from gamestore.core.config import Settings

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(
    session: Session,
    settings: "Settings",
    username: str | None,
    email: str | None,
    password: str | None,
    is_admin: bool = False,
) -> User:
    """
    Create a user with a bcrypt password hash.

    Raises ValidationError for missing fields or a short username and
    DuplicateIdentity when the username or email is already registered.
    """
    username = username.strip() if username else username
    if not username or not email or not password:
        raise ValidationError("Missing fields")
    if len(username) < USERNAME_MIN_LEN:
        raise ValidationError(f"Username must be at least {USERNAME_MIN_LEN} characters")
    email = normalize_email(email)

    existing = (
        session.query(User)
        .filter(or_(User.username == username, User.email == email))
        .first()
    )
    if existing is not None:
        raise DuplicateIdentity()

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password, settings.BCRYPT_ROUNDS),
        is_admin=is_admin,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration; the unique index decided.
        session.rollback()
        raise DuplicateIdentity() from e
    session.refresh(user)
    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return user


def find_by_identity(session: Session, email_or_username: str) -> User:
    """Look up a user by exact username or by normalized email."""
    user = (
        session.query(User)
        .filter(
            or_(
                User.username == email_or_username,
                User.email == normalize_email(email_or_username),
            )
        )
        .first()
    )
    if user is None:
        raise NotFound("User not found")
    return user


def authenticate(session: Session, email_or_username: str | None, password: str | None) -> User:
    """Return the user whose identity and password match, else raise InvalidCredentials."""
    if not email_or_username or not password:
        raise ValidationError("Missing fields")
    try:
        user = find_by_identity(session, email_or_username)
    except NotFound:
        raise InvalidCredentials() from None
    if not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    return user
