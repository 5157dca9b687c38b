"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from gamestore.core.errors import InvalidToken, MalformedToken, MissingToken
from gamestore.schemas.auth import TokenClaims

if TYPE_CHECKING:
    from gamestore.core.config import Settings
    from gamestore.models.user import User

USERNAME_MIN_LEN = 3


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(user: "User", settings: "Settings") -> str:
    """Create a JWT carrying the user's id (sub), username and admin flag."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user.id),
        "username": user.username,
        "isAdmin": bool(user.is_admin),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> TokenClaims:
    """
    Decode and validate a JWT and return its claims.
    Raises InvalidToken on bad signature, expiry or missing claims.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.PyJWTError as e:
        raise InvalidToken() from e
    try:
        return TokenClaims(
            id=int(payload["sub"]),
            username=payload["username"],
            is_admin=bool(payload.get("isAdmin", False)),
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidToken("Invalid token payload") from e


def verify_bearer(authorization: str | None, settings: "Settings") -> TokenClaims:
    """Validate an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        raise MissingToken()
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise MalformedToken()
    return decode_access_token(token, settings)
