"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# JSON bodies use camelCase keys (isAdmin, emailOrUsername).
CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class RegisterRequest(BaseModel):
    """New account. Presence of each field is checked by the credential service."""

    model_config = CAMEL_CONFIG

    username: str | None = Field(default=None, description="Unique username (3+ chars)")
    email: str | None = Field(default=None, description="Unique email address")
    password: str | None = Field(default=None, description="Plain-text password")


class LoginRequest(BaseModel):
    """Credentials for login: either the email or the username, plus the password."""

    model_config = CAMEL_CONFIG

    email_or_username: str | None = Field(default=None, description="Email or username")
    password: str | None = Field(default=None, description="Password")


class UserOut(BaseModel):
    """Public view of a user (no password hash, no library)."""

    model_config = CAMEL_CONFIG

    id: int
    username: str
    email: str
    is_admin: bool


class AuthResponse(BaseModel):
    """Returned by register and login."""

    token: str = Field(..., description="JWT; send as Authorization: Bearer <token>")
    user: UserOut


class TokenClaims(BaseModel):
    """Identity asserted by a verified token."""

    id: int
    username: str
    is_admin: bool = False
    issued_at: datetime
    expires_at: datetime
