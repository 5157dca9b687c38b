"""ORM model for registered users."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from gamestore.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    email is stored lowercase; username is case-sensitive. Both are unique.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
