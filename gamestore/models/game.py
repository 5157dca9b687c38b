"""ORM model for catalog games."""

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String, Text, func

from gamestore.models.base import Base


class Game(Base):
    """A game in the public catalog. created_by is the user who added it, if known."""

    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False, default=0)
    cover_url = Column(String(2048), nullable=False, default="")
    genre = Column(String(255), nullable=False, default="")
    release_date = Column(Date, nullable=True)
    created_by = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
