"""ORM model for the user -> game library relation."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func

from gamestore.models.base import Base


class LibraryEntry(Base):
    """
    One game in one user's library.

    The (user_id, game_id) pair is unique, so a library is a set; id order is the
    order games were added.
    """

    __tablename__ = "user_library"
    __table_args__ = (
        UniqueConstraint("user_id", "game_id", name="uq_user_library_user_game"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    game_id = Column(
        Integer,
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    added_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
