"""User ORM — forum members and the cosmetics they can equip.

Invariants:
    - username is unique when present
    - A UserCosmetic with equipped_at set is shown next to the user's name
    - deleted_at marks soft-deleted accounts; rows are never removed

Design Decisions:
    - UserCosmetic is an explicit join entity: it carries obtained/equipped timestamps
    - Cosmetic.data as JSON: badge/frame payloads vary by cosmetic type
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.db.base import Base


class User(Base):
    """Forum member."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(
        String(100), nullable=True, unique=True,
    )
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    cosmetics: Mapped[list["UserCosmetic"]] = relationship(
        "UserCosmetic", back_populates="user", cascade="all, delete-orphan",
    )


class Cosmetic(Base):
    """Decoration a user can obtain and equip (badge, name color, ...)."""
    __tablename__ = "cosmetics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    source: Mapped[str] = mapped_column(String(30), nullable=False)
    data: Mapped[dict | None] = mapped_column(JSON, nullable=True)


class UserCosmetic(Base):
    """Ownership of a cosmetic by a user."""
    __tablename__ = "user_cosmetics"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    )
    cosmetic_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cosmetics.id", ondelete="CASCADE"), primary_key=True,
    )
    obtained_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    equipped_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="cosmetics")
    cosmetic: Mapped["Cosmetic"] = relationship("Cosmetic")
