"""Tag ORM — free-form labels attached to questions.

Invariants:
    - name is unique (questions connect to an existing tag by name before creating one)
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from qa_forum.db.base import Base


class Tag(Base):
    """Tag label."""
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
