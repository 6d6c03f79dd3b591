"""MistakeEntry ORM — append-only log of incorrect answers.

Invariants:
    - time is assigned server-side at insert, never taken from the request
    - Rows are never updated or deleted
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from langbuddy.db.base import Base


class MistakeEntry(Base):
    __tablename__ = "mistakes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    en_text: Mapped[str] = mapped_column(Text, nullable=False)
    tr_text: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
