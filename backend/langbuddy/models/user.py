"""User ORM — account identity plus the mutable learning-progress columns.

Invariants:
    - username is unique (enforced by the store, not checked ahead of insert)
    - password holds a bcrypt hash, never plaintext
    - hearts starts at 5; xp, streak, unit, lesson start at 0
    - last_day is refreshed by the partial progress update, not by the simple one

Design Decisions:
    - Integer autoincrement id: clients address users by this number (POST /api/update)
    - Streak is stored only; the client computes it from last_day
"""

from datetime import date

from sqlalchemy import String, Integer, Date
from sqlalchemy.orm import Mapped, mapped_column

from langbuddy.core.domain_types import (
    STARTING_HEARTS, STARTING_XP, STARTING_STREAK, STARTING_UNIT, STARTING_LESSON,
)
from langbuddy.db.base import Base


class User(Base):
    """Learner account and progress."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    xp: Mapped[int] = mapped_column(
        Integer, nullable=False, default=STARTING_XP,
    )
    hearts: Mapped[int] = mapped_column(
        Integer, nullable=False, default=STARTING_HEARTS,
    )
    streak: Mapped[int] = mapped_column(
        Integer, nullable=False, default=STARTING_STREAK,
    )
    unit: Mapped[int] = mapped_column(
        Integer, nullable=False, default=STARTING_UNIT,
    )
    lesson: Mapped[int] = mapped_column(
        Integer, nullable=False, default=STARTING_LESSON,
    )
    last_day: Mapped[date | None] = mapped_column(Date, nullable=True)
