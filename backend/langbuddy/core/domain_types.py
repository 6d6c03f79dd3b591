"""Domain Types — identity types and progress constants shared across layers.

Invariants:
    - UserId, NoteId, MistakeId wrap int primary keys
    - A new account starts with STARTING_HEARTS hearts and zero everything else
    - ProgressField lists the only columns the partial update may touch

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for ProgressField: values double as ORM attribute names
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
NoteId = NewType("NoteId", int)
MistakeId = NewType("MistakeId", int)


# ─── Progress ────────────────────────────────────────────────────

STARTING_HEARTS = 5
STARTING_XP = 0
STARTING_STREAK = 0
STARTING_UNIT = 0
STARTING_LESSON = 0

BCRYPT_ROUNDS = 10  # fixed work factor, not configurable


class ProgressField(str, Enum):
    """User columns that POST /api/update may overwrite."""
    XP = "xp"
    HEARTS = "hearts"
    UNIT = "unit"
    LESSON = "lesson"
    STREAK = "streak"
    LANGUAGE = "language"
