"""Progress Schemas — the two overlapping progress-update bodies.

Invariants:
    - ProgressOverwrite has no required fields; the store decides what is valid
    - ProgressPatch.changes() keeps a field only when it was sent AND is not null
    - Explicit zero/false/empty values are changes, not omissions

Design Decisions:
    - provided() uses pydantic's model_fields_set, so "sent as null" and "not sent"
      stay distinguishable even though both currently mean "keep"
"""

from typing import ClassVar

from langbuddy.core.domain_types import ProgressField
from langbuddy.schemas.base import RequestBody


class ProgressOverwrite(RequestBody):
    """POST /api/update-progress: overwrite xp and hearts by username."""

    username: str | None = None
    xp: int | None = None
    hearts: int | None = None


class ProgressPatch(RequestBody):
    """POST /api/update: conditional overwrite by user id."""

    required_fields: ClassVar[tuple[str, ...]] = ("id",)
    missing_message: ClassVar[str] = "id required"

    id: int | None = None
    xp: int | None = None
    hearts: int | None = None
    unit: int | None = None
    lesson: int | None = None
    streak: int | None = None
    language: str | None = None

    def provided(self) -> set[ProgressField]:
        """Progress fields present in the request body, null or not."""
        return {f for f in ProgressField if f.value in self.model_fields_set}

    def changes(self) -> dict[ProgressField, int | str]:
        """Fields to overwrite: present and non-null."""
        provided = self.provided()
        changes = {}
        for f in ProgressField:
            value = getattr(self, f.value)
            if f in provided and value is not None:
                changes[f] = value
        return changes
