"""Progress Service — the two overlapping user-progress updates.

Invariants:
    - overwrite_progress sets xp and hearts unconditionally; a username that matches
      no row is still reported as success
    - patch_progress touches only the fields the request carried (non-null), and
      always refreshes last_day to today
    - Each operation is exactly one UPDATE; concurrent calls for the same user are
      not coordinated (last writer wins per column)

Design Decisions:
    - Both operations are kept: /api/update-progress (overwrite-always) and
      /api/update (overwrite-if-present) have different callers in the app
    - The conditional overwrite is built from ProgressPatch.changes() instead of
      COALESCE(?, col): omitted columns never appear in the SET clause
"""

import logging
from datetime import date

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.models.user import User
from langbuddy.schemas.progress import ProgressOverwrite, ProgressPatch
from langbuddy.services.store import store_operation

logger = logging.getLogger(__name__)


async def overwrite_progress(db: AsyncSession, body: ProgressOverwrite) -> dict:
    """POST /api/update-progress."""
    async with store_operation(db, "update-progress", "DB update failed"):
        result = await db.execute(
            update(User)
            .where(User.username == body.username)
            .values(xp=body.xp, hearts=body.hearts),
        )
        await db.commit()

    if result.rowcount == 0:
        logger.warning(
            "Progress overwrite matched no user", extra={"username": body.username},
        )
    return {}


async def patch_progress(db: AsyncSession, body: ProgressPatch) -> dict:
    """POST /api/update."""
    body.ensure_complete()

    values = {field.value: value for field, value in body.changes().items()}
    values["last_day"] = date.today()

    async with store_operation(db, "update", "DB update error"):
        await db.execute(
            update(User).where(User.id == body.id).values(**values),
        )
        await db.commit()

    return {"message": "updated"}
