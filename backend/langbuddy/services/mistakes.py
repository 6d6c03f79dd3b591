"""Mistake Service — append-only log of incorrect answers."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.models.mistake_entry import MistakeEntry
from langbuddy.schemas.entries import EntryCreate, MistakeItem
from langbuddy.services.store import store_operation


async def log_mistake(db: AsyncSession, body: EntryCreate) -> dict:
    body.ensure_complete()
    async with store_operation(db, "mistake-log", "DB insert error"):
        await db.execute(
            insert(MistakeEntry).values(
                user_id=body.user_id, en_text=body.en, tr_text=body.tr,
            ),
        )
        await db.commit()
    return {"message": "logged"}


async def list_mistakes(db: AsyncSession, user_id: int) -> dict:
    """Most recent first; id breaks ties between rows logged in the same instant."""
    async with store_operation(db, "mistake-list", "DB fetch error"):
        result = await db.execute(
            select(MistakeEntry)
            .where(MistakeEntry.user_id == user_id)
            .order_by(MistakeEntry.time.desc(), MistakeEntry.id.desc()),
        )
        rows = result.scalars().all()
    return {
        "items": [
            MistakeItem.model_validate(row).model_dump(mode="json") for row in rows
        ],
    }
