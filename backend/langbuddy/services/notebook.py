"""Notebook Service — add, list and delete saved word pairs."""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.core.errors import NoteNotFoundError
from langbuddy.models.notebook_entry import NotebookEntry
from langbuddy.schemas.entries import EntryCreate, NotebookItem
from langbuddy.services.store import store_operation

logger = logging.getLogger(__name__)


async def add_entry(db: AsyncSession, body: EntryCreate) -> dict:
    body.ensure_complete()
    async with store_operation(db, "notebook-add", "DB insert error"):
        await db.execute(
            insert(NotebookEntry).values(
                user_id=body.user_id, en_text=body.en, tr_text=body.tr,
            ),
        )
        await db.commit()
    return {"message": "saved"}


async def list_entries(db: AsyncSession, user_id: int) -> dict:
    """Newest first (descending id)."""
    async with store_operation(db, "notebook-list", "DB fetch error"):
        result = await db.execute(
            select(NotebookEntry)
            .where(NotebookEntry.user_id == user_id)
            .order_by(NotebookEntry.id.desc()),
        )
        rows = result.scalars().all()
    return {
        "items": [
            NotebookItem.model_validate(row).model_dump(mode="json") for row in rows
        ],
    }


async def delete_entry(db: AsyncSession, note_id: int) -> dict:
    """Delete by id; zero affected rows means the note does not exist."""
    async with store_operation(db, "notebook-delete", "DB delete error"):
        result = await db.execute(
            delete(NotebookEntry).where(NotebookEntry.id == note_id),
        )
        await db.commit()
    if result.rowcount == 0:
        raise NoteNotFoundError(note_id)
    return {"message": "deleted"}
