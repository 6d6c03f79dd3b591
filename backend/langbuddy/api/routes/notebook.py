"""Notebook Routes — add, list (newest first) and delete saved pairs."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.api.envelope import ok
from langbuddy.infrastructure.database import get_db
from langbuddy.schemas.entries import EntryCreate
from langbuddy.services.notebook import add_entry, delete_entry, list_entries

router = APIRouter(prefix="/api/notebook", tags=["notebook"])


@router.post("/add")
async def add_note(body: EntryCreate, db: AsyncSession = Depends(get_db)):
    return ok(await add_entry(db, body))


@router.get("/{user_id}")
async def list_notes(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_entries(db, user_id))


@router.delete("/delete/{note_id}")
async def delete_note(note_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await delete_entry(db, note_id))
