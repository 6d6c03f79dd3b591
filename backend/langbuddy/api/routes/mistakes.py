"""Mistake Routes — log an incorrect answer, list a user's log."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.api.envelope import ok
from langbuddy.infrastructure.database import get_db
from langbuddy.schemas.entries import EntryCreate
from langbuddy.services.mistakes import list_mistakes, log_mistake

router = APIRouter(prefix="/api", tags=["mistakes"])


@router.post("/mistake")
async def add_mistake(body: EntryCreate, db: AsyncSession = Depends(get_db)):
    return ok(await log_mistake(db, body))


@router.get("/mistakes/{user_id}")
async def get_mistakes(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_mistakes(db, user_id))
