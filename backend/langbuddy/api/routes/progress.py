"""Progress Routes — two overlapping update endpoints.

/api/update-progress overwrites xp and hearts by username; /api/update patches any
subset of progress fields by user id. Both stay: existing clients call each.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.api.envelope import ok
from langbuddy.infrastructure.database import get_db
from langbuddy.schemas.progress import ProgressOverwrite, ProgressPatch
from langbuddy.services.progress import overwrite_progress, patch_progress

router = APIRouter(prefix="/api", tags=["progress"])


@router.post("/update-progress")
async def update_progress(
    body: ProgressOverwrite, db: AsyncSession = Depends(get_db),
):
    return ok(await overwrite_progress(db, body))


@router.post("/update")
async def update(body: ProgressPatch, db: AsyncSession = Depends(get_db)):
    return ok(await patch_progress(db, body))
