"""Liveness — static text at the root path.

Invariants:
    - GET / always returns 200 text while the process is up
    - No database probe (the store is not checked here)
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

LIVENESS_TEXT = "Language Buddy Backend is Running"


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    return LIVENESS_TEXT
