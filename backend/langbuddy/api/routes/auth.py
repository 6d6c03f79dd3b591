"""Auth Routes — POST /api/signup and POST /api/login."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.api.envelope import ok
from langbuddy.infrastructure.database import get_db
from langbuddy.schemas.auth import LoginRequest, SignupRequest
from langbuddy.services.accounts import authenticate, create_account

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup")
async def signup(body: SignupRequest, db: AsyncSession = Depends(get_db)):
    """Create an account: {username, password, language}."""
    return ok(await create_account(db, body))


@router.post("/login")
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Check credentials and return the user's progress."""
    return ok(await authenticate(db, body))
