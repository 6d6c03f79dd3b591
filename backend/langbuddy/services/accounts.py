"""Account Service — signup and login.

Invariants:
    - Presence is validated before any hashing or store access
    - Signup hashes first, then issues exactly one INSERT
    - Login issues exactly one SELECT, closes the session (returning the single
      pooled connection), then verifies the hash
    - The returned user never carries the password hash

Design Decisions:
    - Duplicate usernames are not pre-checked: the unique constraint rejects them and the
      caller sees the generic "Unable to create user"
"""

import logging
from datetime import date

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.core.domain_types import (
    STARTING_HEARTS, STARTING_XP, STARTING_STREAK, STARTING_UNIT, STARTING_LESSON,
)
from langbuddy.core.errors import (
    AuthVerificationError, PasswordHashingError, UserNotFoundError, WrongPasswordError,
)
from langbuddy.core.passwords import hash_password_async, verify_password_async
from langbuddy.models.user import User
from langbuddy.schemas.auth import LoginRequest, SignupRequest, UserPublic
from langbuddy.services.store import store_operation

logger = logging.getLogger(__name__)


async def create_account(db: AsyncSession, body: SignupRequest) -> dict:
    """Hash the password and insert a fresh user row."""
    body.ensure_complete()
    logger.info("Signup requested", extra={"username": body.username})

    try:
        hashed = await hash_password_async(body.password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed: {e}", extra={"username": body.username})
        raise PasswordHashingError(body.username) from e

    async with store_operation(db, "signup", "Unable to create user"):
        result = await db.execute(
            insert(User).values(
                username=body.username,
                password=hashed,
                language=body.language,
                xp=STARTING_XP,
                hearts=STARTING_HEARTS,
                streak=STARTING_STREAK,
                unit=STARTING_UNIT,
                lesson=STARTING_LESSON,
                last_day=date.today(),
            ),
        )
        await db.commit()

    logger.info(
        "User created",
        extra={"username": body.username, "user_id": result.inserted_primary_key[0]},
    )
    return {}


async def authenticate(db: AsyncSession, body: LoginRequest) -> dict:
    """Look up the user by name and check the password."""
    body.ensure_complete()

    async with store_operation(db, "login", "DB error"):
        result = await db.execute(
            select(User).where(User.username == body.username),
        )
        user = result.scalars().first()
        # release the pooled connection before bcrypt runs
        await db.close()

    if user is None:
        raise UserNotFoundError(body.username)

    try:
        match = await verify_password_async(body.password, user.password or "")
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification failed: {e}", extra={"username": body.username})
        raise AuthVerificationError(body.username) from e
    if not match:
        raise WrongPasswordError(body.username)

    logger.info("User logged in", extra={"username": user.username, "user_id": user.id})
    return {"user": UserPublic.model_validate(user).model_dump(mode="json")}
