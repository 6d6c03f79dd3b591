"""Password Hashing — bcrypt hash/verify with a fixed work factor.

Invariants:
    - Hashes always use BCRYPT_ROUNDS (cost 10)
    - verify_password returns False on mismatch and raises ValueError on a malformed hash
    - The async wrappers run bcrypt in a worker thread so the event loop keeps serving
"""

import asyncio

import bcrypt

from langbuddy.core.domain_types import BCRYPT_ROUNDS


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against its stored bcrypt hash."""
    return bcrypt.checkpw(
        password.encode("utf-8"), hashed_password.encode("utf-8"),
    )


async def hash_password_async(password: str) -> str:
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(password: str, hashed_password: str) -> bool:
    return await asyncio.to_thread(verify_password, password, hashed_password)
