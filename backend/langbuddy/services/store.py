"""Store Operation Guard — maps any store failure to a per-operation StoreError.

Invariants:
    - "Store failure" is STORE_ERRORS: SQLAlchemy errors plus raw connection errors
      (refused, reset, timed out) that the driver raises unwrapped
    - The underlying error is logged with full detail, never returned to the caller
    - The session is rolled back before StoreError is raised
    - No retries: a single failure is reported immediately
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from langbuddy.core.errors import StoreError
from langbuddy.infrastructure.database import STORE_ERRORS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_operation(
    db: AsyncSession, operation: str, failure_message: str,
) -> AsyncGenerator[None, None]:
    """Run one statement; translate store errors into StoreError(failure_message)."""
    try:
        yield
    except STORE_ERRORS as e:
        logger.error(
            f"Store error during {operation}: {e!r}",
            extra={"operation": operation, "error_code": "DATABASE_ERROR"},
        )
        try:
            await db.rollback()
        except STORE_ERRORS as rollback_error:
            logger.error(
                f"Rollback after {operation} failed: {rollback_error!r}",
                extra={"operation": operation},
            )
        raise StoreError(failure_message, operation) from e
