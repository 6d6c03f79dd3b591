"""Store Operation Guard — which failures become StoreError, and rollback behavior.

Tests:
    - SQLAlchemy errors, refused connections and timeouts all become StoreError
    - The session is rolled back; a failing rollback does not hide the StoreError
    - Non-store exceptions pass through untouched
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from langbuddy.core.errors import StoreError
from langbuddy.services.store import store_operation


@pytest.mark.parametrize(
    "raised",
    [
        OperationalError("SELECT 1", {}, Exception("no such table")),
        ConnectionRefusedError(111, "Connection refused"),
        TimeoutError(),
        OSError("network unreachable"),
    ],
)
async def test_store_failures_become_store_error(raised):
    db = AsyncMock()
    with pytest.raises(StoreError) as info:
        async with store_operation(db, "notebook-list", "DB fetch error"):
            raise raised
    assert info.value.message == "DB fetch error"
    assert info.value.operation == "notebook-list"
    assert info.value.__cause__ is raised
    db.rollback.assert_awaited_once()


async def test_failed_rollback_still_reports_store_error():
    db = AsyncMock()
    db.rollback.side_effect = ConnectionResetError()
    with pytest.raises(StoreError) as info:
        async with store_operation(db, "signup", "Unable to create user"):
            raise ConnectionRefusedError()
    assert info.value.message == "Unable to create user"


async def test_other_errors_pass_through():
    db = AsyncMock()
    with pytest.raises(KeyError):
        async with store_operation(db, "login", "DB error"):
            raise KeyError("user")
    db.rollback.assert_not_awaited()


async def test_success_does_not_roll_back():
    db = AsyncMock()
    async with store_operation(db, "login", "DB error"):
        pass
    db.rollback.assert_not_awaited()
