"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - broken_client points at a database with no tables, so every statement fails

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from langbuddy.core.passwords import hash_password
from langbuddy.db.base import Base
from langbuddy.infrastructure.database import get_db
from langbuddy.main import app
from langbuddy.models.user import User
import langbuddy.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


async def _client_for(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    )


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async with await _client_for(test_session_factory) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client():
    """Client whose database has no tables: every store call raises."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with await _client_for(factory) as c:
        yield c
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture
async def seed_user(test_db):
    """Insert a user with password 'secret123' and some progress."""
    user = User(
        username="ayse",
        password=hash_password("secret123"),
        language="tr",
        xp=10,
        hearts=5,
        streak=2,
        unit=1,
        lesson=3,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
def read_user(test_session_factory):
    """Read a user through a fresh session (bypasses identity-map caching)."""
    async def _read(user_id: int) -> User | None:
        async with test_session_factory() as session:
            return await session.get(User, user_id)
    return _read
