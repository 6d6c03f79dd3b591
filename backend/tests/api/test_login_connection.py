"""Login Connection Use — the single pooled connection is free while bcrypt runs."""

import pytest
from httpx import ASGITransport, AsyncClient

from langbuddy.core.passwords import hash_password, verify_password_async
from langbuddy.db.base import Base
from langbuddy.infrastructure.database import DatabaseSessionManager, get_db
from langbuddy.main import app
from langbuddy.models.user import User


@pytest.fixture
async def file_store(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'login.db'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with manager.session() as session:
        session.add(User(
            username="ayse", password=hash_password("secret123"), language="tr",
        ))
        await session.commit()
    yield manager
    await manager.dispose()


async def test_connection_returned_before_password_check(file_store, monkeypatch):
    checked_out = []

    async def recording_verify(password, hashed):
        checked_out.append(file_store.engine.sync_engine.pool.checkedout())
        return await verify_password_async(password, hashed)

    monkeypatch.setattr(
        "langbuddy.services.accounts.verify_password_async", recording_verify,
    )

    async def override_get_db():
        async with file_store.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post(
            "/api/login", json={"username": "ayse", "password": "secret123"},
        )
    app.dependency_overrides.clear()

    assert res.json()["success"] is True
    assert res.json()["user"]["username"] == "ayse"
    assert checked_out == [0]
