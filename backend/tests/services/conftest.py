"""Service test fixtures — async DB + FastAPI test client + signed-in actors.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes see the test engine
    - sign_in_as drives the real POST /users/sign_in flow (cookie kept by the client)

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      opened by the app sees the same tables
    - Users and items seeded directly in the DB; only sign-in goes through HTTP
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.item import Item
import app.infrastructure.database as db_module
from app.main import app
from seed_data import create_item, create_user


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
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


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def sign_in_as(client):
    """Sign the test client in through the real sign-in route."""
    async def _sign_in(email: str, password: str):
        res = await client.post(
            "/users/sign_in",
            json={"user": {"email": email, "password": password}},
        )
        assert res.status_code == 303, res.text
        return res
    return _sign_in


@pytest.fixture
async def user1(test_db):
    return await create_user(test_db, "proper@proper.com", "proper123")


@pytest.fixture
async def user1_item(test_db, user1):
    return await create_item(test_db, user1, "wash dishes")


@pytest.fixture
async def hacker(test_db):
    return await create_user(test_db, "hacker@hacker.com", "hacker123")


@pytest.fixture
def count_items(test_session_factory):
    """Count items with a fresh session (never a cached identity map)."""
    async def _count() -> int:
        async with test_session_factory() as db:
            return (await db.execute(select(func.count()).select_from(Item))).scalar_one()
    return _count


@pytest.fixture
def reload_item(test_session_factory):
    """Reload an item by id with a fresh session; None when deleted."""
    async def _reload(item_id):
        async with test_session_factory() as db:
            return await db.get(Item, item_id)
    return _reload
