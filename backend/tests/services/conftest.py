"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session in a
      test sees the same tables (PostgreSQL-specific features not exercised here)
    - ASGITransport does not run the lifespan: tables come from the test_engine fixture
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import orders_api.models  # noqa: F401
from orders_api.db.base import Base
from orders_api.db.session import create_session_factory
from orders_api.infrastructure.database import get_db, DatabaseSessionManager
import orders_api.infrastructure.database as db_module
from orders_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(engine=test_engine)


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
def order_payload():
    """Factory for a complete create payload; keyword args override fields."""
    def _make(**overrides):
        payload = {
            "order_id": "A1",
            "item_name": "Widget",
            "cost": 9.99,
            "order_date": "2023/05/01",
            "delivery_date": "2023/05/10",
        }
        payload.update(overrides)
        return payload
    return _make
