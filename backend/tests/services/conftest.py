"""Service test fixtures: async DB, repository, service, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app's composition root is replaced with one bound to the test database
    - db_module.db_manager patched so readiness checks see the test database
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from roomfinder.db.base import Base
from roomfinder.infrastructure.database import DatabaseSessionManager
from roomfinder.infrastructure.room_repository import SqlAlchemyRoomRepository
from roomfinder.services.room_service import RoomService
import roomfinder.infrastructure.database as db_module
from roomfinder.main import app


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
async def test_db_manager(test_engine):
    """DatabaseSessionManager bound to the test engine (no pool arguments)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
def room_repository(test_db_manager):
    return SqlAlchemyRoomRepository(test_db_manager)


@pytest.fixture
def room_service(room_repository):
    return RoomService(room_repository)


@pytest.fixture
async def client(test_db_manager, room_service):
    """FastAPI test client wired to the test database."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager
    app.state.room_service = room_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    del app.state.room_service
    db_module.db_manager = original_manager
