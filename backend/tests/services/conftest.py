"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the bootstrap accounts seeded
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Engine built with build_engine so PRAGMA foreign_keys matches production
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from httpx import ASGITransport, AsyncClient

from aurapass.config import get_settings
from aurapass.db.base import Base
from aurapass.infrastructure.database import (
    DatabaseSessionManager, build_engine, get_db,
)
import aurapass.infrastructure.database as db_module
from aurapass.main import app
from aurapass.services.bootstrap import seed_bootstrap_users

ADMIN_GID, ADMIN_PASSWORD = "Organizer", "Admin"
STUDENT_GID, STUDENT_PASSWORD = "DKTE-STU-0001", "456"


@pytest.fixture
async def test_engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:")
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
async def seeded(test_session_factory):
    async with test_session_factory() as session:
        await seed_bootstrap_users(session, get_settings())


@pytest.fixture
async def client(test_engine, test_session_factory, seeded):
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
def login(client):
    """Log in and return Authorization headers for the given account."""
    async def _login(gid: str, password: str) -> dict:
        res = await client.post("/api/login", json={"gid": gid, "password": password})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}
    return _login


@pytest.fixture
async def admin_headers(login):
    return await login(ADMIN_GID, ADMIN_PASSWORD)


@pytest.fixture
async def student_headers(login):
    return await login(STUDENT_GID, STUDENT_PASSWORD)


@pytest.fixture
def create_event(client, admin_headers):
    """POST an event as admin and return its JSON."""
    async def _create(**fields) -> dict:
        body = {"name": "Hackathon", "type": "Tech", "startDate": "2026-11-01"}
        body.update(fields)
        res = await client.post("/api/events", json=body, headers=admin_headers)
        assert res.status_code == 201, res.text
        return res.json()["event"]
    return _create


@pytest.fixture
def create_student(client, admin_headers, login):
    """Create a student as admin; return (gid, password, headers)."""
    async def _create(name: str = "Test Student") -> tuple[str, str, dict]:
        res = await client.post("/api/users", json={"name": name}, headers=admin_headers)
        assert res.status_code == 201, res.text
        user = res.json()["user"]
        headers = await login(user["gid"], user["password"])
        return user["gid"], user["password"], headers
    return _create
