"""Root conftest — async test database, seeded lookup data and HTTP client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - Seeded rows use explicit integer ids so store order is known

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for lookups
    - Seed data inserted through a separate session than the one under test,
      so nothing is served from a warm identity map
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)

import pytest
from httpx import ASGITransport, AsyncClient

from bookbrainz_api.db.base import Base
from bookbrainz_api.db.session import create_engine, create_session_factory
from bookbrainz_api.infrastructure.database import get_db
from bookbrainz_api.main import app
from tests.lookup_data import (
    BARE_EDITION_BBID, EDITION_BBID, TRANSLATION_BBID, WORK_BBID,
    insert_lookup_data,
)


@pytest.fixture
async def test_engine():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_lookup_data(test_session_factory):
    """Insert a fully populated edition, a bare edition, a work and a translation."""
    async with test_session_factory() as session:
        await insert_lookup_data(session)
    return {
        "edition": EDITION_BBID,
        "bare_edition": BARE_EDITION_BBID,
        "work": WORK_BBID,
        "translation": TRANSLATION_BBID,
    }


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
