"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness check sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection, one database
    - PostgreSQL-only column types have SQLite variants (models/artist.py)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from artist_catalog.db.base import Base
from artist_catalog.infrastructure.artist_store import SqlAlchemyArtistStore
from artist_catalog.infrastructure.database import get_db, DatabaseSessionManager
import artist_catalog.infrastructure.database as db_module
from artist_catalog.main import app
from artist_catalog.services.artist_catalog import ArtistCatalog


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
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return SqlAlchemyArtistStore(test_db)


@pytest.fixture
def catalog(store):
    return ArtistCatalog(store)


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
def artist_payload():
    return {
        "name": "Radiohead",
        "genre": "Alternative Rock",
        "formation_year": 1985,
        "country": "United Kingdom",
        "description": "English rock band from Abingdon",
        "popular_albums": ["OK Computer", "Kid A"],
    }


@pytest.fixture
async def seed_artist(client, artist_payload):
    """Create one artist through the API and return its JSON record."""
    res = await client.post("/api/v1/artists", json=artist_payload)
    assert res.status_code == 201
    return res.json()["data"]
