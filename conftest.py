import os

# Point settings at an in-memory database before the app modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as AsyncSessionSQLModel

from app.core.config import settings, async_url
from app.db.database import build_engine, init_db, get_db
from app.main import app


@pytest_asyncio.fixture(scope="function")
async def async_test_engine():
    """Create a fresh test engine with all tables for each test."""
    db_url = settings.TEST_DATABASE_URL or "sqlite+aiosqlite:///:memory:"
    test_engine = build_engine(async_url(db_url))
    await init_db(test_engine)

    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def async_test_session(async_test_engine):
    """Create a test async session for each test."""
    TestSessionLocal = sessionmaker(
        bind=async_test_engine,
        class_=AsyncSessionSQLModel,
        expire_on_commit=False,
        autoflush=False
    )

    async with TestSessionLocal() as session:
        yield session


@pytest_asyncio.fixture
async def client(async_test_session):
    """Create test client with database session override"""
    def override_get_db():
        return async_test_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    # Clean up
    app.dependency_overrides.clear()
