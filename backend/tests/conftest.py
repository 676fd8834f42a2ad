"""
Case API: Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throwaway SQLite file BEFORE any
       case_api module is imported, because the engine is built at import.

Fixtures:
    ├── mock_db_session: AsyncMock session for service-level unit tests
    ├── sample_case_data: Field values for a single case
    ├── database: Creates the schema, drops it and disposes the engine after
    ├── db_session: Session for repository tests
    ├── seeded_cases: Two cases inserted directly through the session factory
    ├── test_client: HTTPX AsyncClient wired to the FastAPI app
    └── case_count: Reads the row count through a separate session
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

_test_dir = tempfile.mkdtemp(prefix="case_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = case
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_case_data():
    return {
        "id": 1,
        "case_number": 1234,
        "title": "Case 1 Title",
        "description": "Case 1 Description",
        "created_date": datetime(2024, 1, 15, 10, 30),
    }


@pytest_asyncio.fixture
async def database():
    """Fresh `cases` table per test."""
    from case_api.database import Base, engine
    from case_api.models.case import Case  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled aiosqlite connections are bound to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """A session for tests that talk to the repository directly."""
    from case_api.database import async_session_factory

    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_cases(database):
    """
    Inserts the two cases most API tests start from and returns them as
    dicts in insertion order (ids 1 and 2).
    """
    from case_api.database import async_session_factory
    from case_api.models.case import Case

    rows = [
        Case(
            case_number=1234,
            title="Case 1 Title",
            description="Case 1 Description",
            created_date=datetime.now(timezone.utc).replace(tzinfo=None),
        ),
        Case(
            case_number=5678,
            title="Case 2 Title",
            description="Case 2 Description",
            created_date=datetime.now(timezone.utc).replace(tzinfo=None),
        ),
    ]
    async with async_session_factory() as session:
        session.add_all(rows)
        await session.commit()

    return [
        {
            "id": row.id,
            "caseNumber": row.case_number,
            "title": row.title,
            "description": row.description,
        }
        for row in rows
    ]


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from case_api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def case_count(database):
    """
    Returns a coroutine function reading the row count through its own
    session, the way a second client would see the table.
    """
    from case_api.database import async_session_factory
    from case_api.repositories.case_repository import CaseRepository

    async def _count() -> int:
        async with async_session_factory() as session:
            return await CaseRepository(session).count()

    return _count
