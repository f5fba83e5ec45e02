"""
Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database (aiosqlite driver) with the
full schema created from the ORM metadata. API tests talk to the FastAPI app
through httpx with the session dependency pointed at that database.
"""

import os

from src.core.security import create_access_token, get_password_hash

ADMIN_PASSWORD = "correct horse battery staple"

# Set environment BEFORE importing the app
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_PASSWORD_HASH"] = get_password_hash(ADMIN_PASSWORD)
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ["AUTO_SEED"] = "false"
os.environ["STATIC_DIR"] = ""

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.api.main import app  # noqa: E402
from src.db.base import Base  # noqa: E402
from src.db.session import (  # noqa: E402
    create_session_maker,
    enable_sqlite_foreign_keys,
    get_async_session,
)
from src.repositories.unit_of_work import UnitOfWork  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    """Session factory configured like the application's."""
    return create_session_maker(engine)


@pytest_asyncio.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def uow(session):
    return UnitOfWork(session)


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client against the app, one database session per request."""

    async def override_get_async_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Authorization header with a valid administrator token."""
    return {"Authorization": f"Bearer {create_access_token('admin')}"}
