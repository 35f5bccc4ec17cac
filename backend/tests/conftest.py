"""
Pytest fixtures for test database, client, and authentication.

Every test gets a fresh in-memory SQLite database; set TEST_DATABASE_URL to
run the same suite against another async driver.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.models import User, Enrollment, Hotel, Room, TicketStatus

from tests import factories

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture(scope="function")
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Create tables, yield a sessionmaker bound to them, then drop tables for isolation."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    return await factories.create_user(db_session, email="test@example.com", password="testpassword123")


@pytest_asyncio.fixture
async def auth_headers(db_session: AsyncSession, test_user: User) -> dict:
    """Authorization headers with a session-backed Bearer token."""
    token = await factories.generate_valid_token(db_session, test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def enrollment(db_session: AsyncSession, test_user: User) -> Enrollment:
    return await factories.create_enrollment_with_address(db_session, test_user)


@pytest_asyncio.fixture
async def eligible_user(db_session: AsyncSession, test_user: User, enrollment: Enrollment) -> User:
    """Test user holding a paid, in-person ticket that includes hotel."""
    ticket_type = await factories.create_ticket_type(db_session, is_remote=False, includes_hotel=True)
    await factories.create_ticket(db_session, enrollment.id, ticket_type.id, TicketStatus.PAID)
    return test_user


@pytest_asyncio.fixture
async def hotel(db_session: AsyncSession) -> Hotel:
    return await factories.create_hotel(db_session)


@pytest_asyncio.fixture
async def room(db_session: AsyncSession, hotel: Hotel) -> Room:
    """A room with capacity 3."""
    return await factories.create_room(db_session, hotel.id, capacity=3)


@pytest_asyncio.fixture
async def other_room(db_session: AsyncSession, hotel: Hotel) -> Room:
    return await factories.create_room(db_session, hotel.id, capacity=3)
