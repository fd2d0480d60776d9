"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh SQLite file. NullPool gives every session its own
connection so test seeding and request handling do not share transactions.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.tracker.api.dependencies import get_db_session
from src.tracker.core.db import get_session
from src.tracker.main import create_app
from src.tracker.models import User
from src.tracker.repositories import ProjectRepository, UserRepository
from src.tracker.services import AuthService, ProjectService
from tests.helpers import create_user


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a test database with all tables."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}",
        poolclass=NullPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session for seeding and inspecting data. Tests must commit explicitly."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    """Application with the session dependency bound to the test database."""
    application = create_app()

    async def _override_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    application.dependency_overrides[get_db_session] = _override_db_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def member(db_session: AsyncSession) -> User:
    return await create_user(db_session, email="member@example.com")


@pytest.fixture
async def other_member(db_session: AsyncSession) -> User:
    return await create_user(db_session, email="other@example.com")


@pytest.fixture
async def admin(db_session: AsyncSession) -> User:
    return await create_user(db_session, admin=True, email="admin@example.com")


@pytest.fixture
def auth_service(db_session: AsyncSession) -> AuthService:
    return AuthService(UserRepository(db_session), db_session)


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), db_session)
