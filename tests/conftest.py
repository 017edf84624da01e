"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

# Point the application at SQLite before any settings are loaded
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("APP_ENV", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory bound to the test engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of Work factory using the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def profile_payload() -> dict[str, Any]:
    """A complete, valid profile request body."""
    return {
        "name": "  Alex Rivera ",
        "email": " Alex.Rivera@Example.com ",
        "education": ["BSc Computer Science - Stanford University (2019-2023)"],
        "skills": ["Python", "React", "AWS"],
        "projects": [
            {
                "title": "E-Commerce Platform",
                "description": "Full-stack store built with React, Node.js and MongoDB.",
                "links": ["https://github.com/alexrivera/ecommerce-platform"],
            },
            {
                "title": "Task Management API",
                "description": "RESTful API using Python, FastAPI and PostgreSQL.",
                "links": [],
            },
        ],
        "work": ["Software Engineer Intern - Tech Startup Inc. (Summer 2022)"],
        "links": {
            "github": "https://github.com/alexrivera",
            "linkedin": "https://linkedin.com/in/alexrivera",
        },
    }


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client backed by the in-memory database.

    Overrides the profile service and the raw session dependency so no
    request ever reaches the configured database URL.
    """
    from api.v1.dependencies import get_profile_service
    from domain.services.profile_service import ProfileService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    def override_get_profile_service() -> ProfileService:
        return ProfileService(uow_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_profile_service] = override_get_profile_service
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_client(
    client: AsyncClient, profile_payload: dict[str, Any]
) -> AsyncClient:
    """Test client with the sample profile already created."""
    response = await client.post("/api/profile", json=profile_payload)
    assert response.status_code == 201
    return client
