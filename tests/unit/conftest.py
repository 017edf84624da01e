"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.profile import Profile, ProfileLinks, Project


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def profile() -> Profile:
    """A small but complete profile snapshot."""
    return Profile(
        name="Alex Rivera",
        email="alex.rivera@example.com",
        education=[
            "BSc Computer Science - Stanford University",
            "Full Stack Bootcamp - App Academy",
        ],
        skills=["Python", "React", "AWS"],
        projects=[
            Project(
                title="E-Commerce Platform",
                description="Built with React, Node.js and MongoDB. Deployed on AWS.",
                links=["https://github.com/alexrivera/ecommerce-platform"],
            ),
            Project(
                title="Task Management API",
                description="RESTful API using python and FastAPI.",
            ),
            Project(
                title="Weather Dashboard",
                description="TypeScript dashboard with interactive charts.",
            ),
        ],
        work=[
            "Software Engineer Intern - Tech Startup Inc.",
            "Teaching Assistant - Stanford CS Department",
        ],
        links=ProfileLinks(github="https://github.com/alexrivera"),
    )
