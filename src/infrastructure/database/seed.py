"""Seed the database with a sample profile.

Replaces whatever profile is stored with the sample below. Run with
``portfolio-seed`` (or ``python -m infrastructure.database.seed``).
"""

import asyncio
import sys

import structlog

from core.logging import setup_logging
from domain.entities.profile import Profile, ProfileLinks, Project
from infrastructure.database.models import Base
from infrastructure.database.session import async_session_factory, engine
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

logger = structlog.get_logger()


def build_sample_profile() -> Profile:
    """The demo profile used for local development."""
    return Profile(
        name="Alex Rivera",
        email="alex.rivera@example.com",
        education=[
            "Bachelor of Science in Computer Science - Stanford University (2019-2023)",
            "Full Stack Web Development Bootcamp - App Academy (2022)",
        ],
        skills=[
            "JavaScript",
            "TypeScript",
            "Python",
            "React",
            "Node.js",
            "Express",
            "MongoDB",
            "PostgreSQL",
            "Docker",
            "AWS",
            "Git",
            "REST APIs",
            "GraphQL",
            "CI/CD",
            "Agile",
        ],
        projects=[
            Project(
                title="E-Commerce Platform",
                description=(
                    "Built a full-stack e-commerce platform using React, Node.js, Express, "
                    "and MongoDB. Implemented user authentication, shopping cart, payment "
                    "integration with Stripe, and admin dashboard. Deployed on AWS with "
                    "Docker containers."
                ),
                links=[
                    "https://github.com/alexrivera/ecommerce-platform",
                    "https://demo-ecommerce.alexrivera.dev",
                ],
            ),
            Project(
                title="Real-Time Chat Application",
                description=(
                    "Developed a real-time chat application using React, Socket.io, Node.js, "
                    "and PostgreSQL. Features include private messaging, group chats, file "
                    "sharing, and message history. Implemented Redis for caching and "
                    "session management."
                ),
                links=[
                    "https://github.com/alexrivera/realtime-chat",
                    "https://chat-app.alexrivera.dev",
                ],
            ),
            Project(
                title="Task Management API",
                description=(
                    "Created a RESTful API for task management using Python, FastAPI, and "
                    "PostgreSQL. Implemented JWT authentication, role-based access control, "
                    "and comprehensive API documentation with Swagger. Deployed on Railway "
                    "with automated CI/CD pipeline."
                ),
                links=[
                    "https://github.com/alexrivera/task-api",
                    "https://api.tasks.alexrivera.dev/docs",
                ],
            ),
            Project(
                title="Weather Dashboard",
                description=(
                    "Built a weather dashboard using React, TypeScript, and OpenWeather API. "
                    "Features include location search, 7-day forecast, interactive charts "
                    "with Chart.js, and responsive design. Deployed on Vercel with automatic "
                    "deployments from GitHub."
                ),
                links=[
                    "https://github.com/alexrivera/weather-dashboard",
                    "https://weather.alexrivera.dev",
                ],
            ),
            Project(
                title="Expense Tracker Mobile App",
                description=(
                    "Developed a cross-platform mobile app using React Native and Firebase. "
                    "Includes expense categorization, budget tracking, data visualization, "
                    "and offline support. Published on both iOS and Android app stores."
                ),
                links=["https://github.com/alexrivera/expense-tracker"],
            ),
        ],
        work=[
            "Software Engineer Intern - Tech Startup Inc. (Summer 2022) - "
            "Worked on backend services using Node.js and PostgreSQL",
            "Frontend Developer - Freelance (2021-2023) - "
            "Built websites and web applications for local businesses",
            "Teaching Assistant - Stanford CS Department (2021-2022) - "
            "Assisted in teaching Data Structures and Algorithms course",
        ],
        links=ProfileLinks(
            github="https://github.com/alexrivera",
            linkedin="https://linkedin.com/in/alexrivera",
            portfolio="https://alexrivera.dev",
        ),
    )


async def seed(uow: SQLAlchemyUnitOfWork, profile: Profile) -> Profile:
    """Replace the stored profile with ``profile`` in a single transaction."""
    profile.validate()
    async with uow:
        removed = await uow.profiles.delete()
        if removed:
            logger.info("seed_existing_profile_removed")
        created = await uow.profiles.create(profile)
        await uow.commit()
    return created


async def _run() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        profile = await seed(SQLAlchemyUnitOfWork(async_session_factory), build_sample_profile())
    finally:
        await engine.dispose()

    logger.info(
        "seed_completed",
        name=profile.name,
        email=profile.email,
        skills=len(profile.skills),
        projects=len(profile.projects),
        education=len(profile.education),
        work=len(profile.work),
    )


def main() -> None:
    """Console entry point."""
    setup_logging()
    try:
        asyncio.run(_run())
    except Exception:
        logger.exception("seed_failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
