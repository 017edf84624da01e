"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import engine, verify_connection

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Refuse to start without a reachable database; dispose the pool on shutdown."""
    await verify_connection()
    logger.info("application_started", api_prefix=settings.api_prefix)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Developer Portfolio API\n\n"
            "Stores a single developer profile (education, skills, projects, "
            "work history and links) and answers simple queries over it.\n\n"
            "### Features\n"
            "- **Profile**: create once, then update any top-level field\n"
            "- **Projects by skill**: case-insensitive match on project text\n"
            "- **Top skills**: skills in the order they were entered\n"
            "- **Search**: one query across skills, projects, education and work"
        ),
        version=settings.version,
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profile",
                "description": "Profile read and write operations",
            },
            {
                "name": "queries",
                "description": "Skill filtering, top skills and search",
            },
        ],
    )

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
