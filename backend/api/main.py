"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, backend.boundary.db, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.boundary.db import Database
from backend.boundary.db.create_tables import create_all_tables
from backend.configs import get_settings
from backend.observability import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    contact_router,
    courses_router,
    health_router,
    me_router,
    sessions_router,
    users_router,
    videos_router,
)


def create_app(database: Database | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        database: Database to serve from; built from settings at startup
            when omitted

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Opens the connection pool on startup and disposes it on shutdown.
        """
        configure_logging(settings.log_level)
        logger = logging.getLogger("uvicorn")

        # Startup
        db = database or Database.from_settings(settings.database)
        if settings.database.create_tables:
            await create_all_tables(db)
        app.state.database = db
        logger.info("Database pool ready")

        yield

        # Shutdown
        await db.dispose()
        logger.info("Database pool disposed")

    app = FastAPI(
        title="Course Platform API",
        description="Courses, sessions and enrollments for an online learning platform",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware; origins come from CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(courses_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(videos_router, prefix="/api/v1")
    app.include_router(me_router, prefix="/api/v1")
    app.include_router(contact_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "backend.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
