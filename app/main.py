"""
Content Dashboard API - FastAPI Application

Main entry point for the FastAPI application. Administrators manage events,
about-us sections and billboard promos, with their media kept in the
configured media store.
"""

import sys
from contextlib import asynccontextmanager
from pathlib import Path
from urllib.parse import urlparse

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.api import router as api_router
from app.core.config import get_settings
from app.core.errors import UNKNOWN_ERROR_MESSAGE, ErrorCode
from app.db.base import Base
from app.db import models_registry  # noqa: F401 - Import to register models
from app.db.session import engine

settings = get_settings()


def configure_logging() -> None:
    """Send loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper())


async def init_database() -> None:
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def init_default_user() -> None:
    """Create the default administrator if configured and missing."""
    from app.db.session import async_session_maker
    from app.services.user_service import UserService

    if not settings.admin_password:
        logger.info("ADMIN_PASSWORD not set - skipping default administrator")
        return

    async with async_session_maker() as db:
        user_service = UserService(db)
        existing = await user_service.get_by_email(settings.admin_email)
        if not existing:
            await user_service.create_user(
                email=settings.admin_email,
                password=settings.admin_password,
                name="Administrator",
                is_superuser=True,
            )
            logger.info(f"Default administrator {settings.admin_email} created")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    configure_logging()
    logger.info("Starting Content Dashboard API...")

    # Ensure data directory exists
    Path(settings.data_save_folder).mkdir(parents=True, exist_ok=True)

    await init_database()
    await init_default_user()

    logger.info(
        f"Content Dashboard API started on port {settings.port} "
        f"(media backend: {settings.media_backend})"
    )

    yield

    # Shutdown
    logger.info("Shutting down Content Dashboard API...")
    await engine.dispose()
    logger.info("Content Dashboard API stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Content Dashboard API - events, about-us sections and billboards",
    lifespan=lifespan,
    docs_url="/swagger" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


# Exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": UNKNOWN_ERROR_MESSAGE,
            "code": ErrorCode.UNKNOWN_ERROR.value,
        },
    )


# Include API router
app.include_router(api_router)


# Static file serving for locally stored media
if settings.media_backend == "local":
    media_path = Path(settings.media_root)
    media_path.mkdir(parents=True, exist_ok=True)
    app.mount(
        urlparse(settings.media_base_url).path or "/media",
        StaticFiles(directory=str(media_path)),
        name="media",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
