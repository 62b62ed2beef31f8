"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.middleware.error_handler import (
    error_handler_middleware,
    request_validation_exception_handler,
)
from src.api.middleware.latency_logging import latency_logging_with_stats_middleware
from src.api.middleware.request_size import request_size_limit_middleware
from src.api.routes import health, profiles
from src.core.config import get_settings
from src.core.storage import create_profile_store
from src.services.profile_store import ProfileStore
from src.services.sample_profiles import seed_sample_profiles

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds and seeds the configured profile store unless one was injected
    into ``create_app``, and closes it on shutdown.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to the application.
    """
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.app_env)

    owns_store = app.state.profile_store is None
    if owns_store:
        app.state.profile_store = create_profile_store(settings)
        if settings.seed_sample_profiles:
            await seed_sample_profiles(app.state.profile_store)

    yield

    if owns_store:
        await app.state.profile_store.close()
        app.state.profile_store = None
        logger.info("Profile store closed")
    logger.info("Shutting down %s", settings.app_name)


def create_app(profile_store: ProfileStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        profile_store: Store to serve from. When omitted, the lifespan
            builds one from settings.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Profile Directory API",
        description="Browse, search and administer a directory of people profiles",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.profile_store = profile_store

    # Error handler sits innermost of the three so latency logging
    # records the status of the error responses it produces
    app.add_middleware(BaseHTTPMiddleware, dispatch=error_handler_middleware)

    # Add latency logging middleware (tracks request timing)
    app.add_middleware(BaseHTTPMiddleware, dispatch=latency_logging_with_stats_middleware)

    # Add request size limit middleware (rejects oversized requests early)
    app.add_middleware(BaseHTTPMiddleware, dispatch=request_size_limit_middleware)

    # CORS is added last so it wraps every response, error responses included
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Mount health routes at root level (no prefix)
    app.include_router(health.router)

    api_router = APIRouter(prefix="/api")
    api_router.include_router(profiles.router)
    app.include_router(api_router)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
