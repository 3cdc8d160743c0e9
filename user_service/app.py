"""
FastAPI application for User Service.

Composition root: builds the store, owns the repository provider and
wires the routers. Tests pass their own store or repository to
create_app instead of patching globals.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .domain.exceptions import ProviderMisuseError, StoreFailureError
from .metrics import track_request_metrics
from .repositories.user_repository import UserRepository, UserRepositoryProvider
from .routers import health_router, users
from .store import KeyValueStore, create_store

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """
    Create and configure the application.

    Args:
        settings: Application settings (module settings if None)
        store: Store to use; created from settings on startup if None
        repository: Replacement repository installed as the provider's mock

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    provider = UserRepositoryProvider()
    if repository is not None:
        provider.install_mock(repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting User Service", backend=settings.STORE_BACKEND)

        owns_store = store is None
        active_store = create_store(settings) if owns_store else store
        app.state.settings = settings
        app.state.store = active_store
        app.state.repository_provider = provider

        if settings.SEED_ON_STARTUP:
            await provider.get(active_store).init()
            logger.info("Seed users loaded", cache=settings.CACHE_NAME)

        logger.info("User Service started")

        yield

        logger.info("Shutting down User Service")
        provider.reset()
        if owns_store:
            active_store.close()
        logger.info("User Service shutdown complete")

    app = FastAPI(
        title="User Service",
        description="User records backed by an in-memory cache",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        track_request_metrics(
            request.method, request.url.path, response.status_code, time.perf_counter() - start
        )
        return response

    @app.exception_handler(StoreFailureError)
    async def store_failure_handler(request: Request, exc: StoreFailureError):
        logger.error("Store failure", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": exc.message, "operation": exc.operation},
        )

    @app.exception_handler(ProviderMisuseError)
    async def provider_misuse_handler(request: Request, exc: ProviderMisuseError):
        logger.critical("Repository unavailable", error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )

    app.include_router(health_router.router)
    app.include_router(users.router)

    return app


app = create_app()
