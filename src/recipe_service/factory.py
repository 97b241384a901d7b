"""Application factory for creating FastAPI instances."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_service.api.v1.endpoints import health
from recipe_service.api.v1.router import router as v1_router
from recipe_service.core.config import Settings, get_settings
from recipe_service.core.events import lifespan
from recipe_service.core.exceptions import setup_exception_handlers
from recipe_service.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    TimingMiddleware,
)
from recipe_service.core.rate_limit import setup_rate_limiting


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Recipe search, details and ingredient-exclusion nutrition API",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_non_production else None,
        redoc_url="/redoc" if settings.is_non_production else None,
        openapi_url="/openapi.json" if settings.is_non_production else None,
        debug=settings.app.debug,
    )

    # Read by the lifespan handler
    app.state.settings = settings

    setup_exception_handlers(app)

    # Added before the rest so the limiter runs after request IDs are bound
    setup_rate_limiting(app, settings)
    _setup_middleware(app, settings)
    _setup_routers(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware runs in reverse order of addition. Order from the request's
    perspective:
    1. RequestIDMiddleware
    2. TimingMiddleware
    3. LoggingMiddleware
    4. CORSMiddleware
    5. SlowAPIMiddleware
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(LoggingMiddleware, exclude_paths={"/health", "/ready"})
    app.add_middleware(
        TimingMiddleware,
        slow_threshold_ms=settings.api.slow_request_threshold_ms,
    )
    app.add_middleware(RequestIDMiddleware)


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    """Mount API routers."""
    app.include_router(health.router)
    app.include_router(v1_router, prefix=settings.api.v1_prefix)
