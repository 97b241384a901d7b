"""Rate limiting using SlowAPI.

Default limits apply to every route through ``SlowAPIMiddleware``; the
backing store is configurable (``memory://`` for a single instance).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from recipe_service.core.exceptions import ErrorResponse
from recipe_service.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request
    from starlette.responses import Response

    from recipe_service.core.config import Settings


logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


def create_limiter(settings: Settings) -> Limiter:
    """Create and configure the rate limiter.

    Args:
        settings: Application settings.

    Returns:
        Configured Limiter instance.
    """
    rate_limiting = settings.rate_limiting
    return Limiter(
        key_func=get_remote_address,
        default_limits=[rate_limiting.default],
        storage_uri=rate_limiting.storage_uri,
        strategy="fixed-window",
        headers_enabled=True,
        enabled=rate_limiting.enabled,
    )


def rate_limit_exceeded_handler(request: Request, exc: Exception) -> Response:
    """Return the standard error body with a 429 status.

    Synchronous because ``SlowAPIMiddleware`` calls the handler directly.
    """
    assert isinstance(exc, RateLimitExceeded)
    logger.warning(
        "Rate limit exceeded",
        path=request.url.path,
        method=request.method,
        client_ip=get_remote_address(request),
        limit=str(exc.detail),
    )

    body = ErrorResponse(
        error="RATE_LIMIT_EXCEEDED",
        message=RATE_LIMIT_MESSAGE,
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
    )
    response = ORJSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=body.model_dump(exclude_none=True),
    )
    limit = getattr(request.state, "view_rate_limit", None)
    if limit is not None:
        response = request.app.state.limiter._inject_headers(response, limit)  # noqa: SLF001
    return response


def setup_rate_limiting(app: FastAPI, settings: Settings) -> None:
    """Configure rate limiting for the FastAPI application.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    app.state.limiter = create_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info(
        "Rate limiting configured",
        enabled=settings.rate_limiting.enabled,
        default_limit=settings.rate_limiting.default,
    )
