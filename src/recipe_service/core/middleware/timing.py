"""Request timing middleware.

Sets ``X-Process-Time`` on every response. Requests slower than the
configured threshold are logged against the matched route template, so slow
lookups of different recipes group under one endpoint, together with the
recipe ID when the route carries one.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_service.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


logger = get_logger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"
DEFAULT_SLOW_REQUEST_MS = 1000.0


class TimingMiddleware(BaseHTTPMiddleware):
    """Measure request processing time."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        slow_threshold_ms: float = DEFAULT_SLOW_REQUEST_MS,
    ) -> None:
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        response.headers[PROCESS_TIME_HEADER] = f"{duration_ms}ms"

        if duration_ms > self.slow_threshold_ms:
            logger.warning(
                "Slow request detected",
                **_route_fields(request),
                status_code=response.status_code,
                duration_ms=duration_ms,
                threshold_ms=self.slow_threshold_ms,
            )

        return response


def _route_fields(request: Request) -> dict[str, Any]:
    # Routing fills these scope keys in place once call_next has run
    route = request.scope.get("route")
    fields: dict[str, Any] = {
        "method": request.method,
        "route": getattr(route, "path", None) or request.url.path,
    }
    recipe_id = request.scope.get("path_params", {}).get("recipe_id")
    if recipe_id is not None:
        fields["recipe_id"] = recipe_id
    return fields
