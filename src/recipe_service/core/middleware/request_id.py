"""Request ID middleware.

Propagates the caller's ``X-Request-ID`` or generates one, stores it on
``request.state`` and binds it to the logging context.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_service.observability.logging import bind_context, clear_context
from recipe_service.utils.sanitize import sanitize_for_query


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


MAX_REQUEST_ID_LENGTH = 64


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to every request and response."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add request ID."""
        clear_context()

        incoming = request.headers.get(self.header_name, "")
        request_id = sanitize_for_query(incoming, MAX_REQUEST_ID_LENGTH)
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id
        bind_context(request_id=request_id)

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
