"""Unit tests for request ID middleware."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from recipe_service.core.middleware.request_id import RequestIDMiddleware


pytestmark = pytest.mark.unit


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    request.state = MagicMock()
    return request


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    def test_init_custom_header(self) -> None:
        """Should accept custom header name."""
        middleware = RequestIDMiddleware(MagicMock(), header_name="X-Correlation-ID")
        assert middleware.header_name == "X-Correlation-ID"

    async def test_generates_request_id_when_missing(self) -> None:
        """Should generate a UUID when the header is absent."""
        middleware = RequestIDMiddleware(MagicMock())
        request = _request({})
        response = MagicMock()
        response.headers = {}

        with (
            patch("recipe_service.core.middleware.request_id.clear_context") as clear,
            patch("recipe_service.core.middleware.request_id.bind_context") as bind,
        ):
            result = await middleware.dispatch(request, AsyncMock(return_value=response))

        request_id = result.headers["X-Request-ID"]
        assert len(request_id) == 36
        assert request.state.request_id == request_id
        clear.assert_called_once()
        bind.assert_called_once_with(request_id=request_id)

    async def test_propagates_existing_request_id(self) -> None:
        """Should reuse the caller's request ID."""
        middleware = RequestIDMiddleware(MagicMock())
        request = _request({"X-Request-ID": "existing-id-123"})
        response = MagicMock()
        response.headers = {}

        result = await middleware.dispatch(request, AsyncMock(return_value=response))

        assert result.headers["X-Request-ID"] == "existing-id-123"
        assert request.state.request_id == "existing-id-123"

    async def test_sanitizes_incoming_id(self) -> None:
        """Should strip control characters and cap the length."""
        middleware = RequestIDMiddleware(MagicMock())
        request = _request({"X-Request-ID": "abc\r\nforged" + "x" * 100})
        response = MagicMock()
        response.headers = {}

        result = await middleware.dispatch(request, AsyncMock(return_value=response))

        request_id = result.headers["X-Request-ID"]
        assert "\n" not in request_id
        assert len(request_id) <= 64
        assert request_id.startswith("abc forged")
