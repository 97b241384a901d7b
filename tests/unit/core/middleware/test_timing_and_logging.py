"""Unit tests for timing and request logging middleware."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from recipe_service.core.middleware import LoggingMiddleware, TimingMiddleware


pytestmark = pytest.mark.unit


def _app() -> FastAPI:
    app = FastAPI()

    @app.get("/recipes")
    async def recipes() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/recipes/{recipe_id}")
    async def recipe(recipe_id: int) -> dict[str, int]:
        return {"id": recipe_id}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


class TestTimingMiddleware:
    """Tests for TimingMiddleware."""

    def test_adds_process_time_header(self) -> None:
        """Should report processing time in milliseconds."""
        app = _app()
        app.add_middleware(TimingMiddleware)

        response = TestClient(app).get("/recipes")

        assert response.headers["X-Process-Time"].endswith("ms")

    def test_fast_request_not_logged(self) -> None:
        """Should stay quiet below the threshold."""
        app = _app()
        app.add_middleware(TimingMiddleware, slow_threshold_ms=60_000)

        with patch("recipe_service.core.middleware.timing.logger") as mock_logger:
            TestClient(app).get("/recipes")

        mock_logger.warning.assert_not_called()

    def test_slow_request_logged_with_route_and_recipe(self) -> None:
        """Should log the route template and recipe ID above the threshold."""
        app = _app()
        app.add_middleware(TimingMiddleware, slow_threshold_ms=-1)

        with patch("recipe_service.core.middleware.timing.logger") as mock_logger:
            TestClient(app).get("/recipes/42")

        mock_logger.warning.assert_called_once()
        fields = mock_logger.warning.call_args.kwargs
        assert fields["route"] == "/recipes/{recipe_id}"
        assert fields["recipe_id"] == "42"
        assert fields["status_code"] == 200
        assert fields["threshold_ms"] == -1

    def test_unmatched_path_logged_by_url(self) -> None:
        """Should fall back to the raw path when no route matched."""
        app = _app()
        app.add_middleware(TimingMiddleware, slow_threshold_ms=-1)

        with patch("recipe_service.core.middleware.timing.logger") as mock_logger:
            TestClient(app).get("/missing")

        fields = mock_logger.warning.call_args.kwargs
        assert fields["route"] == "/missing"
        assert fields["status_code"] == 404
        assert "recipe_id" not in fields


class TestLoggingMiddleware:
    """Tests for LoggingMiddleware."""

    def test_logs_start_and_completion(self) -> None:
        """Should log the request and the response status."""
        app = _app()
        app.add_middleware(LoggingMiddleware)

        with patch("recipe_service.core.middleware.logging.logger") as mock_logger:
            TestClient(app).get("/recipes", params={"query": "pasta"})

        messages = [c.args[0] for c in mock_logger.info.call_args_list]
        assert messages == ["Request started", "Request completed"]
        assert mock_logger.info.call_args_list[0].kwargs["query_params"] == "query=pasta"
        assert mock_logger.info.call_args_list[1].kwargs["status_code"] == 200

    def test_skips_excluded_paths(self) -> None:
        """Should not log health checks."""
        app = _app()
        app.add_middleware(LoggingMiddleware)

        with patch("recipe_service.core.middleware.logging.logger") as mock_logger:
            TestClient(app).get("/health")

        mock_logger.info.assert_not_called()

    def test_client_ip_from_forwarded_header(self) -> None:
        """Should prefer the first X-Forwarded-For address."""
        app = _app()
        app.add_middleware(LoggingMiddleware)

        with patch("recipe_service.core.middleware.logging.bind_context") as bind:
            TestClient(app).get(
                "/recipes", headers={"X-Forwarded-For": "203.0.113.9, 10.0.0.1"}
            )

        assert bind.call_args.kwargs["client_ip"] == "203.0.113.9"
