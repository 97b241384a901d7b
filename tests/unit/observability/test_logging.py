"""Unit tests for logging module.

Tests cover:
- Context variable management
- JSON and text formatting
- Standard library interception
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import orjson
import pytest
from loguru import logger

from recipe_service.observability.logging import (
    InterceptHandler,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    setup_logging,
)


if TYPE_CHECKING:
    from collections.abc import Generator


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Start each test with an empty context and restore sinks afterwards."""
    clear_context()
    yield
    clear_context()
    setup_logging(log_level="DEBUG", log_format="text")


class TestContextManagement:
    """Tests for logging context management."""

    def test_bind_context_merges(self) -> None:
        """Should merge new values into the existing context."""
        bind_context(request_id="req-1")
        bind_context(method="GET")

        assert get_context() == {"request_id": "req-1", "method": "GET"}

    def test_clear_context(self) -> None:
        """Should drop every bound value."""
        bind_context(request_id="req-1")
        clear_context()

        assert get_context() == {}

    def test_get_context_returns_copy(self) -> None:
        """Should not expose the stored mapping."""
        bind_context(request_id="req-1")
        get_context()["request_id"] = "changed"

        assert get_context()["request_id"] == "req-1"


class TestJsonFormat:
    """Tests for JSON line output."""

    def test_emits_structured_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should write one JSON object with message, fields and context."""
        setup_logging(log_level="INFO", log_format="json")
        bind_context(request_id="req-42")

        get_logger("recipe_service.test").info("Recipe loaded", recipe_id=7)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = orjson.loads(line)
        assert record["message"] == "Recipe loaded"
        assert record["level"] == "INFO"
        assert record["logger"] == "recipe_service.test"
        assert record["recipe_id"] == 7
        assert record["request_id"] == "req-42"

    def test_respects_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should drop records below the configured level."""
        setup_logging(log_level="WARNING", log_format="json")

        get_logger("recipe_service.test").info("hidden")

        assert capsys.readouterr().out == ""

    def test_values_with_braces(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should not treat braces in values as format fields."""
        setup_logging(log_level="INFO", log_format="json")

        get_logger("recipe_service.test").info("Query logged", query="{weird}")

        record = orjson.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["query"] == "{weird}"


class TestTextFormat:
    """Tests for human-readable output."""

    def test_development_forces_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should write text lines in development even if JSON is configured."""
        setup_logging(log_level="INFO", log_format="json", is_development=True)
        bind_context(request_id="req-7")

        get_logger("recipe_service.test").info("Search completed", total=3)

        out = capsys.readouterr().out
        assert "Search completed" in out
        assert "request_id=req-7" in out
        assert "total=3" in out

    def test_escapes_braces(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should render context values containing braces literally."""
        setup_logging(log_level="INFO", log_format="text")

        get_logger("recipe_service.test").info("Odd value", value="{x}")

        assert "value={x}" in capsys.readouterr().out


class TestInterceptHandler:
    """Tests for standard library interception."""

    def test_forwards_records(self) -> None:
        """Should route standard logging records through Loguru."""
        messages: list[str] = []
        sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
        try:
            std_logger = logging.getLogger("recipe_service.tests.intercept")
            std_logger.handlers = [InterceptHandler()]
            std_logger.propagate = False
            std_logger.setLevel(logging.INFO)

            std_logger.info("from stdlib")
        finally:
            logger.remove(sink_id)

        assert "from stdlib" in messages

    def test_setup_quiets_noisy_loggers(self) -> None:
        """Should raise third-party loggers to WARNING."""
        setup_logging(log_level="DEBUG", log_format="text")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
