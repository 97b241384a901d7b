"""Logging configuration using Loguru.

Provides:
- JSON lines (orjson) for production
- Colorized text for development
- Request-scoped context (request id, method, path) via ContextVar
- Interception of standard library logging (uvicorn, httpx)
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING

import orjson
from loguru import logger


if TYPE_CHECKING:
    from typing import Any


_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

_NOISY_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "httpcore")


class InterceptHandler(logging.Handler):
    """Forward standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through Loguru at the matching level."""
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _format_json(record: dict[str, Any]) -> str:
    """Serialize a record to one JSON line.

    Loguru treats the returned string as a template, so the JSON payload is
    stashed in ``extra`` and referenced rather than returned directly.
    """
    fields: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["extra"].get("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
        **_log_context.get(),
        **{k: v for k, v in record["extra"].items() if k not in ("name", "serialized")},
    }

    exception = record["exception"]
    if exception:
        fields["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    record["extra"]["serialized"] = orjson.dumps(
        fields, default=str, option=orjson.OPT_NON_STR_KEYS
    ).decode()
    return "{extra[serialized]}\n"


def _format_text(record: dict[str, Any]) -> str:
    """Build a human-readable format template with the request context."""
    context = {**_log_context.get()}
    context.update(
        (k, v) for k, v in record["extra"].items() if k not in ("name", "serialized")
    )
    context_str = ""
    if context:
        parts = " ".join(f"{k}={v}" for k, v in context.items())
        # Escape braces so values are not read as format fields
        context_str = " | " + parts.replace("{", "{{").replace("}", "}}")

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
        f"{context_str} - "
        "<level>{message}</level>\n"
    )
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    *,
    is_development: bool = False,
) -> None:
    """Configure Loguru sinks and standard library interception.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" or "text".
        is_development: Force text output regardless of ``log_format``.
    """
    logger.remove()

    if log_format == "json" and not is_development:
        logger.add(
            sys.stdout,
            format=_format_json,
            level=log_level.upper(),
            colorize=False,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            format=_format_text,
            level=log_level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a Loguru logger bound to a module name.

    Args:
        name: Logger name (typically __name__).
    """
    return logger.bind(name=name)


def bind_context(**kwargs: Any) -> None:
    """Add key/value pairs to the logging context of the current task.

    Example:
        bind_context(request_id="abc-123", method="GET")
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def clear_context() -> None:
    """Reset the logging context; called at the start of each request."""
    _log_context.set({})


def get_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
]
