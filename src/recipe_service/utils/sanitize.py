"""String sanitization for provider queries and log output.

Control characters are removed from anything that ends up in a provider
query or a log line, which keeps log entries single-line and prevents
forged log records.
"""

from __future__ import annotations

import re
from typing import Final


MAX_QUERY_LENGTH: Final[int] = 200
DEFAULT_LOG_LENGTH: Final[int] = 100

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE = re.compile(r"\s+")
_LINE_BREAKS = re.compile(r"[\r\n]")


def sanitize_for_query(value: str | None, max_length: int = MAX_QUERY_LENGTH) -> str:
    """Clean user search text before it is sent to the provider.

    Whitespace runs (including tabs and newlines) collapse to a single
    space, other control characters are dropped and the result is trimmed
    and capped at ``max_length`` characters.

    Args:
        value: Raw query text.
        max_length: Maximum length of the result.

    Returns:
        The cleaned query, or "" for None.
    """
    if value is None:
        return ""
    collapsed = _WHITESPACE.sub(" ", value)
    cleaned = _CONTROL_CHARS.sub("", collapsed).strip()
    return cleaned[:max_length].rstrip()


def sanitize_for_logging(value: str | None, max_length: int = DEFAULT_LOG_LENGTH) -> str:
    """Make arbitrary text safe to include in a log entry.

    Args:
        value: Text to log.
        max_length: Length after which the text is truncated with "...".

    Returns:
        The sanitized text, or "" for None.
    """
    if value is None:
        return ""
    cleaned = _CONTROL_CHARS.sub("", value)
    if len(cleaned) > max_length:
        return cleaned[:max_length] + "..."
    return cleaned


def sanitize_query_string(query_string: str | None) -> str:
    """Strip line breaks from a raw URL query string for logging."""
    if not query_string or not query_string.strip():
        return ""
    return _LINE_BREAKS.sub("", query_string)
