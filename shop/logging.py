"""
Centralized logging configuration for the cart store.

Usage:
    from shop.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart written")
    logger.warning("Failed to read cart", exc_info=True)
"""

import logging
import sys
from functools import cache

from shop.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level() -> int:
    """Get log level from settings or default to INFO."""
    return getattr(logging, get_settings().log_level, logging.INFO)


def _configure_root_logger() -> None:
    """Configure root logger with a console handler."""
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)


# Configure once on module import
_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Module logger; one instance per dotted name."""
    return logging.getLogger(name)


_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make a cart name (or other caller-supplied text) safe to put in a log line.

    Cart names are used verbatim as file names, so they may carry line breaks
    or control characters that would forge extra log records (CWE-117).
    Those are escaped and the result is clipped to `max_length` characters.

    Args:
        value: Text to render; None or empty renders as "N/A"
        max_length: Characters kept before a trailing "..."

    Returns:
        Single-line text for log messages
    """
    if not value:
        return "N/A"
    escaped = str(value).translate(_CONTROL_ESCAPES)
    if len(escaped) > max_length:
        return f"{escaped[:max_length]}..."
    return escaped


__all__ = [
    "LOG_FORMAT",
    "get_logger",
    "sanitize_string_for_logging",
]
