"""
Logging Setup

Centralized logging for the AI adapter. LOG_LEVEL selects the level.

Usage:
    from ai_adapter.config import configure_logging, get_logger

    configure_logging()              # once, at application startup
    logger = get_logger(__name__)    # in any module
"""

import logging
import os
import re
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Gemini carries its API key in the query string
_KEY_PARAM = re.compile(r"([?&]key=)[^&\s\"']+")


class RedactApiKeyFilter(logging.Filter):
    """Mask ``key=...`` query parameters in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _KEY_PARAM.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_log_level() -> int:
    """Resolve LOG_LEVEL; an unrecognized name warns on stderr and yields INFO."""
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if name in LOG_LEVELS:
        return logging.getLevelName(name)

    sys.stderr.write(
        f"Invalid LOG_LEVEL '{name}' (expected one of {'/'.join(LOG_LEVELS)}); "
        f"falling back to {DEFAULT_LOG_LEVEL}\n"
    )
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging(
    level: Optional[int] = None,
    verbose: bool = False,
) -> None:
    """
    Configure logging for applications embedding the adapter.

    Args:
        level: Override log level (default: from LOG_LEVEL env var)
        verbose: Use detailed format with timestamps (default: simple format)
    """
    if level is None:
        level = get_log_level()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT if verbose else LOG_FORMAT_SIMPLE,
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("ai_adapter").setLevel(level)

    httpx_logger = logging.getLogger("httpx")
    if not any(isinstance(f, RedactApiKeyFilter) for f in httpx_logger.filters):
        httpx_logger.addFilter(RedactApiKeyFilter())

    if level > logging.DEBUG:
        httpx_logger.setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (typically ``__name__``)."""
    return logging.getLogger(name)
