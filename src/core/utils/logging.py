"""
Structured logging utilities.

Provides the logger handed to request-path components and the process-wide
structlog setup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from src.core.config import config


def _drop_event(logger: Any, method_name: str, event_dict: Any) -> Any:
    raise structlog.DropEvent


def get_logger(name: str | None = None) -> Any:
    """
    Return the logger injected into the fetch/retry/classify components.

    Under ``ENVIRONMENT=test`` every event is dropped before it reaches
    the output; otherwise it is the regular structlog logger.
    """
    if config.is_test:
        return structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_event])
    return structlog.get_logger(name)


def resolve_level(name: str) -> int:
    """Numeric level for a LOG_LEVEL value; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(stream: TextIO | None = None) -> None:
    """
    Configure stdlib logging and structlog from the LoggingConfig section.

    Both write to stderr (or ``stream``) and drop events below LOG_LEVEL.
    """
    stream = stream or sys.stderr
    level = resolve_level(config.logging.level)

    logging.basicConfig(
        level=level,
        format=config.logging.format,
        stream=stream,
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(stream),
        cache_logger_on_first_use=False,
    )
