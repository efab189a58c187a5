"""
Shared utilities for logging, parameter parsing and cache headers.
"""

from src.core.utils.cache_control import NO_CACHE_HEADER, cache_control_header, resolve_cache_seconds
from src.core.utils.logging import configure_logging, get_logger
from src.core.utils.params import clamp_value, parse_int, parse_string

__all__ = [
    "NO_CACHE_HEADER",
    "cache_control_header",
    "clamp_value",
    "configure_logging",
    "get_logger",
    "parse_int",
    "parse_string",
    "resolve_cache_seconds",
]
