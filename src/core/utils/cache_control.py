"""
Cache-Control header helpers.
"""

from typing import Any

from src.core.config import CacheConfig
from src.core.utils.params import clamp_value, parse_int

NO_CACHE_HEADER = "no-cache, no-store, must-revalidate"


def resolve_cache_seconds(requested: Any, cache_config: CacheConfig) -> int:
    """
    Effective cache duration for a successful response.

    The requested value (default when absent) is clamped into the configured
    bounds; a non-numeric request clamps to the lower bound. A configured
    override replaces the result entirely.
    """
    raw = requested if requested not in (None, "") else cache_config.default_seconds
    seconds = clamp_value(parse_int(raw), cache_config.min_seconds, cache_config.max_seconds)
    if cache_config.override_seconds:
        return cache_config.override_seconds
    return seconds


def cache_control_header(seconds: int, cache_config: CacheConfig) -> str:
    return (
        f"max-age={seconds // 2}, s-maxage={seconds}, "
        f"stale-while-revalidate={cache_config.stale_while_revalidate}"
    )
