"""
Cache configuration.

Bounds for the Cache-Control header emitted on successful responses.
"""

from dataclasses import dataclass

FOUR_HOURS = 14400
ONE_DAY = 86400


@dataclass
class CacheConfig:
    """Cache configuration."""

    default_seconds: int = FOUR_HOURS
    min_seconds: int = FOUR_HOURS
    max_seconds: int = ONE_DAY
    stale_while_revalidate: int = ONE_DAY
    # Process-wide override (CACHE_SECONDS); wins over the request value when set
    override_seconds: int | None = None
