"""
Configuration package - unified access point.

This package provides all configuration classes and the global config instance.
"""

from src.core.config.cache_config import CacheConfig
from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.settings import Config, config

__all__ = [
    "CacheConfig",
    "Config",
    "GitHubConfig",
    "LoggingConfig",
    "config",
]
