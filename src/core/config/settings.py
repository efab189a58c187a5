"""
Main configuration class that composes all configs.
"""

import os
import re

from dotenv import load_dotenv

from src.core.config.cache_config import CacheConfig
from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig

# Load environment variables from a .env file
load_dotenv()

_PAT_KEY = re.compile(r"^PAT_?(\d*)$")


def discover_tokens(environ: dict[str, str] | None = None) -> list[str]:
    """
    Collect GitHub tokens from PAT, PAT_1, PAT_2, ... in rotation order.

    Keys are ordered by their numeric suffix; a bare PAT comes first.
    Empty values are skipped.
    """
    environ = dict(os.environ if environ is None else environ)
    found: list[tuple[int, str]] = []
    for key, value in environ.items():
        match = _PAT_KEY.match(key)
        if not match or not value:
            continue
        suffix = match.group(1)
        found.append((int(suffix) if suffix else 0, value))
    return [token for _, token in sorted(found)]


def parse_optional_int(value: str | None) -> int | None:
    """Parse an int from an env value; zero, blank or garbage count as unset."""
    if not value:
        return None
    try:
        parsed = int(value)
    except ValueError:
        return None
    return parsed or None


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            tokens=discover_tokens(),
            api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            request_timeout=float(os.getenv("GITHUB_REQUEST_TIMEOUT", "10")),
            single_token_max_attempts=int(os.getenv("SINGLE_TOKEN_MAX_ATTEMPTS", "1")),
        )

        self.cache = CacheConfig(
            override_seconds=parse_optional_int(os.getenv("CACHE_SECONDS")),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)8s %(message)s"),
        )

        self.environment = os.getenv("ENVIRONMENT", "development")

    @property
    def is_test(self) -> bool:
        return self.environment.lower() == "test"

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.github.tokens:
            errors.append("at least one GitHub token (PAT_1) is required")

        if self.github.request_timeout <= 0:
            errors.append("GITHUB_REQUEST_TIMEOUT must be positive")

        if self.github.single_token_max_attempts < 1:
            errors.append("SINGLE_TOKEN_MAX_ATTEMPTS must be at least 1")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
