"""
GitHub configuration.
"""

from dataclasses import dataclass, field


@dataclass
class GitHubConfig:
    """GitHub GraphQL API configuration."""

    tokens: list[str] = field(default_factory=list)
    api_base_url: str = "https://api.github.com"
    request_timeout: float = 10.0
    # Attempts made when only one token is configured (no rotation possible)
    single_token_max_attempts: int = 1

    @property
    def graphql_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/graphql"
