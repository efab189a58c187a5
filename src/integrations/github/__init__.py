"""
GitHub API adapter.

This package provides the GraphQL transport, token failover and response
classification used to fetch repository stats.
"""

from src.integrations.github.graphql import GitHubGraphQLClient
from src.integrations.github.retryer import Retryer
from src.integrations.github.service import RepoStatsService

__all__ = [
    "GitHubGraphQLClient",
    "Retryer",
    "RepoStatsService",
]
