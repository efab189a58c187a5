from typing import Any

import httpx

from src.core.config import config
from src.core.utils.logging import get_logger
from src.integrations.github.request_builder import build_headers


class GitHubGraphQLClient:
    """Single-shot transport for the GitHub GraphQL endpoint."""

    def __init__(self, endpoint: str | None = None, timeout: float | None = None, logger: Any = None):
        self.endpoint = endpoint or config.github.graphql_url
        self.timeout = timeout if timeout is not None else config.github.request_timeout
        self.logger = logger or get_logger(__name__)

    async def post(self, query: str, variables: dict[str, Any], token: str) -> httpx.Response:
        """
        Sends one GraphQL request to the GitHub API.

        Args:
            query: The GraphQL query string.
            variables: A dictionary of variables for the query.
            token: Bearer credential for this attempt.

        Returns:
            The raw response, whatever its status code.

        Raises:
            httpx.RequestError: If the request could not be completed.
        """
        headers = {
            **build_headers(token),
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(self.endpoint, json={"query": query, "variables": variables}, headers=headers)
        except httpx.RequestError as e:
            self.logger.debug("graphql_request_failed", endpoint=self.endpoint, error=str(e))
            raise
