"""
Credential failover for the GitHub GraphQL transport.

Each attempt produces an explicit outcome (success, rate limited, fatal);
the retryer walks the configured tokens in order and moves on to the next
one only while the API keeps reporting rate limiting. There is no backoff:
rotating the credential is the retry strategy.
"""

from dataclasses import dataclass
from typing import Any, Literal

import httpx

from src.core.errors import ApplicationError, MaxRetryExceededError, UpstreamRequestError
from src.core.utils.logging import get_logger
from src.integrations.github.classifier import GraphQLRateLimited, first_error_shape
from src.integrations.github.graphql import GitHubGraphQLClient


@dataclass(frozen=True)
class Success:
    body: dict[str, Any]


@dataclass(frozen=True)
class RateLimited:
    reason: Literal["primary", "secondary"]
    status_code: int


@dataclass(frozen=True)
class Fatal:
    error: ApplicationError


AttemptOutcome = Success | RateLimited | Fatal


def classify_attempt(response: httpx.Response) -> AttemptOutcome:
    """Decide what a single transport response means for the retry loop."""
    status = response.status_code

    if status == 200:
        try:
            body = response.json()
        except ValueError:
            return Fatal(UpstreamRequestError("GitHub API returned a malformed response", status))
        if not isinstance(body, dict):
            return Fatal(UpstreamRequestError("GitHub API returned a malformed response", status))
        if isinstance(first_error_shape(body), GraphQLRateLimited):
            return RateLimited("primary", status)
        return Success(body)

    if status == 429:
        reason = "primary" if response.headers.get("x-ratelimit-remaining") == "0" else "secondary"
        return RateLimited(reason, status)

    if status == 403:
        if response.headers.get("x-ratelimit-remaining") == "0":
            return RateLimited("primary", status)
        if "retry-after" in response.headers or "rate limit" in response.text.lower():
            return RateLimited("secondary", status)

    return Fatal(UpstreamRequestError(f"GitHub API responded with status {status}", status))


class Retryer:
    """
    Runs a GraphQL query, failing over between GitHub tokens on rate limiting.

    Attempts are bounded by the number of tokens; a single token gets
    ``single_token_max_attempts`` attempts instead.
    """

    def __init__(
        self,
        transport: GitHubGraphQLClient,
        tokens: list[str],
        single_token_max_attempts: int = 1,
        logger: Any = None,
    ):
        self.transport = transport
        self.tokens = list(tokens)
        self.single_token_max_attempts = single_token_max_attempts
        self.logger = logger or get_logger(__name__)

    @property
    def max_attempts(self) -> int:
        if len(self.tokens) == 1:
            return max(1, self.single_token_max_attempts)
        return len(self.tokens)

    async def attempt(self, query: str, variables: dict[str, Any], token: str) -> AttemptOutcome:
        try:
            response = await self.transport.post(query, variables, token)
        except httpx.RequestError as e:
            error = UpstreamRequestError(f"Could not reach the GitHub API: {e.__class__.__name__}")
            error.__cause__ = e
            return Fatal(error)
        return classify_attempt(response)

    async def run(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """
        Execute ``query`` until a token gets through.

        Returns:
            The decoded body of the first HTTP 200 response; GraphQL errors in it
            are left for the caller to classify.

        Raises:
            MaxRetryExceededError: If every attempt was rate limited (or no token is configured).
            UpstreamRequestError: On a network error or a non-rate-limit HTTP failure.
        """
        if not self.tokens:
            self.logger.error("no_github_tokens_configured")
            raise MaxRetryExceededError(0, "No GitHub token configured")

        for attempt in range(self.max_attempts):
            token = self.tokens[attempt % len(self.tokens)]
            outcome = await self.attempt(query, variables, token)

            if isinstance(outcome, Success):
                if attempt > 0:
                    self.logger.info("graphql_request_succeeded", attempt=attempt + 1, max_attempts=self.max_attempts)
                return outcome.body

            if isinstance(outcome, Fatal):
                self.logger.error(
                    "graphql_request_fatal",
                    attempt=attempt + 1,
                    error_type=outcome.error.type,
                    message=outcome.error.message,
                )
                raise outcome.error

            self.logger.warning(
                "graphql_rate_limited",
                attempt=attempt + 1,
                max_attempts=self.max_attempts,
                reason=outcome.reason,
                status=outcome.status_code,
            )

        self.logger.error("graphql_max_retry_exceeded", attempts=self.max_attempts)
        raise MaxRetryExceededError(self.max_attempts)
