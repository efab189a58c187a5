"""
Core error classes for the repo card service.

Every error raised on the request path derives from ApplicationError and
carries a primary message plus an optional user-facing hint that is shown
on the error card.
"""

from typing import Any

SECONDARY_ERROR_MESSAGES = {
    "MAX_RETRY": "Please add an env variable called PAT_1 (or PAT_2, PAT_3...) with a GitHub token",
    "REPOSITORY_NOT_FOUND": "Make sure the repository exists and is public",
    "GRAPHQL_ERROR": "Please try again later",
    "UPSTREAM_ERROR": "Please try again later",
}


class ApplicationError(Exception):
    """Base class for errors rendered as an error card."""

    type = "APPLICATION_ERROR"

    def __init__(self, message: str, secondary_message: str | None = None) -> None:
        self.message = message
        if secondary_message is None:
            secondary_message = SECONDARY_ERROR_MESSAGES.get(self.type, "")
        self.secondary_message = secondary_message
        super().__init__(message)


class MissingParamError(ApplicationError):
    """Raised when required query parameters are missing."""

    type = "MISSING_PARAM"

    def __init__(self, missed_params: list[str], secondary_message: str | None = None) -> None:
        self.missed_params = missed_params
        quoted = ", ".join(f'"{p}"' for p in missed_params)
        super().__init__(
            f"Missing params {quoted} make sure you pass the parameters in URL",
            secondary_message or "",
        )


class InvalidParamError(ApplicationError):
    """Raised when a query parameter is present but malformed."""

    type = "INVALID_PARAM"

    def __init__(self, param: str, value: str, expected: str) -> None:
        self.param = param
        self.value = value
        super().__init__(f'Invalid param "{param}": {value!r}', f"Expected format: {expected}")


class RepositoryNotFoundError(ApplicationError):
    """Raised when a repository is not found or inaccessible."""

    type = "REPOSITORY_NOT_FOUND"


class GitHubGraphQLError(ApplicationError):
    """Raised when GitHub GraphQL API returns errors in the response."""

    type = "GRAPHQL_ERROR"

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        secondary_message: str | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message, secondary_message)


class MaxRetryExceededError(ApplicationError):
    """Raised when every configured GitHub token is rate limited."""

    type = "MAX_RETRY"

    def __init__(self, attempts: int, message: str = "Downtime due to GitHub API rate limiting") -> None:
        self.attempts = attempts
        super().__init__(message)


class UpstreamRequestError(ApplicationError):
    """Raised when the GitHub API cannot be reached or answers with a non-rate-limit failure."""

    type = "UPSTREAM_ERROR"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
