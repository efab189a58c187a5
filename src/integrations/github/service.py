from typing import Any

from src.core.config import config
from src.core.errors import ApplicationError, RepositoryNotFoundError
from src.core.models import RepoStatsQuery, RepoStatsResult
from src.core.utils.logging import get_logger
from src.integrations.github.classifier import classify_response
from src.integrations.github.graphql import GitHubGraphQLClient
from src.integrations.github.request_builder import GRAPHQL_REPO_QUERY, build_variables, parse_repo_identifier
from src.integrations.github.retryer import Retryer


class RepoStatsService:
    """
    Application Service for repository stats.
    Wires request building, token failover and error classification together.
    """

    def __init__(self, retryer: Retryer, logger: Any = None) -> None:
        self.retryer = retryer
        self.logger = logger or get_logger(__name__)

    @classmethod
    def from_config(cls, logger: Any = None) -> "RepoStatsService":
        logger = logger or get_logger(__name__)
        transport = GitHubGraphQLClient(logger=logger)
        retryer = Retryer(
            transport,
            config.github.tokens,
            single_token_max_attempts=config.github.single_token_max_attempts,
            logger=logger,
        )
        return cls(retryer, logger=logger)

    async def fetch_stats(self, repo: str | None) -> RepoStatsResult:
        """
        Fetches stats for a repository identifier.

        Args:
            repo: ``owner/name`` or a GitHub repository URL.

        Returns:
            RepoStatsResult: Flat stats record for the repository.

        Raises:
            MissingParamError: If ``repo`` is empty.
            InvalidParamError: If ``repo`` is malformed.
            RepositoryNotFoundError: If GitHub reports the repository missing.
            GitHubGraphQLError: If GitHub reports any other GraphQL error.
            MaxRetryExceededError: If every token is rate limited.
            UpstreamRequestError: If GitHub cannot be reached.
        """
        try:
            query = parse_repo_identifier(repo)
        except ApplicationError as e:
            self.logger.warning("repo_identifier_rejected", repo=repo, error_type=e.type, message=e.message)
            raise

        body = await self.retryer.run(GRAPHQL_REPO_QUERY, build_variables(query))
        data = classify_response(body, self.logger)
        result = self.shape_result(query, data)
        self.logger.info("repo_stats_fetched", repo=query.full_name, stars=result.total_stars)
        return result

    def shape_result(self, query: RepoStatsQuery, data: dict[str, Any]) -> RepoStatsResult:
        repository = (data.get("data") or {}).get("repository")
        if not repository:
            self.logger.error("repository_missing_from_response", repo=query.full_name)
            raise RepositoryNotFoundError(f"Could not resolve to a Repository with the name '{query.full_name}'.")

        languages = (repository.get("languages") or {}).get("nodes") or []
        collaborators = repository.get("collaborators") or {}

        return RepoStatsResult(
            name=repository.get("nameWithOwner") or query.full_name,
            total_stars=repository.get("stargazerCount") or 0,
            primary_language=languages[0].get("name") if languages and languages[0] else None,
            created_at=repository.get("createdAt"),
            total_collaborators=collaborators.get("totalCount") or 0,
        )
