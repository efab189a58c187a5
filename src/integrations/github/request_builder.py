"""
GraphQL request composition for the repository stats query.
"""

from typing import Any

from giturlparse import parse  # type: ignore

from src.core.errors import InvalidParamError, MissingParamError
from src.core.models import RepoStatsQuery

GRAPHQL_REPO_QUERY = """
query repoInfo($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    nameWithOwner
    stargazerCount
    collaborators {
      totalCount
    }
    languages(first: 1) {
      nodes {
        name
      }
    }
    createdAt
  }
}
"""

EXPECTED_FORMAT = "owner/name"


def _looks_like_url(identifier: str) -> bool:
    return "://" in identifier or identifier.startswith("git@")


def _parse_url(identifier: str) -> RepoStatsQuery:
    """
    Extracts owner and repo from a GitHub URL using giturlparse.
    Handles both HTTPS and SSH formats:
    - https://github.com/owner/repo
    - https://github.com/owner/repo.git
    - git@github.com:owner/repo.git
    """
    p = parse(identifier)
    if not p.valid or not p.owner or not p.repo or "github.com" not in (p.host or ""):
        raise InvalidParamError("repo", identifier, EXPECTED_FORMAT)
    return RepoStatsQuery(owner=p.owner, name=p.repo)


def parse_repo_identifier(raw: str | None) -> RepoStatsQuery:
    """
    Parse an ``owner/name`` identifier (or a GitHub repository URL).

    Raises:
        MissingParamError: If the identifier is empty.
        InvalidParamError: If there is not exactly one separator, either side
            is empty, or a URL does not point at a GitHub repository.
    """
    identifier = (raw or "").strip()
    if not identifier:
        raise MissingParamError(["repo"])

    if _looks_like_url(identifier):
        return _parse_url(identifier)

    parts = identifier.split("/")
    if len(parts) != 2:
        raise InvalidParamError("repo", identifier, EXPECTED_FORMAT)

    owner, name = (part.strip() for part in parts)
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not owner or not name:
        raise InvalidParamError("repo", identifier, EXPECTED_FORMAT)

    return RepoStatsQuery(owner=owner, name=name)


def build_variables(query: RepoStatsQuery) -> dict[str, Any]:
    """GraphQL variables consumed by GRAPHQL_REPO_QUERY."""
    return {"owner": query.owner, "name": query.name}


def build_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"bearer {token}"}
