from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RankLevel(str, Enum):
    """Rank buckets, best first."""

    S = "S"
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"

    def __str__(self) -> str:
        return self.value


class Rank(BaseModel):
    level: RankLevel = RankLevel.C
    percentile: float = Field(default=100, ge=0, le=100)


class RepoStatsQuery(BaseModel):
    """Repository coordinates parsed from an ``owner/name`` identifier."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


class RepoStatsResult(BaseModel):
    """
    Flat record returned to the caller.

    Serialised with camelCase keys (``totalStars``...). Fields that the
    repository query does not cover keep their zero defaults.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    total_stars: int = Field(default=0, alias="totalStars")
    total_prs: int = Field(default=0, alias="totalPRs")
    total_reviews: int = Field(default=0, alias="totalReviews")
    total_commits: int = Field(default=0, alias="totalCommits")
    total_issues: int = Field(default=0, alias="totalIssues")
    total_discussions_started: int = Field(default=0, alias="totalDiscussionsStarted")
    total_discussions_answered: int = Field(default=0, alias="totalDiscussionsAnswered")
    contributed_to: int = Field(default=0, alias="contributedTo")
    rank: Rank = Field(default_factory=Rank)
    primary_language: str | None = Field(default=None, alias="primaryLanguage")
    created_at: str | None = Field(default=None, alias="createdAt")
    total_collaborators: int = Field(default=0, alias="totalCollaborators")
