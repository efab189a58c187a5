from src.integrations.github.service import RepoStatsService

# --- Service Dependencies ---


def get_repo_stats_service() -> RepoStatsService:
    """
    Injects RepoStatsService built from the process-wide config.
    """
    return RepoStatsService.from_config()
