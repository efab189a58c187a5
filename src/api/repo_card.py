"""Repository card endpoint."""

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from src.api.dependencies import get_repo_stats_service
from src.core.config import config
from src.core.errors import ApplicationError
from src.core.utils.cache_control import NO_CACHE_HEADER, cache_control_header, resolve_cache_seconds
from src.core.utils.params import parse_string
from src.integrations.github.service import RepoStatsService
from src.presentation.svg import render_error, render_repo_card

logger = structlog.get_logger()

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"
UNEXPECTED_ERROR_MESSAGE = "Something unexpected happened while building the card."


def wants_svg(output: str | None) -> bool:
    """Unknown formats fall back to JSON rather than failing validation."""
    return parse_string(output).strip().lower() == "svg"


def error_response(error: ApplicationError) -> Response:
    """Error card, always HTTP 200 and never cached."""
    return Response(
        content=render_error(error.message, error.secondary_message or ""),
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": NO_CACHE_HEADER},
    )


@router.get(
    "/api",
    summary="Repository stats card",
    description="Fetch repository stats from GitHub and return them as JSON or an SVG card.",
)
async def repo_card(
    repo: str | None = Query(default=None, description="Repository identifier, 'owner/name'"),
    cache_seconds: str | None = Query(default=None, description="Requested cache duration in seconds"),
    output: str | None = Query(default=None, alias="format", description="'json' (default) or 'svg'"),
    service: RepoStatsService = Depends(get_repo_stats_service),
) -> Response:
    """
    Build the stats payload for a repository.

    Failures of any kind are rendered as an SVG error card with status 200.
    """
    try:
        stats = await service.fetch_stats(parse_string(repo))
    except ApplicationError as e:
        return error_response(e)
    except Exception as e:
        logger.exception("repo_card_failed", repo=repo, error=str(e))
        return error_response(ApplicationError(UNEXPECTED_ERROR_MESSAGE, "Please try again later"))

    seconds = resolve_cache_seconds(cache_seconds, config.cache)
    headers = {"Cache-Control": cache_control_header(seconds, config.cache)}

    if wants_svg(output):
        return Response(content=render_repo_card(stats), media_type=SVG_MEDIA_TYPE, headers=headers)
    return JSONResponse(content=stats.model_dump(mode="json", by_alias=True), headers=headers)
