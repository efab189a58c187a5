from typing import Any

import structlog
from fastapi import FastAPI

from src.api.repo_card import router as repo_card_router
from src.core.config import config
from src.core.utils.logging import configure_logging

# --- Application Setup ---

configure_logging()

logger = structlog.get_logger()

app = FastAPI(
    title="Repo Card",
    description="GitHub repository stats as JSON or SVG cards.",
    version="0.1.0",
)

# --- Include Routers ---

app.include_router(repo_card_router, tags=["Repository Card"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "Repo card service is running."}


# --- Application Lifecycle ---


def check_configuration(log: Any = None) -> bool:
    """Validate the config; problems are logged, the service still starts."""
    log = log or logger
    try:
        return config.validate()
    except ValueError as e:
        log.warning("configuration_invalid", error=str(e))
        return False


@app.on_event("startup")
async def startup_event():
    """Application startup logic."""
    check_configuration()
