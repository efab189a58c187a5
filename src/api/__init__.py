# API endpoints package

from src.api.repo_card import router

__all__ = [
    "router",
]
