"""
Pytest configuration: project root on sys.path, test environment, shared fakes.
"""

import os
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Must be set before src.core.config is imported; silences get_logger().
os.environ["ENVIRONMENT"] = "test"


class RecordingLogger:
    """Stand-in for the injected structlog logger; keeps (level, event, context)."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.records.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, **kw)

    def events(self, level: str | None = None) -> list[str]:
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


class FakeTransport:
    """
    Replays a script of responses/exceptions, one per post() call, and
    remembers the token each call used.
    """

    def __init__(self, script: list[Any]) -> None:
        self.script = list(script)
        self.tokens: list[str] = []
        self.variables: list[dict[str, Any]] = []

    @property
    def calls(self) -> int:
        return len(self.tokens)

    async def post(self, query: str, variables: dict[str, Any], token: str) -> httpx.Response:
        self.tokens.append(token)
        self.variables.append(variables)
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def repository_body(**overrides: Any) -> dict[str, Any]:
    repository = {
        "nameWithOwner": "octocat/hello-world",
        "stargazerCount": 1234,
        "collaborators": {"totalCount": 3},
        "languages": {"nodes": [{"name": "Python"}]},
        "createdAt": "2011-01-26T19:01:12Z",
    }
    repository.update(overrides)
    return {"data": {"repository": repository}}


def rate_limited_response() -> httpx.Response:
    return httpx.Response(200, json={"errors": [{"type": "RATE_LIMITED", "message": "API rate limit exceeded"}]})


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_transport() -> type[FakeTransport]:
    return FakeTransport


@pytest.fixture
def make_repository_body():
    return repository_body


@pytest.fixture
def make_rate_limited_response():
    return rate_limited_response
