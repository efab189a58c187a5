import io
import logging

import pytest
import structlog

from src.core.config import config
from src.core.utils.logging import configure_logging, get_logger, resolve_level


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("loud") == logging.INFO


def test_events_go_to_stderr(monkeypatch, capsys) -> None:
    monkeypatch.setattr(config.logging, "level", "INFO")

    configure_logging()
    structlog.get_logger().info("repo_card_started", port=8000)

    captured = capsys.readouterr()
    assert "event='repo_card_started'" in captured.err
    assert "level='info'" in captured.err
    assert "port=8000" in captured.err
    assert captured.out == ""


def test_log_level_filters_events(monkeypatch) -> None:
    monkeypatch.setattr(config.logging, "level", "WARNING")
    stream = io.StringIO()

    configure_logging(stream)
    logger = structlog.get_logger()
    logger.info("graphql_request_succeeded")
    logger.warning("graphql_rate_limited", attempt=1)

    output = stream.getvalue()
    assert "graphql_request_succeeded" not in output
    assert "graphql_rate_limited" in output


def test_injected_logger_is_silent_under_test(capsys) -> None:
    configure_logging()
    get_logger(__name__).error("graphql_error_classified")

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""
