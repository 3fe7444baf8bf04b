"""Tests for structured logging configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
import structlog

from fornost_cli.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_json_logs_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(level="DEBUG", format_type="json")

    structlog.get_logger("test").debug("http_request", status=200)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip())
    assert record["event"] == "http_request"
    assert record["status"] == 200
    assert record["level"] == "debug"


def test_level_filters_lower_records(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(level="WARNING", format_type="console")

    structlog.get_logger("test").info("page_fetched")

    assert capsys.readouterr().err == ""


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging(level="LOUD")
