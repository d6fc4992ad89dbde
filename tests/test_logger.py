import json
import logging
from collections.abc import Generator

import pytest
import structlog

from pagerduty_api.logger import setup_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    structlog.reset_defaults()


def test_setup_logging_json(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("DEBUG", log_format_json=True)

    structlog.get_logger("pagerduty_api.test").info("API request", verb="GET")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "API request"
    assert record["level"] == "INFO"
    assert record["logger"] == "pagerduty_api.test"
    assert record["verb"] == "GET"


def test_setup_logging_console(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("INFO", log_format_json=False)

    structlog.get_logger("pagerduty_api.test").info("API request", verb="GET")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    assert "pagerduty_api.test - INFO" in line
    assert "API request" in line
    assert "verb=GET" in line


def test_setup_logging_filters_level(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging("WARNING", log_format_json=True)

    structlog.get_logger("pagerduty_api.test").info("API request")

    assert capsys.readouterr().err == ""


def test_setup_logging_excludes_loggers() -> None:
    setup_logging("DEBUG", log_exclude_loggers="httpx, ")

    assert logging.getLogger("httpx").level == logging.WARNING
