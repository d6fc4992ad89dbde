import json
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner
from pytest_mock import MockerFixture

from pagerduty_api import (
    EventResponse,
    Incident,
    Service,
    Team,
    TransportError,
    User,
)
from pagerduty_api import cli


@pytest.fixture(autouse=True)
def env_vars(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PAGERDUTY_SUBDOMAIN", "acme")
    monkeypatch.setenv("PAGERDUTY_API_KEY", "test-token")


@pytest.fixture(autouse=True)
def mock_setup_logging(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("pagerduty_api.cli.setup_logging", autospec=True)


@pytest.fixture
def mock_pagerduty_api(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("pagerduty_api.cli.PagerDutyApi")


@pytest.fixture
def mock_api(mock_pagerduty_api: MagicMock) -> MagicMock:
    """The client yielded by ``PagerDutyApi.from_settings(...)``."""
    return mock_pagerduty_api.from_settings.return_value.__enter__.return_value


def test_root_settings(
    mock_pagerduty_api: MagicMock, mock_api: MagicMock, mock_setup_logging: MagicMock
) -> None:
    mock_api.teams.list.return_value = ([], MagicMock())
    runner = CliRunner()

    result = runner.invoke(cli.root, "--subdomain other teams list")

    assert result.exit_code == 0
    settings = mock_pagerduty_api.from_settings.call_args.args[0]
    assert settings.subdomain == "other"
    assert settings.api_key == "test-token"
    mock_setup_logging.assert_called_once_with("INFO", True, "httpx,httpcore")


def test_incidents_list(mock_api: MagicMock) -> None:
    mock_api.incidents.list.return_value = (
        [
            Incident(
                id="PIJ90N7",
                incident_number=1,
                status="triggered",
                urgency="high",
                service=Service(name="service"),
                created_on=datetime(2013, 7, 9, 20, 25, 44, tzinfo=UTC),
            )
        ],
        MagicMock(),
    )
    runner = CliRunner()

    result = runner.invoke(
        cli.root,
        "incidents list --status triggered --status acknowledged "
        "--service PSVC1 --limit 10",
    )

    assert result.exit_code == 0
    assert "PIJ90N7" in result.output
    assert "service" in result.output
    assert "2013-07-09T20:25:44Z" in result.output
    options = mock_api.incidents.list.call_args.args[0]
    assert options.status == ["triggered", "acknowledged"]
    assert options.service == ["PSVC1"]
    assert options.limit == 10


def test_incidents_list_invalid_status(mock_api: MagicMock) -> None:
    runner = CliRunner()

    result = runner.invoke(cli.root, "incidents list --status open")

    assert result.exit_code == 2
    mock_api.incidents.list.assert_not_called()


def test_incidents_count(mock_api: MagicMock) -> None:
    mock_api.incidents.count.return_value = (42, MagicMock())
    runner = CliRunner()

    result = runner.invoke(cli.root, "incidents count --incident-key srv01/HTTP")

    assert result.exit_code == 0
    assert result.output == "42\n"
    assert mock_api.incidents.count.call_args.args[0].incident_key == "srv01/HTTP"


def test_teams_list(mock_api: MagicMock) -> None:
    mock_api.teams.list.return_value = (
        [
            Team(id="PT2", name="sre"),
            Team(id="PT1", name="ops", description="Operations"),
        ],
        MagicMock(),
    )
    runner = CliRunner()

    result = runner.invoke(cli.root, "teams list")

    assert result.exit_code == 0
    assert (
        result.output
        == """ID    NAME    DESCRIPTION
----  ------  -------------
PT1   ops     Operations
PT2   sre
"""
    )


def test_users_list_json(mock_api: MagicMock) -> None:
    mock_api.users.list.return_value = (
        [User(id="PU1", name="Alan Kay", email="alan@pagerduty.com")],
        MagicMock(),
    )
    runner = CliRunner()

    result = runner.invoke(cli.root, "users list --query alan -o json")

    assert result.exit_code == 0
    users = json.loads(result.output)
    assert users[0]["email"] == "alan@pagerduty.com"
    assert mock_api.users.list.call_args.args[0].query == "alan"


def test_api_failure(mock_api: MagicMock) -> None:
    mock_api.teams.list.side_effect = TransportError("connection refused")
    runner = CliRunner()

    result = runner.invoke(cli.root, "teams list")

    assert result.exit_code == 1
    assert "connection refused" in result.output


def test_events_trigger(mock_api: MagicMock) -> None:
    mock_api.events.trigger.return_value = EventResponse(
        status="success", message="Event processed", incident_key="srv01/HTTP"
    )
    runner = CliRunner()

    result = runner.invoke(
        cli.root,
        [
            "events",
            "trigger",
            "--service-key",
            "e93facc04764012d7bfb002500d5d1a6",
            "--description",
            "FAILURE for production/HTTP",
            "--details",
            '{"ping time": "1500ms"}',
            "-o",
            "json",
        ],
    )

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["incident_key"] == "srv01/HTTP"
    event = mock_api.events.trigger.call_args.args[0]
    assert event.service_key == "e93facc04764012d7bfb002500d5d1a6"
    assert event.details == {"ping time": "1500ms"}
    assert event.incident_key is None


@pytest.mark.parametrize("command", ["acknowledge", "resolve"])
def test_events_rejected(mock_api: MagicMock, command: str) -> None:
    getattr(mock_api.events, command).return_value = EventResponse(
        status="invalid event",
        message="Event object is invalid",
        errors=["Incident key is required"],
    )
    runner = CliRunner()

    result = runner.invoke(cli.root, ["events", command, "--service-key", "key"])

    assert result.exit_code == 1
    assert "Incident key is required" in result.output


def test_events_invalid_details(mock_api: MagicMock) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli.root, ["events", "trigger", "--service-key", "key", "--details", "{"]
    )

    assert result.exit_code == 2
    mock_api.events.trigger.assert_not_called()
