"""Tests for pagerduty_api.services.teams module."""

import pytest

from pagerduty_api import (
    APIError,
    PagerDutyApi,
    PreconditionError,
    Team,
    TeamListOptions,
)
from tests.conftest import FakePagerDuty

TEAM = {"id": "PT1", "name": "ops", "description": "Operations"}


def test_list_teams(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(
        200, {"teams": [TEAM], "offset": 0, "limit": 100, "total": 1}
    )

    teams, response = api.teams.list(TeamListOptions(query="ops"))

    assert teams == [Team(id="PT1", name="ops", description="Operations")]
    assert response.limit == 100
    assert response.total == 1
    assert fake_pagerduty.request.method == "GET"
    assert (
        fake_pagerduty.request.url
        == "https://acme.pagerduty.com/api/v1/teams?query=ops"
    )


def test_list_teams_without_options(
    fake_pagerduty: FakePagerDuty, api: PagerDutyApi
) -> None:
    fake_pagerduty.respond(200, {"teams": []})

    teams, _ = api.teams.list()

    assert teams == []
    assert fake_pagerduty.request.url == "https://acme.pagerduty.com/api/v1/teams"


def test_get_team(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(200, {"team": TEAM})

    team, response = api.teams.get("PT1")

    assert team == Team(id="PT1", name="ops", description="Operations")
    assert response.status_code == 200
    assert fake_pagerduty.request.url.path == "/api/v1/teams/PT1"


def test_get_team_missing_key(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(200, {})

    team, _ = api.teams.get("PT1")

    assert team is None


def test_create_team(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(201, {"team": TEAM})

    team, response = api.teams.create(Team(name="ops", description="Operations"))

    assert team is not None
    assert team.id == "PT1"
    assert response.status_code == 201
    assert fake_pagerduty.request.method == "POST"
    assert fake_pagerduty.request_json == {"name": "ops", "description": "Operations"}


def test_edit_team(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(200, {"team": {**TEAM, "name": "sre"}})

    team, _ = api.teams.edit(Team(id="PT1", name="sre"))

    assert team is not None
    assert team.name == "sre"
    assert fake_pagerduty.request.method == "PUT"
    assert fake_pagerduty.request.url.path == "/api/v1/teams/PT1"
    assert fake_pagerduty.request_json == {"id": "PT1", "name": "sre"}


def test_edit_team_without_id(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    with pytest.raises(PreconditionError):
        api.teams.edit(Team(name="sre"))
    assert fake_pagerduty.requests == []


def test_delete_team(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(204, raw=b"")

    response = api.teams.delete("PT1")

    assert response.status_code == 204
    assert fake_pagerduty.request.method == "DELETE"
    assert fake_pagerduty.request.url.path == "/api/v1/teams/PT1"


def test_get_team_not_found(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(
        404, {"error": "ignored", "message": "Not Found", "code": 2100}
    )

    with pytest.raises(APIError) as e:
        api.teams.get("missing")

    assert e.value.status_code == 404
    assert e.value.message == "Not Found"


def test_list_teams_unwraps_team_fields(
    fake_pagerduty: FakePagerDuty, api: PagerDutyApi
) -> None:
    fake_pagerduty.respond(
        200, {"teams": [{"id": "id", "name": "name", "description": "description"}]}
    )

    teams, response = api.teams.list()

    assert len(teams) == 1
    assert teams[0].model_dump() == {
        "id": "id",
        "name": "name",
        "description": "description",
    }
    assert (response.offset, response.limit, response.total) == (0, 0, 0)
