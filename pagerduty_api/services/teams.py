"""Teams: groups of users, escalation policies and services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.errors import PreconditionError
from pagerduty_api.models import PagerDutyModel, Team
from pagerduty_api.query import add_options
from pagerduty_api.services.base import Service

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import TeamListOptions


class TeamList(PagerDutyModel):
    teams: list[Team] = Field(default_factory=list)


class TeamWrapper(PagerDutyModel):
    team: Team | None = None


class TeamsService(Service):
    def list(
        self, options: TeamListOptions | None = None
    ) -> tuple[list[Team], Response]:
        """List teams.

        PagerDuty API docs: https://developer.pagerduty.com/documentation/rest/teams/list
        """
        response, payload = self._api.get(
            add_options("teams", options), TeamList, api_method="teams.list"
        )
        return (payload.teams if payload else []), response

    def get(self, id: str) -> tuple[Team | None, Response]:
        response, payload = self._api.get(
            f"teams/{id}", TeamWrapper, api_method="teams.get"
        )
        return (payload.team if payload else None), response

    def create(self, team: Team) -> tuple[Team | None, Response]:
        response, payload = self._api.post(
            "teams", team, TeamWrapper, api_method="teams.create"
        )
        return (payload.team if payload else None), response

    def edit(self, team: Team) -> tuple[Team | None, Response]:
        """Update a team.

        Raises:
            PreconditionError: If the team has no id
        """
        if not team.id:
            raise PreconditionError("team id is required to edit a team")
        response, payload = self._api.put(
            f"teams/{team.id}", team, TeamWrapper, api_method="teams.edit"
        )
        return (payload.team if payload else None), response

    def delete(self, id: str) -> Response:
        return self._api.delete(f"teams/{id}", api_method="teams.delete")
