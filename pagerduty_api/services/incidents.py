"""Incidents: listing, counting and status transitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.models import Incident, PagerDutyModel
from pagerduty_api.query import add_options
from pagerduty_api.services.base import Service

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import (
        IncidentAcknowledgeOptions,
        IncidentCountOptions,
        IncidentEditOptions,
        IncidentListOptions,
        IncidentReassignOptions,
        IncidentResolveOptions,
        IncidentSnoozeOptions,
        Options,
    )


class IncidentList(PagerDutyModel):
    incidents: list[Incident] = Field(default_factory=list)


class IncidentCount(PagerDutyModel):
    total: int = 0


class IncidentsService(Service):
    def list(
        self, options: IncidentListOptions | None = None
    ) -> tuple[list[Incident], Response]:
        """List incidents.

        PagerDuty API docs: https://developer.pagerduty.com/documentation/rest/incidents/list
        """
        response, payload = self._api.get(
            add_options("incidents", options),
            IncidentList,
            api_method="incidents.list",
        )
        return (payload.incidents if payload else []), response

    def get(self, id: str) -> tuple[Incident | None, Response]:
        """Get an incident by id or incident number.

        The incident is the top-level object of the response body.
        """
        response, incident = self._api.get(
            f"incidents/{id}", Incident, api_method="incidents.get"
        )
        return incident, response

    def count(
        self, options: IncidentCountOptions | None = None
    ) -> tuple[int, Response]:
        """Count incidents matching the filters."""
        response, payload = self._api.get(
            add_options("incidents/count", options),
            IncidentCount,
            api_method="incidents.count",
        )
        return (payload.total if payload else 0), response

    def edit(self, options: IncidentEditOptions) -> tuple[list[Incident], Response]:
        """Change the status or assignment of several incidents at once."""
        response, payload = self._api.put(
            "incidents", options, IncidentList, api_method="incidents.edit"
        )
        return (payload.incidents if payload else []), response

    def _action(self, id: str, action: str, options: Options | None) -> Response:
        response, _ = self._api.put(
            add_options(f"incidents/{id}/{action}", options),
            api_method=f"incidents.{action}",
        )
        return response

    def acknowledge(
        self, id: str, options: IncidentAcknowledgeOptions | None = None
    ) -> Response:
        return self._action(id, "acknowledge", options)

    def resolve(
        self, id: str, options: IncidentResolveOptions | None = None
    ) -> Response:
        return self._action(id, "resolve", options)

    def reassign(
        self, id: str, options: IncidentReassignOptions | None = None
    ) -> Response:
        """Reassign an incident to an escalation policy, level or users."""
        return self._action(id, "reassign", options)

    def snooze(self, id: str, options: IncidentSnoozeOptions | None = None) -> Response:
        """Snooze an acknowledged incident for ``options.duration`` seconds."""
        return self._action(id, "snooze", options)
