"""On-call schedules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.models import PagerDutyModel, Schedule
from pagerduty_api.query import add_options
from pagerduty_api.services.base import Service

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import ScheduleListOptions


class ScheduleList(PagerDutyModel):
    schedules: list[Schedule] = Field(default_factory=list)


class ScheduleWrapper(PagerDutyModel):
    schedule: Schedule | None = None


class SchedulesService(Service):
    def list(
        self, options: ScheduleListOptions | None = None
    ) -> tuple[list[Schedule], Response]:
        response, payload = self._api.get(
            add_options("schedules", options),
            ScheduleList,
            api_method="schedules.list",
        )
        return (payload.schedules if payload else []), response

    def get(self, id: str) -> tuple[Schedule | None, Response]:
        """Get a schedule with its layers, overrides and final schedule."""
        response, payload = self._api.get(
            f"schedules/{id}", ScheduleWrapper, api_method="schedules.get"
        )
        return (payload.schedule if payload else None), response
