"""Alerts: notifications sent to users (SMS, email, phone or push)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.models import Alert, PagerDutyModel
from pagerduty_api.query import add_options
from pagerduty_api.services.base import Service

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import AlertListOptions


class AlertList(PagerDutyModel):
    alerts: list[Alert] = Field(default_factory=list)


class AlertsService(Service):
    def list(
        self, options: AlertListOptions | None = None
    ) -> tuple[list[Alert], Response]:
        """List alerts sent in a date range.

        PagerDuty API docs: https://developer.pagerduty.com/documentation/rest/alerts/list
        """
        response, payload = self._api.get(
            add_options("alerts", options), AlertList, api_method="alerts.list"
        )
        return (payload.alerts if payload else []), response
