"""Services: the integration points incidents are created on."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.models import PagerDutyModel, Service
from pagerduty_api.query import add_options
from pagerduty_api.services import base

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import GetServiceOptions, ServiceListOptions


class ServiceList(PagerDutyModel):
    services: list[Service] = Field(default_factory=list)


class ServiceWrapper(PagerDutyModel):
    service: Service | None = None


class ServicesService(base.Service):
    def list(
        self, options: ServiceListOptions | None = None
    ) -> tuple[list[Service], Response]:
        """List services.

        PagerDuty API docs: https://developer.pagerduty.com/documentation/rest/services/list
        """
        response, payload = self._api.get(
            add_options("services", options),
            ServiceList,
            api_method="services.list",
        )
        return (payload.services if payload else []), response

    def get(
        self, id: str, options: GetServiceOptions | None = None
    ) -> tuple[Service | None, Response]:
        response, payload = self._api.get(
            add_options(f"services/{id}", options),
            ServiceWrapper,
            api_method="services.get",
        )
        return (payload.service if payload else None), response
