"""Escalation policies: who is notified, in which order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.models import EscalationPolicy, PagerDutyModel
from pagerduty_api.query import add_options
from pagerduty_api.services.base import Service

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import EscalationPolicyListOptions


class EscalationPolicyList(PagerDutyModel):
    escalation_policies: list[EscalationPolicy] = Field(default_factory=list)


class EscalationPolicyWrapper(PagerDutyModel):
    escalation_policy: EscalationPolicy | None = None


class EscalationPoliciesService(Service):
    def list(
        self, options: EscalationPolicyListOptions | None = None
    ) -> tuple[list[EscalationPolicy], Response]:
        """List escalation policies.

        PagerDuty API docs: https://developer.pagerduty.com/documentation/rest/escalation_policies/list
        """
        response, payload = self._api.get(
            add_options("escalation_policies", options),
            EscalationPolicyList,
            api_method="escalation_policies.list",
        )
        return (payload.escalation_policies if payload else []), response

    def get(self, id: str) -> tuple[EscalationPolicy | None, Response]:
        """Get an escalation policy by id."""
        response, payload = self._api.get(
            f"escalation_policies/{id}",
            EscalationPolicyWrapper,
            api_method="escalation_policies.get",
        )
        return (payload.escalation_policy if payload else None), response
