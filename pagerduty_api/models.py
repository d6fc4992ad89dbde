"""Pydantic models for PagerDuty API resources.

- All models use Pydantic BaseModel and are immutable (frozen=True)
- Optional attributes are ``X | None = None``: absent is not the same as a
  present zero value
- Free-form payloads (trigger summaries, email filters, event details) are
  plain ``dict[str, Any]``
- Time zones are ``ZoneInfo`` objects, dates ``datetime.date`` objects; both
  use PagerDuty's own wire formats
"""

from datetime import datetime
from enum import StrEnum
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field

from pagerduty_api.dates import Date
from pagerduty_api.time_zones import TimeZone


class IncidentStatus(StrEnum):
    TRIGGERED = "triggered"
    ACKNOWLEDGED = "acknowledged"
    RESOLVED = "resolved"


class ObjectType(StrEnum):
    USER = "user"
    API = "api"


class ServiceStatus(StrEnum):
    ACTIVE = "active"
    WARNING = "warning"
    CRITICAL = "critical"
    MAINTENANCE = "maintenance"
    DISABLED = "disabled"


class ServiceType(StrEnum):
    CLOUDKICK = "cloudkick"
    GENERIC_EMAIL = "generic_email"
    GENERIC_EVENTS_API = "generic_events_api"
    KEYNOTE = "keynote"
    NAGIOS = "nagios"
    PINGDOM = "pingdom"
    SERVER_DENSITY = "server_density"
    SQL_MONITOR = "sql_monitor"


class AlertType(StrEnum):
    EMAIL = "Email"
    PHONE = "Phone"
    PUSH = "Push"
    SMS = "SMS"


class UserInclude(StrEnum):
    CONTACT_METHODS = "contact_methods"
    NOTIFICATION_RULES = "notification_rules"


class EventType(StrEnum):
    ACKNOWLEDGE = "acknowledge"
    RESOLVE = "resolve"
    TRIGGER = "trigger"


class ContextType(StrEnum):
    LINK = "link"
    IMAGE = "image"


class WebhookType(StrEnum):
    INCIDENT_ACKNOWLEDGE = "incident.acknowledge"
    INCIDENT_ASSIGN = "incident.assign"
    INCIDENT_DELEGATE = "incident.delegate"
    INCIDENT_ESCALATE = "incident.escalate"
    INCIDENT_RESOLVE = "incident.resolve"
    INCIDENT_TRIGGER = "incident.trigger"
    INCIDENT_UNACKNOWLEDGE = "incident.unacknowledge"


class PagerDutyModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, arbitrary_types_allowed=True
    )


class ErrorEnvelope(PagerDutyModel):
    """Error body returned by PagerDuty for non 2xx responses.

    Attributes:
        code: PagerDuty error code (see ``pagerduty_api.errors.ErrorCode``)
        message: Error message
        errors: Detailed error messages
    """

    model_config = ConfigDict(strict=True)

    code: int = 0
    message: str = ""
    errors: list[str] = Field(default_factory=list)


class User(PagerDutyModel):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    time_zone: TimeZone | None = None
    color: str | None = None
    role: str | None = None
    user_url: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None
    invitation_sent: bool | None = None
    marketing_opt_out: bool | None = None
    job_title: str | None = None


class Team(PagerDutyModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class Alert(PagerDutyModel):
    id: str | None = None
    type: str | None = None
    started_at: datetime | None = None
    user: User | None = None
    address: str | None = None


class Target(PagerDutyModel):
    """Target of an escalation rule: a user or a schedule."""

    id: str | None = None
    type: str | None = None
    name: str | None = None
    email: str | None = None
    time_zone: TimeZone | None = None
    color: str | None = None


class EscalationRule(PagerDutyModel):
    id: str | None = None
    escalation_delay_in_minutes: int | None = None
    targets: list[Target] | None = None


class EscalationPolicy(PagerDutyModel):
    id: str | None = None
    name: str | None = None
    num_loops: int | None = None
    escalation_rules: list[EscalationRule] | None = None
    services: list["Service"] | None = None


class IncidentCounts(PagerDutyModel):
    triggered: int | None = None
    acknowledged: int | None = None
    resolved: int | None = None
    total: int | None = None


class Service(PagerDutyModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    service_url: str | None = None
    service_key: str | None = None
    html_url: str | None = None
    auto_resolve_timeout: int | None = None
    acknowledgement_timeout: int | None = None
    created_at: datetime | None = None
    status: str | None = None
    last_incident_timestamp: datetime | None = None
    email_incident_creation: str | None = None
    incident_counts: IncidentCounts | None = None
    email_filter_mode: str | None = None
    type: str | None = Field(None, alias="service_type")
    escalation_policy: EscalationPolicy | None = None
    email_filters: list[dict[str, Any]] | None = None
    severity_filter: str | None = None


class ScheduleLayer(PagerDutyModel):
    """One of potentially many layers of a schedule."""

    id: str | None = None
    name: str | None = None
    priority: int | None = None
    start: Date | None = None
    end: Date | None = None
    users: list[User] | None = None
    rendered_schedule_entries: list[Any] | None = None
    restriction_type: str | None = None
    restrictions: list[Any] | None = None
    rendered_coverage_percentage: float | None = None
    rotation_turn_length_seconds: int | None = None
    rotation_virtual_start: datetime | None = None


class Schedule(PagerDutyModel):
    id: str | None = None
    name: str | None = None
    time_zone: TimeZone | None = None
    today: Date | None = None
    escalation_policies: list[EscalationPolicy] | None = None
    schedule_layers: list[ScheduleLayer] | None = None
    overrides_subschedule: ScheduleLayer | None = None
    final_schedule: ScheduleLayer | None = None


class PendingAction(PagerDutyModel):
    type: str | None = None
    at: datetime | None = None


class ObjectAt(PagerDutyModel):
    """An object (user or api) attached to an incident at a point in time.

    ``object`` is the raw object as sent by PagerDuty; its ``type`` is exposed as
    the ``type`` property.
    """

    at: datetime | None = None
    object: dict[str, Any] | None = None

    @property
    def type(self) -> str | None:
        return (self.object or {}).get("type")


class Incident(PagerDutyModel):
    id: str | None = None
    incident_number: int | None = None
    status: str | None = None
    urgency: str | None = None
    pending_actions: list[PendingAction] | None = None
    created_on: datetime | None = None
    html_url: str | None = None
    incident_key: str | None = None
    service: Service | None = None
    escalation_policy: EscalationPolicy | None = None
    teams: list[Team] | None = None
    assigned_to: list[ObjectAt] | None = None
    acknowledgers: list[ObjectAt] | None = None
    last_status_change_by: User | None = None
    last_status_change_on: datetime | None = None
    trigger_summary_data: dict[str, Any] | None = None
    trigger_details_html_url: str | None = None
    # deprecated by PagerDuty, only holds the first assigned user
    assigned_to_user: User | None = None


class WebhookIncident(PagerDutyModel):
    id: str | None = None
    incident_number: int | None = None
    created_on: datetime | None = None
    status: str | None = None
    html_url: str | None = None
    incident_key: str | None = None
    service: Service | None = None
    assigned_to_user: User | None = None
    resolved_by_user: User | None = None
    trigger_summary_data: dict[str, Any] | None = None
    trigger_details_html_url: str | None = None
    last_status_change_on: datetime | None = None
    last_status_change_by: User | None = None


class WebhookData(PagerDutyModel):
    incident: WebhookIncident | None = None


class WebhookMessage(PagerDutyModel):
    """A message delivered by a PagerDuty webhook."""

    id: str | None = None
    type: str | None = None
    created_on: datetime | None = None
    data: WebhookData | None = None


class LinkContext(PagerDutyModel):
    type: Literal["link"] = "link"
    href: str | None = None
    text: str | None = None


class ImageContext(PagerDutyModel):
    """Image attached to an event. ``src`` must be served via HTTPS."""

    type: Literal["image"] = "image"
    src: str | None = None
    href: str | None = None
    alt: str | None = None


class Event(PagerDutyModel):
    """An event submitted to the PagerDuty Events API.

    ``event_type`` is set by the events service (acknowledge, resolve or
    trigger) and does not need to be provided.
    """

    event_type: EventType | None = None
    service_key: str | None = None
    description: str | None = None
    incident_key: str | None = None
    client: str | None = None
    client_url: str | None = None
    details: dict[str, Any] | None = None
    contexts: list[LinkContext | ImageContext] | None = None


class EventResponse(PagerDutyModel):
    """Response of the PagerDuty Events API.

    Attributes:
        status: "success" or an error status
        message: Human readable message
        incident_key: De-duplication key of the affected incident
        errors: Error details (only on failure)
        response: Raw httpx response
    """

    status: str = ""
    message: str = ""
    incident_key: str = ""
    errors: list[str] | None = None
    response: httpx.Response | None = Field(default=None, exclude=True, repr=False)


EscalationPolicy.model_rebuild()
