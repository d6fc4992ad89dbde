"""PagerDuty API client and models.

This package provides a stateless client for the PagerDuty REST API v1 and
the PagerDuty Events API.

- PagerDutyApi: API client with hooks for metrics, logging and latency
- Models: Pydantic models for incidents, schedules, services, users, teams,
  escalation policies, alerts, events and webhook messages
- Options: Pydantic models for query parameters and request bodies

Example:
    >>> from pagerduty_api import PagerDutyApi, TeamListOptions
    >>> with PagerDutyApi(subdomain="acme", api_key="...") as api:
    ...     teams, response = api.teams.list(TeamListOptions(query="ops"))
    ...     for team in teams:
    ...         print(team.name)
"""

from pagerduty_api.client import (
    DEFAULT_BASE_URL,
    DEFAULT_EVENTS_URL,
    TIMEOUT,
    PagerDutyApi,
    Response,
    build_request,
)
from pagerduty_api.dates import Date, format_date, parse_date
from pagerduty_api.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    MalformedDate,
    PagerDutyError,
    PathResolutionError,
    PreconditionError,
    SerializationError,
    TransportError,
    UnknownTimeZone,
)
from pagerduty_api.hooks import PagerDutyApiCallContext
from pagerduty_api.models import (
    Alert,
    AlertType,
    ContextType,
    ErrorEnvelope,
    EscalationPolicy,
    EscalationRule,
    Event,
    EventResponse,
    EventType,
    ImageContext,
    Incident,
    IncidentCounts,
    IncidentStatus,
    LinkContext,
    ObjectAt,
    ObjectType,
    PendingAction,
    Schedule,
    ScheduleLayer,
    Service,
    ServiceStatus,
    ServiceType,
    Target,
    Team,
    User,
    UserInclude,
    WebhookData,
    WebhookIncident,
    WebhookMessage,
    WebhookType,
)
from pagerduty_api.options import (
    AlertListOptions,
    EscalationPolicyListOptions,
    GetServiceOptions,
    GetUserOptions,
    IncidentAcknowledgeOptions,
    IncidentCountOptions,
    IncidentEditOptions,
    IncidentListOptions,
    IncidentParameter,
    IncidentReassignOptions,
    IncidentResolveOptions,
    IncidentSnoozeOptions,
    ListOptions,
    ScheduleListOptions,
    ServiceListOptions,
    TeamListOptions,
    UserListOptions,
)
from pagerduty_api.query import Comma, OmitEmpty, add_options
from pagerduty_api.time_zones import (
    IANA_TO_PAGERDUTY,
    PAGERDUTY_TO_IANA,
    TimeZone,
    iana_to_pagerduty,
    pagerduty_to_iana,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_EVENTS_URL",
    "IANA_TO_PAGERDUTY",
    "PAGERDUTY_TO_IANA",
    "TIMEOUT",
    "APIError",
    "Alert",
    "AlertListOptions",
    "AlertType",
    "Comma",
    "ConfigurationError",
    "ContextType",
    "Date",
    "DecodeError",
    "ErrorCode",
    "ErrorEnvelope",
    "EscalationPolicy",
    "EscalationPolicyListOptions",
    "EscalationRule",
    "Event",
    "EventResponse",
    "EventType",
    "GetServiceOptions",
    "GetUserOptions",
    "ImageContext",
    "Incident",
    "IncidentAcknowledgeOptions",
    "IncidentCountOptions",
    "IncidentCounts",
    "IncidentEditOptions",
    "IncidentListOptions",
    "IncidentParameter",
    "IncidentReassignOptions",
    "IncidentResolveOptions",
    "IncidentSnoozeOptions",
    "IncidentStatus",
    "LinkContext",
    "ListOptions",
    "MalformedDate",
    "ObjectAt",
    "ObjectType",
    "OmitEmpty",
    "PagerDutyApi",
    "PagerDutyApiCallContext",
    "PagerDutyError",
    "PathResolutionError",
    "PendingAction",
    "PreconditionError",
    "Response",
    "Schedule",
    "ScheduleLayer",
    "ScheduleListOptions",
    "SerializationError",
    "Service",
    "ServiceListOptions",
    "ServiceStatus",
    "ServiceType",
    "Target",
    "Team",
    "TeamListOptions",
    "TimeZone",
    "TransportError",
    "UnknownTimeZone",
    "User",
    "UserInclude",
    "UserListOptions",
    "WebhookData",
    "WebhookIncident",
    "WebhookMessage",
    "WebhookType",
    "add_options",
    "build_request",
    "format_date",
    "iana_to_pagerduty",
    "pagerduty_to_iana",
    "parse_date",
]
