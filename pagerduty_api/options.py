"""Option models for PagerDuty API calls.

Most options are sent as URL query parameters (see ``pagerduty_api.query``);
``IncidentEditOptions`` is sent as the JSON request body.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from pagerduty_api.query import Comma, OmitEmpty
from pagerduty_api.time_zones import TimeZone


class Options(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, arbitrary_types_allowed=True
    )


class ListOptions(Options):
    """Pagination parameters shared by all list calls.

    Attributes:
        offset: The offset of the first record returned (default: 0)
        limit: The number of records returned (default and max: 100)
    """

    offset: Annotated[int, OmitEmpty()] = 0
    limit: Annotated[int, OmitEmpty()] = 0


class AlertListOptions(ListOptions):
    """
    Attributes:
        since: Start of the date range to search
        until: End of the date range to search
        filter_type: Only alerts of this type (SMS, Email, Phone or Push)
        time_zone: Time zone the result dates are rendered in
    """

    since: datetime | None = None
    until: datetime | None = None
    filter_type: Annotated[str, OmitEmpty()] = Field("", alias="filter[type]")
    time_zone: TimeZone | None = None


class EscalationPolicyListOptions(ListOptions):
    query: Annotated[str, OmitEmpty()] = ""
    teams: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    include: Annotated[list[str], OmitEmpty()] = Field(default_factory=list)


class IncidentCountOptions(Options):
    """Filters shared by listing and counting incidents.

    Attributes:
        since: Start of the date range to search
        until: End of the date range to search
        date_range: "all" ignores since and until
        status: Only incidents in these statuses (triggered, acknowledged,
            resolved)
        incident_key: Only incidents with this de-duplication key
        service: Only incidents of these service IDs
        teams: Only incidents of these team IDs
        assigned_to_user: Only incidents assigned to these user IDs. Only
            triggered and acknowledged incidents are assigned to users.
    """

    since: datetime | None = None
    until: datetime | None = None
    date_range: Annotated[str, OmitEmpty()] = ""
    status: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    incident_key: Annotated[str, OmitEmpty()] = ""
    service: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    teams: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    assigned_to_user: Annotated[list[str], OmitEmpty(), Comma()] = Field(
        default_factory=list
    )


class IncidentListOptions(ListOptions, IncidentCountOptions):
    """
    Attributes:
        fields: Restrict the properties of each returned incident
        urgency: Only incidents of these urgencies (default: high,low)
        time_zone: Time zone the result dates are rendered in (default: UTC)
        sort_by: Sort fields with direction, e.g. "created_on:desc"
    """

    fields: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    urgency: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    time_zone: TimeZone | None = None
    sort_by: Annotated[str, OmitEmpty()] = ""


class IncidentParameter(Options):
    """Changes to apply to a single incident.

    Attributes:
        id: The incident ID
        status: New status ("resolved" or "acknowledged")
        escalation_policy: Escalation policy ID to delegate the incident to
        escalation_level: Escalate to this level of the escalation policy
        assigned_to_user: Comma separated user IDs to assign the incident to
    """

    id: str | None = None
    status: str | None = None
    escalation_policy: str | None = None
    escalation_level: int | None = None
    assigned_to_user: str | None = None


class IncidentEditOptions(Options):
    incidents: list[IncidentParameter] | None = None
    requester_id: str | None = None


class IncidentAcknowledgeOptions(Options):
    requester_id: str = ""


class IncidentResolveOptions(Options):
    requester_id: str = ""


class IncidentReassignOptions(Options):
    requester_id: str = ""
    escalation_policy: str | None = None
    escalation_level: int | None = None
    assigned_to_user: str | None = None


class IncidentSnoozeOptions(Options):
    """
    Attributes:
        requester_id: ID of the user making the request
        duration: Seconds until the incident returns to "triggered"
    """

    requester_id: str = ""
    duration: int = 0


class ScheduleListOptions(ListOptions):
    """
    Attributes:
        query: Only schedules whose name matches the query
        requester_id: ID of the user making the request, used to generate
            private calendar URLs with token based authentication
    """

    query: Annotated[str, OmitEmpty()] = ""
    requester_id: Annotated[str, OmitEmpty()] = ""


class ServiceListOptions(ListOptions):
    teams: Annotated[list[str], OmitEmpty(), Comma()] = Field(default_factory=list)
    include: Annotated[list[str], OmitEmpty()] = Field(default_factory=list)
    time_zone: TimeZone | None = None
    query: Annotated[str, OmitEmpty()] = ""
    sort_by: Annotated[str, OmitEmpty()] = ""


class GetServiceOptions(Options):
    include: Annotated[list[str], OmitEmpty()] = Field(default_factory=list)


class TeamListOptions(ListOptions):
    query: Annotated[str, OmitEmpty()] = ""


class UserListOptions(ListOptions):
    query: Annotated[str, OmitEmpty()] = ""
    include: Annotated[list[str], OmitEmpty()] = Field(default_factory=list)


class GetUserOptions(Options):
    include: Annotated[list[str], OmitEmpty()] = Field(default_factory=list)
