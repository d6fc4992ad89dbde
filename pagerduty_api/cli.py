import contextlib
import json
from collections.abc import Callable, Generator
from typing import Any

import click

from pagerduty_api.client import PagerDutyApi
from pagerduty_api.config import Settings
from pagerduty_api.errors import PagerDutyError
from pagerduty_api.logger import setup_logging
from pagerduty_api.models import Event, EventResponse, IncidentStatus
from pagerduty_api.options import (
    IncidentCountOptions,
    IncidentListOptions,
    TeamListOptions,
    UserListOptions,
)
from pagerduty_api.output import OUTPUT_FORMATS, print_output

INCIDENT_COLUMNS = [
    "id",
    "incident_number",
    "status",
    "urgency",
    "service.name",
    "created_on",
]
TEAM_COLUMNS = ["id", "name", "description"]
USER_COLUMNS = ["id", "name", "email", "role", "time_zone"]
EVENT_COLUMNS = ["status", "message", "incident_key"]


def output(function: Callable) -> Callable:
    function = click.option(
        "--output",
        "-o",
        help="output type",
        default="table",
        type=click.Choice(OUTPUT_FORMATS),
    )(function)
    return function


def incident_filters(function: Callable) -> Callable:
    function = click.option(
        "--status",
        multiple=True,
        type=click.Choice([s.value for s in IncidentStatus]),
        help="only incidents in this status (repeatable)",
    )(function)
    function = click.option(
        "--service", multiple=True, help="only incidents of this service ID"
    )(function)
    function = click.option(
        "--team", multiple=True, help="only incidents of this team ID"
    )(function)
    function = click.option("--incident-key", default="", help="de-duplication key")(
        function
    )
    return function


def event_options(function: Callable) -> Callable:
    function = click.option(
        "--service-key", required=True, help="integration key of the service"
    )(function)
    function = click.option("--incident-key", default=None, help="de-duplication key")(
        function
    )
    function = click.option("--description", default=None, help="event summary")(
        function
    )
    function = click.option("--client", default=None, help="monitoring client name")(
        function
    )
    function = click.option("--client-url", default=None, help="monitoring client URL")(
        function
    )
    function = click.option(
        "--details", default=None, help="free-form event details as a JSON object"
    )(function)
    return function


@contextlib.contextmanager
def api_client(ctx: click.Context) -> Generator[PagerDutyApi, None, None]:
    """Yield a client built from the settings, PagerDuty errors abort the command."""
    try:
        with PagerDutyApi.from_settings(ctx.obj["settings"]) as api:
            yield api
    except PagerDutyError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--subdomain",
    default=None,
    help="PagerDuty account subdomain (default: $PAGERDUTY_SUBDOMAIN)",
)
@click.option(
    "--api-key",
    default=None,
    help="PagerDuty API key (default: $PAGERDUTY_API_KEY)",
)
@click.pass_context
def root(ctx: click.Context, subdomain: str | None, api_key: str | None) -> None:
    ctx.ensure_object(dict)
    overrides = {
        name: value
        for name, value in (("subdomain", subdomain), ("api_key", api_key))
        if value is not None
    }
    settings = Settings().model_copy(update=overrides)
    setup_logging(
        settings.log_level, settings.log_format_json, settings.log_exclude_loggers
    )
    ctx.obj["settings"] = settings


@root.group()
def incidents() -> None:
    """Query incidents."""


@incidents.command(name="list")
@incident_filters
@click.option(
    "--urgency",
    multiple=True,
    type=click.Choice(["high", "low"]),
    help="only incidents of this urgency (repeatable)",
)
@click.option(
    "--sort-by", default="", help="sort field and direction, e.g. created_on:desc"
)
@click.option("--limit", default=0, type=int, help="maximum number of incidents")
@output
@click.pass_context
def incidents_list(
    ctx: click.Context,
    status: tuple[str, ...],
    service: tuple[str, ...],
    team: tuple[str, ...],
    incident_key: str,
    urgency: tuple[str, ...],
    sort_by: str,
    limit: int,
    output: str,
) -> None:
    options = IncidentListOptions(
        status=list(status),
        service=list(service),
        teams=list(team),
        incident_key=incident_key,
        urgency=list(urgency),
        sort_by=sort_by,
        limit=limit,
    )
    with api_client(ctx) as api:
        items, _ = api.incidents.list(options)
    content = [item.model_dump(mode="json") for item in items]
    print_output(content, INCIDENT_COLUMNS, output)


@incidents.command(name="count")
@incident_filters
@click.pass_context
def incidents_count(
    ctx: click.Context,
    status: tuple[str, ...],
    service: tuple[str, ...],
    team: tuple[str, ...],
    incident_key: str,
) -> None:
    options = IncidentCountOptions(
        status=list(status),
        service=list(service),
        teams=list(team),
        incident_key=incident_key,
    )
    with api_client(ctx) as api:
        total, _ = api.incidents.count(options)
    click.echo(total)


@root.group()
def teams() -> None:
    """Query teams."""


@teams.command(name="list")
@click.option("--query", default="", help="only teams whose name matches")
@output
@click.pass_context
def teams_list(ctx: click.Context, query: str, output: str) -> None:
    with api_client(ctx) as api:
        items, _ = api.teams.list(TeamListOptions(query=query))
    content = [item.model_dump(mode="json") for item in items]
    print_output(content, TEAM_COLUMNS, output, sort=True)


@root.group()
def users() -> None:
    """Query users."""


@users.command(name="list")
@click.option("--query", default="", help="only users whose name or email matches")
@output
@click.pass_context
def users_list(ctx: click.Context, query: str, output: str) -> None:
    with api_client(ctx) as api:
        items, _ = api.users.list(UserListOptions(query=query))
    content = [item.model_dump(mode="json") for item in items]
    print_output(content, USER_COLUMNS, output, sort=True)


@root.group()
def events() -> None:
    """Send events to the PagerDuty Events API."""


def _build_event(**kwargs: Any) -> Event:
    details = kwargs.pop("details")
    if details is not None:
        try:
            kwargs["details"] = json.loads(details)
        except json.JSONDecodeError as e:
            raise click.BadParameter(str(e), param_hint="--details") from e
    return Event(**kwargs)


def _print_event_response(event_response: EventResponse, output: str) -> None:
    print_output([event_response.model_dump(mode="json")], EVENT_COLUMNS, output)
    if event_response.status != "success":
        raise click.ClickException(
            f"event rejected: {event_response.message} {event_response.errors or []}"
        )


@events.command()
@event_options
@output
@click.pass_context
def trigger(ctx: click.Context, output: str, **kwargs: Any) -> None:
    """Trigger an incident."""
    event = _build_event(**kwargs)
    with api_client(ctx) as api:
        event_response = api.events.trigger(event)
    _print_event_response(event_response, output)


@events.command()
@event_options
@output
@click.pass_context
def acknowledge(ctx: click.Context, output: str, **kwargs: Any) -> None:
    """Acknowledge the incident of an incident key."""
    event = _build_event(**kwargs)
    with api_client(ctx) as api:
        event_response = api.events.acknowledge(event)
    _print_event_response(event_response, output)


@events.command()
@event_options
@output
@click.pass_context
def resolve(ctx: click.Context, output: str, **kwargs: Any) -> None:
    """Resolve the incident of an incident key."""
    event = _build_event(**kwargs)
    with api_client(ctx) as api:
        event_response = api.events.resolve(event)
    _print_event_response(event_response, output)
