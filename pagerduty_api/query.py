"""Encode option models as URL query parameters.

Option models are plain pydantic models. The wire name of a field is its
alias (if any), and ``typing.Annotated`` markers control how a value is
written:

- ``OmitEmpty``: skip the field when it holds its type's zero value
- ``Comma``: join list values with "," instead of repeating the key

``None`` is always skipped, so optional fields are ``X | None = None``.

Example:
    >>> class TeamListOptions(BaseModel):
    ...     query: Annotated[str, OmitEmpty()] = ""
    ...     limit: Annotated[int, OmitEmpty()] = 0
    >>> add_options("teams", TeamListOptions(query="ops"))
    'teams?query=ops'
"""

from collections.abc import Iterator
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

import httpx
from pydantic import BaseModel

from pagerduty_api.dates import format_date
from pagerduty_api.errors import PathResolutionError
from pagerduty_api.time_zones import encode_time_zone


class OmitEmpty:
    """Skip the field if it equals the zero value of its type."""


class Comma:
    """Encode a list as a single comma separated value."""


def _is_zero(value: Any) -> bool:
    if isinstance(value, ZoneInfo | datetime | date):
        return False
    return not value


def _encode_value(value: Any) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case ZoneInfo():
            return encode_time_zone(value)
        case datetime():
            return value.isoformat()
        case date():
            return format_date(value).decode("ascii")[1:-1]
        case _:
            return str(value)


def query_values(options: BaseModel) -> list[tuple[str, str]]:
    """Return the query parameters of an option model sorted by key.

    Raises:
        UnknownTimeZone: If a time zone field has no PagerDuty name
    """
    return sorted(_iter_values(options), key=lambda item: item[0])


def _iter_values(options: BaseModel) -> Iterator[tuple[str, str]]:
    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if value is None:
            continue
        markers = {type(m) for m in field.metadata}
        if OmitEmpty in markers and _is_zero(value):
            continue
        key = field.alias or name
        if isinstance(value, list | tuple | set | frozenset):
            values = [_encode_value(v) for v in value]
            if Comma in markers:
                yield key, ",".join(values)
            else:
                for v in values:
                    yield key, v
            continue
        yield key, _encode_value(value)


def add_options(path: str, options: BaseModel | None) -> str:
    """Add the parameters of ``options`` as the query string of ``path``.

    Any query string already present on ``path`` is replaced. If ``options``
    is None, ``path`` is returned unchanged.

    Raises:
        PathResolutionError: If path is not a valid URL reference
        UnknownTimeZone: If a time zone field has no PagerDuty name
    """
    if options is None:
        return path
    try:
        url = httpx.URL(path)
    except httpx.InvalidURL as e:
        raise PathResolutionError(f"invalid path {path!r}: {e}") from e
    params = query_values(options)
    return str(url.copy_with(params=params))
