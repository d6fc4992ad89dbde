"""Calendar dates in PagerDuty's ``"YYYY-MM-DD"`` wire format.

Schedules and schedule layers carry plain dates (no time of day, no zone)
next to regular RFC 3339 timestamps. On the wire a date is always the quoted,
zero padded ``"YYYY-MM-DD"`` form.
"""

import re
from datetime import date
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from pagerduty_api.errors import MalformedDate

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _from_unquoted(value: str, data: bytes | str) -> date:
    match = _DATE_RE.fullmatch(value)
    if not match:
        raise MalformedDate(data)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise MalformedDate(data) from None


def parse_date(data: bytes | str) -> date:
    """Parse a quoted ``"YYYY-MM-DD"`` date.

    Args:
        data: Raw JSON value, including the surrounding double quotes

    Returns:
        The parsed date

    Raises:
        MalformedDate: If data is not exactly a quoted, zero padded date

    Example:
        >>> parse_date(b'"2013-07-09"')
        datetime.date(2013, 7, 9)
    """
    text = data.decode("ascii", errors="replace") if isinstance(data, bytes) else data
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':  # noqa: PLR2004
        raise MalformedDate(data)
    return _from_unquoted(text[1:-1], data)


def format_date(value: date) -> bytes:
    """Format a date as quoted ``"YYYY-MM-DD"``."""
    return f'"{value.year:04d}-{value.month:02d}-{value.day:02d}"'.encode("ascii")


def _validate(value: Any) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise MalformedDate(repr(value))
    return _from_unquoted(value, value)


def _serialize(value: date) -> str:
    return format_date(value).decode("ascii")[1:-1]


# date field of a PagerDuty model, (de)serialized with the strict format
Date = Annotated[
    date,
    PlainValidator(_validate),
    PlainSerializer(_serialize, return_type=str),
]
