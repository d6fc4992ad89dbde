"""Tests for pagerduty_api.dates module."""

from datetime import date

import pytest
from pydantic import BaseModel, ValidationError

from pagerduty_api import Date, MalformedDate, format_date, parse_date


class Holder(BaseModel):
    today: Date


def test_parse_date() -> None:
    assert parse_date(b'"2013-07-09"') == date(2013, 7, 9)


def test_parse_date_str() -> None:
    assert parse_date('"2006-01-02"') == date(2006, 1, 2)


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(date(2013, 7, 9), id="regular"),
        pytest.param(date(1, 1, 1), id="min"),
        pytest.param(date(9999, 12, 31), id="max"),
        pytest.param(date(2024, 2, 29), id="leap-day"),
    ],
)
def test_format_date_parse_date_round_trip(value: date) -> None:
    assert parse_date(format_date(value)) == value


def test_format_date_zero_pads() -> None:
    assert format_date(date(12, 3, 4)) == b'"0012-03-04"'


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(b"2013-07-09", id="unquoted"),
        pytest.param(b'"2013-7-9"', id="not-padded"),
        pytest.param(b'"2013-02-30"', id="invalid-day"),
        pytest.param(b'"2013-13-01"', id="invalid-month"),
        pytest.param(b'"2013-07-09T00:00:00Z"', id="timestamp"),
        pytest.param(b'"09/07/2013"', id="wrong-format"),
        pytest.param(b'""', id="empty-string"),
        pytest.param(b'"', id="single-quote"),
        pytest.param(b"", id="empty"),
        pytest.param(b"null", id="null"),
    ],
)
def test_parse_date_malformed(data: bytes) -> None:
    with pytest.raises(MalformedDate) as e:
        parse_date(data)
    assert e.value.data == data


def test_date_field_validate_and_serialize() -> None:
    holder = Holder.model_validate_json('{"today": "2006-01-02"}')
    assert holder.today == date(2006, 1, 2)
    assert holder.model_dump_json() == '{"today":"2006-01-02"}'


def test_date_field_rejects_timestamp() -> None:
    with pytest.raises(ValidationError):
        Holder.model_validate_json('{"today": "2006-01-02T15:04:05Z"}')
