"""PagerDuty time zone names.

PagerDuty renders and accepts time zones as human readable names
(e.g. "Eastern Time (US & Canada)") instead of IANA identifiers. This module
owns the static mapping between both and exposes ``TimeZone``, a pydantic
annotated ``ZoneInfo`` that reads and writes PagerDuty names on the wire.

Several PagerDuty names are aliases of the same IANA zone ("Mumbai",
"New Delhi", "Kolkata", "Chennai"). All of them decode, but encoding a zone
always yields the first name in table order, so that the canonical pairs in
``IANA_TO_PAGERDUTY`` form a bijection.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import PlainSerializer, PlainValidator

from pagerduty_api.errors import UnknownTimeZone

_PAGERDUTY_TO_IANA: dict[str, str] = {
    "Abu Dhabi": "Asia/Dubai",
    "Adelaide": "Australia/Adelaide",
    "Alaska": "America/Juneau",
    "Almaty": "Asia/Almaty",
    "Amsterdam": "Europe/Amsterdam",
    "Arizona": "America/Phoenix",
    "Astana": "Asia/Thimphu",
    "Athens": "Europe/Athens",
    "Atlantic Time (Canada)": "America/Halifax",
    "Auckland": "Pacific/Auckland",
    "Azores": "Atlantic/Azores",
    "Baghdad": "Asia/Baghdad",
    "Baku": "Asia/Baku",
    "Bangkok": "Asia/Bangkok",
    "Beijing": "Asia/Shanghai",
    "Belgrade": "Europe/Belgrade",
    "Berlin": "Europe/Berlin",
    "Bern": "CET",
    "Bogota": "America/Bogota",
    "Brasilia": "America/Sao_Paulo",
    "Bratislava": "Europe/Bratislava",
    "Brisbane": "Australia/Brisbane",
    "Brussels": "Europe/Brussels",
    "Bucharest": "Europe/Bucharest",
    "Budapest": "Europe/Budapest",
    "Buenos Aires": "America/Argentina/Buenos_Aires",
    "Cairo": "Africa/Cairo",
    "Canberra": "Australia/Canberra",
    "Cape Verde Is.": "Atlantic/Cape_Verde",
    "Caracas": "America/Caracas",
    "Casablanca": "Africa/Casablanca",
    "Central America": "America/Guatemala",
    "Central Time (US & Canada)": "America/Chicago",
    "Chennai": "Asia/Kolkata",
    "Chihuahua": "America/Chihuahua",
    "Chongqing": "Asia/Chongqing",
    "Copenhagen": "Europe/Copenhagen",
    "Darwin": "Australia/Darwin",
    "Dhaka": "Asia/Dhaka",
    "Dublin": "Europe/Dublin",
    "Eastern Time (US & Canada)": "America/New_York",
    "Edinburgh": "Europe/Dublin",
    "Ekaterinburg": "Asia/Yekaterinburg",
    "Fiji": "Pacific/Fiji",
    "Georgetown": "America/Argentina/San_Juan",
    "Greenland": "America/Godthab",
    "Guadalajara": "America/Mexico_City",
    "Guam": "Pacific/Guam",
    "Hanoi": "Asia/Bangkok",
    "Harare": "Africa/Harare",
    "Hawaii": "Pacific/Honolulu",
    "Helsinki": "Europe/Helsinki",
    "Hobart": "Australia/Hobart",
    "Hong Kong": "Asia/Hong_Kong",
    "Indiana (East)": "America/Indiana/Indianapolis",
    "International Date Line West": "Pacific/Midway",
    "Irkutsk": "Asia/Irkutsk",
    "Islamabad": "Asia/Karachi",
    "Istanbul": "Europe/Istanbul",
    "Jakarta": "Asia/Jakarta",
    "Jerusalem": "Asia/Jerusalem",
    "Kabul": "Asia/Kabul",
    "Kamchatka": "Asia/Kamchatka",
    "Karachi": "Asia/Karachi",
    "Kathmandu": "Asia/Katmandu",
    "Kolkata": "Asia/Kolkata",
    "Krasnoyarsk": "Asia/Krasnoyarsk",
    "Kuala Lumpur": "Asia/Kuala_Lumpur",
    "Kuwait": "Asia/Kuwait",
    "Kyev": "Europe/Kiev",
    "La Paz": "America/La_Paz",
    "Lima": "America/Lima",
    "Lisbon": "Europe/Lisbon",
    "Ljubljana": "Europe/Ljubljana",
    "London": "Europe/London",
    "Madrid": "Europe/Madrid",
    "Magadan": "Asia/Magadan",
    "Marshall Is.": "Pacific/Majuro",
    "Mazatlan": "America/Mazatlan",
    "Melbourne": "Australia/Melbourne",
    "Mexico City": "America/Mexico_City",
    "Mid-Atlantic": "Atlantic/South_Georgia",
    "Midway Island": "Pacific/Midway",
    "Minsk": "Europe/Minsk",
    "Monrovia": "Africa/Monrovia",
    "Monterrey": "America/Monterrey",
    "Moscow": "Europe/Moscow",
    "Mountain Time (US & Canada)": "America/Denver",
    "Mumbai": "Asia/Kolkata",
    "Muscat": "Asia/Muscat",
    "Nairobi": "Africa/Nairobi",
    "New Caledonia": "Pacific/Noumea",
    "New Delhi": "Asia/Kolkata",
    "Newfoundland": "America/St_Johns",
    "Novosibirsk": "Asia/Novosibirsk",
    "Nuku'alofa": "Pacific/Tongatapu",
    "Osaka": "Asia/Tokyo",
    "Pacific Time (US & Canada)": "America/Los_Angeles",
    "Paris": "Europe/Paris",
    "Perth": "Australia/Perth",
    "Port Moresby": "Pacific/Port_Moresby",
    "Prague": "Europe/Prague",
    "Pretoria": "Africa/Johannesburg",
    "Quito": "America/Lima",
    "Rangoon": "Asia/Rangoon",
    "Riga": "Europe/Riga",
    "Riyadh": "Asia/Riyadh",
    "Rome": "Europe/Rome",
    "Samoa": "Pacific/Samoa",
    "Santiago": "America/Santiago",
    "Sapporo": "Asia/Tokyo",
    "Sarajevo": "Europe/Sarajevo",
    "Saskatchewan": "Canada/Saskatchewan",
    "Seoul": "Asia/Seoul",
    "Singapore": "Asia/Singapore",
    "Skopje": "Europe/Skopje",
    "Sofia": "Europe/Sofia",
    "Solomon Is.": "Pacific/Guadalcanal",
    "Sri Jayawardenepura": "Asia/Colombo",
    "St. Petersburg": "Europe/Moscow",
    "Stockholm": "Europe/Stockholm",
    "Sydney": "Australia/Sydney",
    "Taipei": "Asia/Taipei",
    "Tallinn": "Europe/Tallinn",
    "Tashkent": "Asia/Tashkent",
    "Tbilisi": "Asia/Tbilisi",
    "Tehran": "Asia/Tehran",
    "Tijuana": "America/Tijuana",
    "Tokyo": "Asia/Tokyo",
    "UTC": "UTC",
    "Ulaan Bataar": "Asia/Ulaanbaatar",
    "Urumqi": "Asia/Urumqi",
    "Vienna": "Europe/Vienna",
    "Vilnius": "Europe/Vilnius",
    "Vladivostok": "Asia/Vladivostok",
    "Volgograd": "Europe/Moscow",
    "Warsaw": "Europe/Warsaw",
    "Wellington": "Pacific/Auckland",
    "West Central Africa": "Africa/Algiers",
    "Yakutsk": "Asia/Yakutsk",
    "Yerevan": "Asia/Yerevan",
    "Zagreb": "Europe/Zagreb",
}


def _invert(table: Mapping[str, str]) -> dict[str, str]:
    inverted: dict[str, str] = {}
    for name, zone in table.items():
        inverted.setdefault(zone, name)
    return inverted


PAGERDUTY_TO_IANA: Mapping[str, str] = MappingProxyType(_PAGERDUTY_TO_IANA)
IANA_TO_PAGERDUTY: Mapping[str, str] = MappingProxyType(_invert(_PAGERDUTY_TO_IANA))


def pagerduty_to_iana(name: str) -> str:
    """Return the IANA identifier for a PagerDuty time zone name.

    Raises:
        UnknownTimeZone: If ``name`` is not a PagerDuty time zone name
    """
    try:
        return PAGERDUTY_TO_IANA[name]
    except KeyError:
        raise UnknownTimeZone(name) from None


def iana_to_pagerduty(zone: str) -> str:
    """Return the PagerDuty time zone name for an IANA identifier.

    Raises:
        UnknownTimeZone: If PagerDuty has no name for ``zone``
    """
    try:
        return IANA_TO_PAGERDUTY[zone]
    except KeyError:
        raise UnknownTimeZone(zone) from None


def encode_time_zone(tz: ZoneInfo) -> str:
    return iana_to_pagerduty(tz.key)


def decode_time_zone(value: Any) -> ZoneInfo:
    if isinstance(value, ZoneInfo):
        return value
    if not isinstance(value, str):
        raise UnknownTimeZone(repr(value))
    zone = pagerduty_to_iana(value)
    try:
        return ZoneInfo(zone)
    except ZoneInfoNotFoundError:
        # no zoneinfo database entry for the zone
        raise UnknownTimeZone(value) from None


TimeZone = Annotated[
    ZoneInfo,
    PlainValidator(decode_time_zone),
    PlainSerializer(encode_time_zone, return_type=str),
]
