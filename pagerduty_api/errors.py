"""Exceptions raised by the PagerDuty API client.

Every error derives from ``PagerDutyError``. Nothing is retried or suppressed
by the client; callers decide what to do with a failure.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.models import ErrorEnvelope


class ErrorCode(IntEnum):
    """Error codes returned in the ``code`` field of PagerDuty error responses."""

    INTERNAL_ERROR = 2000
    INVALID_INPUT_PROVIDED = 2001
    ARGUMENTS_CAUSED_ERROR = 2002
    MISSING_ARGUMENTS = 2003
    INVALID_SINCE_OR_UNTIL_PARAMETER_VALUES = 2004
    INVALID_QUERY_DATE_RANGE = 2005
    AUTHENTICATION_FAILED = 2006
    ACCOUNT_NOT_FOUND = 2007
    ACCOUNT_LOCKED = 2008
    ONLY_HTTPS_ALLOWED_FOR_THIS_CALL = 2009
    ACCESS_DENIED = 2010
    REQUIRES_REQUESTER_ID = 2011
    ACCOUNT_EXPIRED = 2012


class PagerDutyError(Exception):
    pass


class ConfigurationError(PagerDutyError):
    """The base endpoint (template) of the client is malformed."""


class PathResolutionError(PagerDutyError):
    """A relative resource path cannot be resolved against the base endpoint."""


class SerializationError(PagerDutyError):
    """A request body cannot be encoded as JSON."""


class TransportError(PagerDutyError):
    """The HTTP transport failed before a response was received."""


class DecodeError(PagerDutyError):
    """Response bytes are not valid JSON for the expected shape."""


class PreconditionError(PagerDutyError, ValueError):
    """A required argument is missing."""


class UnknownTimeZone(PagerDutyError, ValueError):
    def __init__(self, time_zone: str) -> None:
        self.time_zone = time_zone
        super().__init__(f"time zone {time_zone!r} does not exist")


class MalformedDate(PagerDutyError, ValueError):
    def __init__(self, data: bytes | str) -> None:
        self.data = data
        super().__init__(f"malformed date {data!r}, expected '\"YYYY-MM-DD\"'")


class APIError(PagerDutyError):
    """PagerDuty answered with a status code outside the 2xx range.

    The pagination envelope and any payload that could be decoded from the
    response body are kept on the exception, so callers can still inspect
    them on failure.

    Attributes:
        error: Decoded error envelope (zero valued if the body was not one)
        response: Response envelope with the raw httpx response
        payload: Partially decoded payload or None
    """

    def __init__(
        self,
        error: ErrorEnvelope,
        response: Response,
        payload: Any = None,
    ) -> None:
        self.error = error
        self.response = response
        self.payload = payload
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def method(self) -> str:
        return self.response.http_response.request.method

    @property
    def url(self) -> str:
        return str(self.response.http_response.request.url)

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def errors(self) -> list[str]:
        return self.error.errors

    def __str__(self) -> str:
        text = f"pagerduty: {self.method} {self.url!r}: {self.status_code}"
        if self.error.message:
            text += f" (code {self.error.code}: {self.error.message})"
        return text
