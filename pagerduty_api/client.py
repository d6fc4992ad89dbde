"""PagerDuty API client.

``PagerDutyApi`` is a stateless client: every resource call builds exactly
one request, sends it through a pluggable ``httpx`` transport and decodes the
buffered response body. There is no caching and nothing is retried.

Hook System:
- Always includes built-in hooks (metrics, request logging, latency)
- Supports additional hooks via pre_hooks, post_hooks and error_hooks
- Hooks receive a PagerDutyApiCallContext with method, verb and subdomain
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from pagerduty_api.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    PathResolutionError,
    TransportError,
)
from pagerduty_api.hooks import (
    Hook,
    PagerDutyApiCallContext,
    error_metrics_hook,
    invoke_with_hooks,
    latency_end_hook,
    latency_start_hook,
    metrics_hook,
    request_log_hook,
)
from pagerduty_api.json_utils import json_dumps
from pagerduty_api.models import ErrorEnvelope, EventResponse
from pagerduty_api.services.alerts import AlertsService
from pagerduty_api.services.escalation_policies import EscalationPoliciesService
from pagerduty_api.services.events import EventsService
from pagerduty_api.services.incidents import IncidentsService
from pagerduty_api.services.schedules import SchedulesService
from pagerduty_api.services.services import ServicesService
from pagerduty_api.services.teams import TeamsService
from pagerduty_api.services.users import UsersService
from pagerduty_api.services.webhooks import WebhooksService

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pagerduty_api.config import Settings

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://{subdomain}.pagerduty.com/api/v1/"
DEFAULT_EVENTS_URL = "https://events.pagerduty.com/"
TIMEOUT = 30

HEADER_AUTHORIZATION = "Authorization"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"

AUTHORIZATION_TOKEN = "Token token={api_key}"
ACCEPT_TYPE = "application/json"
CONTENT_TYPE = "application/json"

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Response:
    """A PagerDuty API response.

    Wraps the httpx response and gives access to the pagination fields.
    Any of them is 0 for responses that are not part of a paginated set,
    which cannot be told apart from a legitimate 0.

    Attributes:
        http_response: The raw httpx response (body already read)
        offset: The offset used in the execution of the query
        limit: The limit used in the execution of the query
        total: The total number of records available
    """

    http_response: httpx.Response
    offset: int = 0
    limit: int = 0
    total: int = 0

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers


class _Pagination(BaseModel):
    model_config = ConfigDict(strict=True)

    offset: int | None = None
    limit: int | None = None
    total: int | None = None


def parse_base_url(url: str) -> httpx.URL:
    """Parse an absolute http(s) base URL.

    Raises:
        ConfigurationError: If url is not an absolute http(s) URL
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"invalid base URL {url!r}: {e}") from e
    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise ConfigurationError(f"base URL {url!r} must be an absolute http(s) URL")
    return parsed


def render_base_url(template: str, subdomain: str) -> httpx.URL:
    """Render the API base URL template with the account subdomain.

    Raises:
        ConfigurationError: If the template cannot be rendered or does not
            result in an absolute http(s) URL
    """
    try:
        url = template.format(subdomain=subdomain)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigurationError(f"invalid base URL template {template!r}") from e
    return parse_base_url(url)


def build_request(
    base_url: httpx.URL,
    method: str,
    path: str,
    body: Any = None,
    *,
    headers: dict[str, str] | None = None,
    timeout: float = TIMEOUT,
) -> httpx.Request:
    """Build a JSON API request.

    Args:
        base_url: Absolute base URL
        method: HTTP verb
        path: URL reference resolved relative to base_url, e.g. "incidents"
            (relative paths should not start with a slash)
        body: Optional request body, JSON encoded
        headers: Additional headers
        timeout: Request timeout in seconds

    Returns:
        The request, not sent yet

    Raises:
        PathResolutionError: If path cannot be parsed or is not relative
        SerializationError: If body cannot be encoded as JSON
    """
    try:
        reference = httpx.URL(path)
    except httpx.InvalidURL as e:
        raise PathResolutionError(f"invalid path {path!r}: {e}") from e
    if reference.is_absolute_url or reference.host:
        raise PathResolutionError(f"path {path!r} must be relative")

    content = json_dumps(body) if body is not None else None

    request_headers = {
        HEADER_ACCEPT: ACCEPT_TYPE,
        HEADER_CONTENT_TYPE: CONTENT_TYPE,
        **(headers or {}),
    }
    return httpx.Request(
        method,
        base_url.join(reference),
        headers=request_headers,
        content=content,
        extensions={"timeout": httpx.Timeout(timeout).as_dict()},
    )


def _decode_error(body: bytes) -> ErrorEnvelope:
    if not body:
        return ErrorEnvelope()
    try:
        return ErrorEnvelope.model_validate_json(body)
    except ValidationError:
        return ErrorEnvelope()


class PagerDutyApi:
    """PagerDuty REST API v1 and Events API client.

    Resource calls are grouped in services: ``alerts``,
    ``escalation_policies``, ``events``, ``incidents``, ``schedules``,
    ``services``, ``teams``, ``users`` and ``webhooks``.

    Example:
        >>> api = PagerDutyApi(subdomain="acme", api_key="...")
        >>> incidents, response = api.incidents.list(
        ...     IncidentListOptions(status=[IncidentStatus.TRIGGERED])
        ... )
        >>> print(response.total)
    """

    def __init__(
        self,
        subdomain: str,
        api_key: str = "",
        *,
        base_url: str = DEFAULT_BASE_URL,
        events_url: str = DEFAULT_EVENTS_URL,
        timeout: float = TIMEOUT,
        transport: httpx.BaseTransport | None = None,
        pre_hooks: Sequence[Hook] | None = None,
        post_hooks: Sequence[Hook] | None = None,
        error_hooks: Sequence[Hook] | None = None,
    ) -> None:
        """Initialize PagerDuty API client.

        Args:
            subdomain: PagerDuty account subdomain (e.g. "acme")
            api_key: PagerDuty API key
            base_url: API base URL template, rendered with the subdomain
            events_url: Events API base URL
            timeout: API request timeout in seconds (default: 30)
            transport: httpx transport (default: httpx.HTTPTransport)
            pre_hooks: Hooks called before every API request
            post_hooks: Hooks called after every API request
            error_hooks: Hooks called when an API request raised

        Raises:
            ConfigurationError: If base_url or events_url is malformed
        """
        self.subdomain = subdomain
        self.api_key = api_key
        self.base_url = render_base_url(base_url, subdomain)
        self.events_url = parse_base_url(events_url)
        self._timeout = timeout

        self._pre_hooks: list[Hook] = [
            metrics_hook,
            latency_start_hook,
            request_log_hook,
        ]
        if pre_hooks:
            self._pre_hooks.extend(pre_hooks)
        self._post_hooks: list[Hook] = [latency_end_hook]
        if post_hooks:
            self._post_hooks.extend(post_hooks)
        self._error_hooks: list[Hook] = [error_metrics_hook]
        if error_hooks:
            self._error_hooks.extend(error_hooks)

        self._client = httpx.Client(
            timeout=timeout, transport=transport or httpx.HTTPTransport()
        )

        self.alerts = AlertsService(self)
        self.escalation_policies = EscalationPoliciesService(self)
        self.events = EventsService(self)
        self.incidents = IncidentsService(self)
        self.schedules = SchedulesService(self)
        self.services = ServicesService(self)
        self.teams = TeamsService(self)
        self.users = UsersService(self)
        self.webhooks = WebhooksService(self)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> PagerDutyApi:
        """Create a client from application settings."""
        return cls(
            subdomain=settings.subdomain,
            api_key=settings.api_key,
            base_url=settings.base_url,
            events_url=settings.events_url,
            timeout=settings.timeout,
            **kwargs,
        )

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Create an authenticated API request.

        ``path`` is resolved relative to the API base URL and should not have
        a leading slash.
        """
        return build_request(
            self.base_url,
            method,
            path,
            body,
            headers={
                HEADER_AUTHORIZATION: AUTHORIZATION_TOKEN.format(api_key=self.api_key)
            },
            timeout=self._timeout,
        )

    def new_event_request(
        self, method: str, path: str, body: Any = None
    ) -> httpx.Request:
        """Create a request for the Events API (no authorization header)."""
        return build_request(
            self.events_url, method, path, body, timeout=self._timeout
        )

    def _context(
        self, api_method: str, request: httpx.Request
    ) -> PagerDutyApiCallContext:
        return PagerDutyApiCallContext(
            method=api_method, verb=request.method, subdomain=self.subdomain
        )

    def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            return self._client.send(request)
        except httpx.TransportError as e:
            raise TransportError(
                f"pagerduty: {request.method} {str(request.url)!r}: {e}"
            ) from e
        except httpx.DecodingError as e:
            raise DecodeError(
                f"pagerduty: cannot decode {request.method} "
                f"{str(request.url)!r} response content: {e}"
            ) from e

    def do(
        self,
        request: httpx.Request,
        model: type[T] | None = None,
        *,
        api_method: str = "request",
    ) -> tuple[Response, T | None]:
        """Send an API request and decode the response.

        The pagination fields of the response body are decoded into the
        returned Response. If ``model`` is given, the same body is decoded
        into it as well.

        Args:
            request: Request built by new_request
            model: Pydantic model to decode the body into
            api_method: API method name for hooks (e.g. "teams.list")

        Returns:
            Tuple of the response envelope and the decoded payload (None
            without model or with an empty body)

        Raises:
            TransportError: If the request could not be sent
            DecodeError: If a 2xx body does not match the expected shape
            APIError: If the status code is not 2xx. Carries the decoded error
                envelope, the response envelope and any decodable payload.
        """
        with invoke_with_hooks(
            self._context(api_method, request),
            pre_hooks=self._pre_hooks,
            post_hooks=self._post_hooks,
            error_hooks=self._error_hooks,
        ):
            http_response = self._send(request)
            body = http_response.content
            success = http_response.is_success
            response = Response(http_response)
            payload: T | None = None

            if body:
                try:
                    pagination = _Pagination.model_validate_json(body)
                    response = replace(
                        response,
                        offset=pagination.offset or 0,
                        limit=pagination.limit or 0,
                        total=pagination.total or 0,
                    )
                    if model is not None:
                        payload = model.model_validate_json(body)
                except ValidationError as e:
                    if success:
                        raise DecodeError(
                            f"pagerduty: cannot decode {request.method} "
                            f"{str(request.url)!r} response: {e}"
                        ) from e
                    logger.debug(
                        "Cannot decode error response body",
                        method=api_method,
                        status_code=http_response.status_code,
                    )

            if not success:
                raise APIError(_decode_error(body), response, payload)
            return response, payload

    def send_event(
        self, request: httpx.Request, *, api_method: str = "events.create"
    ) -> EventResponse:
        """Send an Events API request and decode the event response.

        The Events API reports failures in the event response itself, so
        the response is returned for any HTTP status.

        Raises:
            TransportError: If the request could not be sent
            DecodeError: If the body is not an event response
        """
        with invoke_with_hooks(
            self._context(api_method, request),
            pre_hooks=self._pre_hooks,
            post_hooks=self._post_hooks,
            error_hooks=self._error_hooks,
        ):
            http_response = self._send(request)
            try:
                event_response = EventResponse.model_validate_json(
                    http_response.content
                )
            except ValidationError as e:
                raise DecodeError(
                    f"pagerduty: cannot decode event response: {e}"
                ) from e
        return event_response.model_copy(update={"response": http_response})

    def get(
        self, path: str, model: type[T] | None = None, *, api_method: str = "get"
    ) -> tuple[Response, T | None]:
        return self.do(self.new_request("GET", path), model, api_method=api_method)

    def post(
        self,
        path: str,
        body: Any = None,
        model: type[T] | None = None,
        *,
        api_method: str = "post",
    ) -> tuple[Response, T | None]:
        return self.do(
            self.new_request("POST", path, body), model, api_method=api_method
        )

    def put(
        self,
        path: str,
        body: Any = None,
        model: type[T] | None = None,
        *,
        api_method: str = "put",
    ) -> tuple[Response, T | None]:
        return self.do(
            self.new_request("PUT", path, body), model, api_method=api_method
        )

    def delete(self, path: str, *, api_method: str = "delete") -> Response:
        response, _ = self.do(self.new_request("DELETE", path), api_method=api_method)
        return response

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> PagerDutyApi:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
