"""PagerDuty Events API (integration endpoint).

Events are posted to ``generic/2010-04-15/create_event.json`` below the
events URL of the client, without the API token: the service key in the
event authenticates it.
"""

from __future__ import annotations

from pagerduty_api.errors import PreconditionError
from pagerduty_api.models import Event, EventResponse, EventType
from pagerduty_api.services.base import Service

EVENTS_PATH = "generic/2010-04-15/create_event.json"


class EventsService(Service):
    def _send(self, event: Event | None, event_type: EventType) -> EventResponse:
        if event is None:
            raise PreconditionError("event must not be None")
        request = self._api.new_event_request(
            "POST", EVENTS_PATH, event.model_copy(update={"event_type": event_type})
        )
        return self._api.send_event(request, api_method=f"events.{event_type}")

    def acknowledge(self, event: Event | None) -> EventResponse:
        """Acknowledge the incident identified by ``event.incident_key``."""
        return self._send(event, EventType.ACKNOWLEDGE)

    def resolve(self, event: Event | None) -> EventResponse:
        """Resolve the incident identified by ``event.incident_key``."""
        return self._send(event, EventType.RESOLVE)

    def trigger(self, event: Event | None) -> EventResponse:
        """Trigger a new incident or add the event to an open one.

        The returned response has ``status`` "success" and the
        ``incident_key`` of the incident on success. Failures are reported
        with an error ``status`` and ``errors``, for any HTTP status code.
        """
        return self._send(event, EventType.TRIGGER)
