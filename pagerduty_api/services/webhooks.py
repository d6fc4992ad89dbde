"""Decode messages delivered by PagerDuty webhooks.

Receiving webhooks is up to the application (e.g. a web framework view);
this service only decodes the request body.
"""

from typing import IO

from pydantic import Field, ValidationError

from pagerduty_api.errors import DecodeError
from pagerduty_api.models import PagerDutyModel, WebhookMessage
from pagerduty_api.services.base import Service


class WebhookMessageList(PagerDutyModel):
    messages: list[WebhookMessage] = Field(default_factory=list)


class WebhooksService(Service):
    def decode_messages(
        self, data: bytes | str | IO[bytes] | IO[str]
    ) -> list[WebhookMessage]:
        """Decode the ``messages`` of a webhook request body.

        Args:
            data: Request body or a file-like object to read it from

        Raises:
            DecodeError: If data is not a webhook message list
        """
        if not isinstance(data, bytes | str):
            data = data.read()
        try:
            return WebhookMessageList.model_validate_json(data).messages
        except ValidationError as e:
            raise DecodeError(f"cannot decode webhook messages: {e}") from e
