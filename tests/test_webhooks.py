"""Tests for pagerduty_api.services.webhooks module."""

import io
from datetime import UTC, datetime

import pytest

from pagerduty_api import DecodeError, PagerDutyApi, WebhookType
from tests.conftest import FakePagerDuty

WEBHOOK_JSON = """{
    "messages": [{
        "id": "bb8b8fe0-e8d5-11e2-9c1e-22000afd16cf",
        "created_on": "2013-07-09T20:25:44Z",
        "type": "incident.trigger",
        "data": {
            "incident": {
                "id": "PIJ90N7",
                "incident_number": 1,
                "created_on": "2013-07-09T20:25:44Z",
                "status": "triggered",
                "html_url": "https://acme.pagerduty.com/incidents/PIJ90N7",
                "incident_key": "null",
                "service": {
                    "id": "PBAZLIU",
                    "name": "service",
                    "html_url": "https://acme.pagerduty.com/services/PBAZLIU"
                },
                "assigned_to_user": {
                    "id": "PPI9KUT",
                    "name": "Alan Kay",
                    "email": "alan@pagerduty.com",
                    "html_url": "https://acme.pagerduty.com/users/PPI9KUT"
                },
                "resolved_by_user": {
                    "id": "PPI9KUT",
                    "name": "Alan Kay",
                    "email": "alan@pagerduty.com",
                    "html_url": "https://acme.pagerduty.com/users/PPI9KUT"
                },
                "trigger_summary_data": {"subject": "45645"},
                "trigger_details_html_url": "https://acme.pagerduty.com/incidents/PIJ90N7/log_entries/PIJ90N7",
                "last_status_change_on": "2013-07-09T20:25:44Z",
                "last_status_change_by": {
                    "id": "PPI9KUT",
                    "name": "Alan Kay",
                    "email": "alan@pagerduty.com",
                    "html_url": "https://acme.pagerduty.com/users/PPI9KUT"
                }
            }
        }
    }]
}"""


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(WEBHOOK_JSON, id="str"),
        pytest.param(WEBHOOK_JSON.encode(), id="bytes"),
        pytest.param(io.BytesIO(WEBHOOK_JSON.encode()), id="binary-file"),
        pytest.param(io.StringIO(WEBHOOK_JSON), id="text-file"),
    ],
)
def test_decode_messages(api: PagerDutyApi, data: object) -> None:
    messages = api.webhooks.decode_messages(data)  # type: ignore[arg-type]

    assert len(messages) == 1
    message = messages[0]
    assert message.type == WebhookType.INCIDENT_TRIGGER
    assert message.created_on == datetime(2013, 7, 9, 20, 25, 44, tzinfo=UTC)
    assert message.data is not None
    incident = message.data.incident
    assert incident is not None
    assert incident.id == "PIJ90N7"
    assert incident.service is not None
    assert incident.service.html_url == "https://acme.pagerduty.com/services/PBAZLIU"
    assert incident.resolved_by_user is not None
    assert incident.resolved_by_user.name == "Alan Kay"
    assert incident.trigger_summary_data == {"subject": "45645"}


def test_decode_no_messages(api: PagerDutyApi) -> None:
    assert api.webhooks.decode_messages(b'{"messages": []}') == []


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(b"", id="empty"),
        pytest.param(b"not json", id="invalid-json"),
        pytest.param(b'{"messages": {}}', id="messages-not-a-list"),
        pytest.param(
            b'{"messages": [{"created_on": "yesterday"}]}', id="bad-timestamp"
        ),
    ],
)
def test_decode_messages_invalid(api: PagerDutyApi, data: bytes) -> None:
    with pytest.raises(DecodeError):
        api.webhooks.decode_messages(data)


def test_decode_messages_makes_no_request(
    api: PagerDutyApi, fake_pagerduty: FakePagerDuty
) -> None:
    api.webhooks.decode_messages(WEBHOOK_JSON)
    assert fake_pagerduty.requests == []
