"""Tests for pagerduty_api.services.services module."""

from pagerduty_api import (
    GetServiceOptions,
    PagerDutyApi,
    Service,
    ServiceListOptions,
    ServiceStatus,
    ServiceType,
)
from tests.conftest import FakePagerDuty

SERVICE = {
    "id": "PBAZLIU",
    "name": "service",
    "service_url": "/services/PBAZLIU",
    "service_key": "key",
    "status": "active",
    "service_type": "generic_events_api",
    "incident_counts": {"triggered": 1, "acknowledged": 0, "resolved": 5, "total": 6},
    "escalation_policy": {"id": "PEP1", "name": "Default"},
    "email_filters": [{"subject_mode": "match", "subject_regex": "^alert"}],
}


def test_list_services(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(200, {"services": [SERVICE], "total": 1})

    services, _ = api.services.list(ServiceListOptions(teams=["PT1"], query="svc"))

    service = services[0]
    assert service.status == ServiceStatus.ACTIVE
    assert service.type == ServiceType.GENERIC_EVENTS_API
    assert service.incident_counts is not None
    assert service.incident_counts.acknowledged == 0
    assert service.email_filters == [
        {"subject_mode": "match", "subject_regex": "^alert"}
    ]
    assert fake_pagerduty.request.url == (
        "https://acme.pagerduty.com/api/v1/services?query=svc&teams=PT1"
    )


def test_get_service(fake_pagerduty: FakePagerDuty, api: PagerDutyApi) -> None:
    fake_pagerduty.respond(200, {"service": SERVICE})

    service, _ = api.services.get(
        "PBAZLIU", GetServiceOptions(include=["escalation_policy"])
    )

    assert service is not None
    assert service.escalation_policy is not None
    assert service.escalation_policy.id == "PEP1"
    assert fake_pagerduty.request.url == (
        "https://acme.pagerduty.com/api/v1/services/PBAZLIU?include=escalation_policy"
    )


def test_service_dumps_service_type_alias() -> None:
    service = Service(id="P1", type=ServiceType.NAGIOS)
    assert service.model_dump(mode="json", by_alias=True, exclude_none=True) == {
        "id": "P1",
        "service_type": "nagios",
    }
