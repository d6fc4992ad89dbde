"""Global test configuration for pagerduty_api tests."""

import json
from collections.abc import Generator
from typing import Any

import httpx
import pytest

from pagerduty_api import PagerDutyApi


class FakePagerDuty:
    """MockTransport handler answering every request with a canned response.

    All received requests are recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = b"{}"

    def respond(
        self,
        status_code: int = 200,
        body: Any = None,
        *,
        raw: bytes | str | None = None,
    ) -> None:
        self.status_code = status_code
        if raw is not None:
            self.content = raw.encode() if isinstance(raw, str) else raw
        else:
            self.content = json.dumps(body if body is not None else {}).encode()

    @property
    def request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def request_json(self) -> Any:
        return json.loads(self.request.content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def fake_pagerduty() -> FakePagerDuty:
    return FakePagerDuty()


@pytest.fixture
def api(fake_pagerduty: FakePagerDuty) -> Generator[PagerDutyApi, None, None]:
    """PagerDutyApi for the "acme" account talking to the fake server."""
    with PagerDutyApi(
        "acme", "test-token", transport=httpx.MockTransport(fake_pagerduty)
    ) as api:
        yield api
