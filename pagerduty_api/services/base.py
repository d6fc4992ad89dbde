from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagerduty_api.client import PagerDutyApi


class Service:
    """Base class of the resource services of ``PagerDutyApi``.

    A service holds a reference to the client and nothing else; all state
    lives in the client.
    """

    def __init__(self, api: PagerDutyApi) -> None:
        self._api = api
