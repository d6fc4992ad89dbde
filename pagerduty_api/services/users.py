from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pagerduty_api.models import PagerDutyModel, User
from pagerduty_api.query import add_options
from pagerduty_api.services.base import Service

if TYPE_CHECKING:
    from pagerduty_api.client import Response
    from pagerduty_api.options import GetUserOptions, UserListOptions


class UserList(PagerDutyModel):
    users: list[User] = Field(default_factory=list)


class UserWrapper(PagerDutyModel):
    user: User | None = None


class UsersService(Service):
    def list(
        self, options: UserListOptions | None = None
    ) -> tuple[list[User], Response]:
        response, payload = self._api.get(
            add_options("users", options), UserList, api_method="users.list"
        )
        return (payload.users if payload else []), response

    def get(
        self, id: str, options: GetUserOptions | None = None
    ) -> tuple[User | None, Response]:
        """Get a user, optionally with contact methods and notification rules."""
        response, payload = self._api.get(
            add_options(f"users/{id}", options), UserWrapper, api_method="users.get"
        )
        return (payload.user if payload else None), response
