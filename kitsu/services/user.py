"""User endpoints of the Kitsu API."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from kitsu.models.resource import User
from kitsu.models.responses import Response
from kitsu.options import UrlOption

if TYPE_CHECKING:
    from kitsu.client import Client


class UserService:
    """Handles communication with the user related methods of the Kitsu API.

    API docs: https://kitsu.docs.apiary.io/#reference/users/users
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def show(self, user_id: str, *opts: UrlOption | None) -> tuple[User, Response]:
        """Return details for a specific user by providing the user's ID."""
        request = self._client.new_request("GET", f"users/{user_id}", *opts)
        user, response = self._client.do(request, User)
        return cast(User, user), response

    def list(self, *opts: UrlOption | None) -> tuple[list[User], Response]:
        """Return a page of users, shaped by options such as filter_ or ListOptions."""
        request = self._client.new_request("GET", "users", *opts)
        return self._client.do_many(request, User)
