"""Anime endpoints of the Kitsu API."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from kitsu.models.resource import Anime
from kitsu.models.responses import Response
from kitsu.options import UrlOption

if TYPE_CHECKING:
    from kitsu.client import Client


class AnimeService:
    """Handles communication with the anime related methods of the Kitsu API.

    API docs: https://kitsu.docs.apiary.io/#reference/media/anime
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def show(self, anime_id: str, *opts: UrlOption | None) -> tuple[Anime, Response]:
        request = self._client.new_request("GET", f"anime/{anime_id}", *opts)
        anime, response = self._client.do(request, Anime)
        return cast(Anime, anime), response

    def list(self, *opts: UrlOption | None) -> tuple[list[Anime], Response]:
        """Return a page of anime. Use search() for text queries."""
        request = self._client.new_request("GET", "anime", *opts)
        return self._client.do_many(request, Anime)
