"""Typed Kitsu resources.

Every resource carries the JSON:API envelope fields (``id``, ``type`` and
the ``self`` link) through :class:`Resource`. Attributes are snake_case in
Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Link(BaseModel):
    """Links of a resource object. Kitsu only sends ``self``, as a string."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    self_link: str = Field(default="", alias="self")

    @field_validator("self_link", mode="before")
    @classmethod
    def _link_is_string(cls, value: Any) -> str:
        # Link objects ({"href": ...}) and null are read as no link.
        return value if isinstance(value, str) else ""


class Resource(BaseModel):
    """Fields shared by every Kitsu resource kind.

    ``type`` and ``links`` may be absent from a payload and default to empty.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    type: str = ""
    links: Link = Link()


class Anime(Resource):
    """An anime entry of the media catalog."""

    slug: str | None = None
    synopsis: str | None = None
    canonical_title: str | None = None
    average_rating: str | None = None
    episode_count: int | None = None
    subtype: str | None = None
    status: str | None = None
    age_rating: str | None = None


class LibraryEntry(Resource):
    """A user's progress on a media item."""

    status: str | None = None
    progress: int | None = None
    rating_twenty: int | None = None
    anime: Anime | None = None


class User(Resource):
    """A Kitsu user profile."""

    name: str | None = None
    slug: str | None = None
    about: str | None = None
    location: str | None = None
    life_spent_on_anime: int | None = None
    followers_count: int | None = None
    following_count: int | None = None
    library_entries: list[LibraryEntry] | None = None


LibraryEntry.model_rebuild()
User.model_rebuild()
