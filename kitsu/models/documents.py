"""JSON:API document envelopes as consumed from the Kitsu API.

These models describe the raw wire shape (``data`` / ``included`` /
``links`` / ``errors``) before resource objects are flattened into the
typed models in :mod:`kitsu.models.resource`.

Reference: https://jsonapi.org/format/
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ResourceIdentifier(BaseModel):
    """Relationship linkage: just enough to find a resource in ``included``."""

    model_config = ConfigDict(extra="ignore")

    type: str
    id: str


class Relationship(BaseModel):
    """A relationship object; ``data`` is absent when only links are sent."""

    model_config = ConfigDict(extra="ignore")

    data: ResourceIdentifier | list[ResourceIdentifier] | None = None


class ResourceObject(BaseModel):
    """A single JSON:API resource object with type, id, and attributes."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str = ""
    attributes: dict[str, Any] = {}
    relationships: dict[str, Relationship] = {}
    links: dict[str, Any] = {}


class Links(BaseModel):
    """Top-level pagination links of a collection document."""

    model_config = ConfigDict(extra="ignore")

    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None

    @field_validator("first", "prev", "next", "last", mode="before")
    @classmethod
    def _links_are_strings(cls, value: Any) -> str | None:
        # Link objects ({"href": ...}) carry no offset we read.
        return value if isinstance(value, str) else None


class SingleDocument(BaseModel):
    """JSON:API document containing a single primary resource."""

    data: ResourceObject
    included: list[ResourceObject] = []


class CollectionDocument(BaseModel):
    """JSON:API document containing a list of primary resources."""

    data: list[ResourceObject]
    included: list[ResourceObject] = []
    links: Links | None = None
    meta: dict[str, Any] | None = None


class APIError(BaseModel):
    """One entry of a JSON:API ``errors`` array.

    Kitsu sends every member as a string, ``status`` included.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str = ""
    detail: str = ""
    code: str = ""
    status: str = ""

    @field_validator("title", "detail", "code", "status", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def __str__(self) -> str:
        return f"{self.status}: error {self.code}: {self.title}({self.detail})"


class ErrorDocument(BaseModel):
    """JSON:API document containing a list of errors."""

    errors: list[APIError] = []
