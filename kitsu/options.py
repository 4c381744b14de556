"""URL options for Kitsu API requests.

An option is a function that sets one or more query parameters on the
parameter map of a request. Options are applied in the order given and a
later option overwrites any key an earlier one set. Nothing is validated
locally: a bad filter or sort attribute comes back as an API error.

    client.users.list(filter_("name", "vikhyat"), sort("-followersCount"), limit(2))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field

Params = dict[str, str]
UrlOption = Callable[[Params], None]


def apply_options(params: Params, opts: Iterable[UrlOption | None]) -> Params:
    """Apply options to params in order, skipping None. Returns params."""
    for opt in opts:
        if opt is not None:
            opt(params)
    return params


def pagination(limit: int, offset: int) -> UrlOption:
    """Request one page of results with the given size and starting offset."""

    def _apply(params: Params) -> None:
        params["page[limit]"] = str(limit)
        params["page[offset]"] = str(offset)

    return _apply


def limit(n: int) -> UrlOption:
    """Limit the number of results. Combine with offset() to page through."""

    def _apply(params: Params) -> None:
        params["page[limit]"] = str(n)

    return _apply


def offset(n: int) -> UrlOption:
    def _apply(params: Params) -> None:
        params["page[offset]"] = str(n)

    return _apply


def filter_(attribute: str, *values: str) -> UrlOption:
    """Match resources on an attribute or relationship.

    Several values are OR-ed by the API::

        filter_("genres", "action", "drama")
    """

    def _apply(params: Params) -> None:
        params[f"filter[{attribute}]"] = ",".join(values)

    return _apply


def search(text: str) -> UrlOption:
    """Free-text search on media."""

    def _apply(params: Params) -> None:
        params["filter[text]"] = text

    return _apply


def sort(*attributes: str) -> UrlOption:
    """Sort by one or more attributes, ascending unless prefixed with ``-``::

        sort("followersCount", "-followingCount")
    """

    def _apply(params: Params) -> None:
        params["sort"] = ",".join(attributes)

    return _apply


def include(*relationships: str) -> UrlOption:
    """Side-load related resources, using dots for nested relationships::

        include("castings.character", "castings.person")
    """

    def _apply(params: Params) -> None:
        params["include"] = ",".join(relationships)

    return _apply


class ListOptions(BaseModel):
    """Bundle of the common list parameters, usable as a single option.

    Only the fields that were given produce query parameters.
    """

    model_config = ConfigDict(frozen=True)

    page_limit: int | None = Field(default=None, ge=0)
    page_offset: int | None = Field(default=None, ge=0)
    filter: str | None = None
    filter_values: list[str] = []
    sort: list[str] = []
    include: list[str] = []

    def options(self) -> list[UrlOption]:
        opts: list[UrlOption] = []
        if self.page_limit is not None:
            opts.append(limit(self.page_limit))
        if self.page_offset is not None:
            opts.append(offset(self.page_offset))
        if self.filter:
            opts.append(filter_(self.filter, *self.filter_values))
        if self.sort:
            opts.append(sort(*self.sort))
        if self.include:
            opts.append(include(*self.include))
        return opts

    def __call__(self, params: Params) -> None:
        apply_options(params, self.options())
