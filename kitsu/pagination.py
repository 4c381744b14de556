"""Pagination offsets from JSON:API collection links.

Kitsu paginates collections with ``page[limit]`` / ``page[offset]`` and
returns ``first``, ``prev``, ``next`` and ``last`` links. Any of them may be
missing, so every offset falls back to 0. A malformed link also gives 0:
pagination is best-effort metadata and never blocks returning data.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from kitsu.models.documents import Links

OFFSET_PARAM = "page[offset]"


@dataclass(frozen=True)
class Offsets:
    first: int = 0
    prev: int = 0
    next: int = 0
    last: int = 0


def offset_from_link(link: str | None) -> int:
    """Return the page[offset] value of a link URL, or 0."""
    if not link:
        return 0
    try:
        values = parse_qs(urlsplit(link).query).get(OFFSET_PARAM)
        if not values:
            return 0
        return int(values[0])
    except ValueError:
        return 0


def parse_offsets(links: Links | None) -> Offsets:
    if links is None:
        return Offsets()
    return Offsets(
        first=offset_from_link(links.first),
        prev=offset_from_link(links.prev),
        next=offset_from_link(links.next),
        last=offset_from_link(links.last),
    )
