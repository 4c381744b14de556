"""Kitsu API response wrapper.

Wraps the ``httpx.Response`` returned for a request and adds the pagination
offsets found in the ``links`` of collection documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class Response:
    """An API response with pagination offsets.

    Attributes not defined here (``status_code``, ``headers``, ``request``,
    ``content``...) are read from the wrapped ``httpx.Response``. Offsets are
    0 for single-resource responses and for any link role the API omitted.
    """

    http_response: httpx.Response
    first_offset: int = 0
    prev_offset: int = 0
    next_offset: int = 0
    last_offset: int = 0

    def __getattr__(self, name: str) -> Any:
        # Only reached for names missing on the dataclass itself.
        if name == "http_response":
            raise AttributeError(name)
        return getattr(self.http_response, name)
