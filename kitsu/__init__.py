"""Client for the Kitsu JSON:API (https://kitsu.io/api/edge/)."""

from kitsu.client import Client
from kitsu.errors import (
    ErrorResponse,
    KitsuError,
    MalformedPathError,
    MalformedRequestError,
    PayloadDecodingError,
    SerializationError,
    TransportError,
)
from kitsu.models import APIError, Anime, LibraryEntry, Resource, Response, User
from kitsu.options import (
    ListOptions,
    filter_,
    include,
    limit,
    offset,
    pagination,
    search,
    sort,
)

__all__ = [
    "APIError",
    "Anime",
    "Client",
    "ErrorResponse",
    "KitsuError",
    "LibraryEntry",
    "ListOptions",
    "MalformedPathError",
    "MalformedRequestError",
    "PayloadDecodingError",
    "Resource",
    "Response",
    "SerializationError",
    "TransportError",
    "User",
    "filter_",
    "include",
    "limit",
    "offset",
    "pagination",
    "search",
    "sort",
]
