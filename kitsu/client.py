"""Kitsu API client.

Builds requests against the versioned API URL, sends them through an
``httpx.Client`` and decodes JSON:API responses into typed resources.

Every call is one blocking round trip with no retries. Errors are raised to
the caller with the wrapped response attached whenever one was received:

- TransportError: connection, DNS, timeout or read failure (no response).
- MalformedPathError / SerializationError: the request was never sent.
- ErrorResponse: the API answered outside 200-299.
- PayloadDecodingError: a 2xx body was not the expected JSON:API document.
"""

from __future__ import annotations

import dataclasses
import logging
import re
import time
from typing import Any, TypeVar
from urllib.parse import SplitResult, parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import httpx

from kitsu.codec import encode_body, unmarshal_many_payload, unmarshal_payload
from kitsu.config.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_MEDIA_TYPE,
    KitsuSettings,
)
from kitsu.errors import (
    MalformedPathError,
    PayloadDecodingError,
    SerializationError,
    TransportError,
    check_response,
    is_success,
)
from kitsu.models.resource import Resource
from kitsu.models.responses import Response
from kitsu.options import Params, UrlOption, apply_options
from kitsu.pagination import parse_offsets
from kitsu.services.anime import AnimeService
from kitsu.services.user import UserService

logger = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT", bound=Resource)

DEFAULT_API_URL = urljoin(DEFAULT_BASE_URL, DEFAULT_API_VERSION)
DEFAULT_TIMEOUT_SECONDS = 10.0

# Percent signs not followed by two hex digits, and ASCII control characters.
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def encode_query(params: Params) -> str:
    """Encode query parameters sorted by key, keeping brackets and commas literal."""
    return urlencode(sorted(params.items()), safe="[],")


def _split_path(path: str) -> SplitResult:
    if _CONTROL_CHARS.search(path) or _BAD_ESCAPE.search(path):
        raise MalformedPathError(f"Invalid request path: {path!r}", path=path)
    try:
        parts = urlsplit(path)
        parts.port  # raises ValueError on a bad port
    except ValueError as exc:
        raise MalformedPathError(f"Invalid request path: {path!r}", path=path) from exc
    return parts


class Client:
    """Manages communication with the Kitsu API.

    Parameters
    ----------
    http_client:
        Transport used for every request. A client with a 10 second timeout
        is created (and owned) when omitted.
    base_url:
        URL that request paths are resolved against. Defaults to
        ``https://kitsu.io/api/edge/``; it must end with a slash.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_url: str = DEFAULT_API_URL,
    ) -> None:
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=DEFAULT_TIMEOUT_SECONDS)
        self.base_url = base_url

        self.anime = AnimeService(self)
        self.users = UserService(self)

    @classmethod
    def from_settings(cls, settings: KitsuSettings | None = None) -> Client:
        """Build a client (and its own httpx transport) from KitsuSettings.

        ``settings.log_level`` is applied to the ``kitsu`` logger; handlers
        are left to the application (see :func:`kitsu.logging_config.configure_logging`).
        """
        settings = settings or KitsuSettings()
        logging.getLogger("kitsu").setLevel(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        )
        http_client = httpx.Client(
            timeout=httpx.Timeout(settings.timeout_seconds),
            headers={"User-Agent": settings.user_agent},
        )
        client = cls(http_client, base_url=settings.api_url)
        client._owns_http = True
        return client

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def new_request(
        self,
        method: str,
        path: str,
        *opts: UrlOption | None,
        body: Any = None,
    ) -> httpx.Request:
        """Create an API request.

        ``path`` is resolved relative to ``base_url`` and should never start
        with a slash: under standard URL resolution a leading slash replaces
        the API version prefix, which is undefined for callers. Query
        parameters already in ``path`` are kept and may be overwritten by
        ``opts``. A non-None ``body`` is encoded as JSON:API.

        Raises
        ------
        MalformedPathError
            If ``path`` cannot be parsed as a URL.
        SerializationError
            If ``body`` cannot be encoded.
        """
        parts = _split_path(path)
        params: Params = dict(parse_qsl(parts.query, keep_blank_values=True))
        apply_options(params, opts)
        relative = urlunsplit(parts._replace(query=encode_query(params)))

        content: bytes | None = None
        headers = {"Accept": DEFAULT_MEDIA_TYPE}
        if body is not None:
            try:
                content = encode_body(body)
            except (TypeError, ValueError) as exc:
                raise SerializationError(
                    f"Cannot encode request body: {exc}", body_type=type(body).__name__
                ) from exc
            headers["Content-Type"] = DEFAULT_MEDIA_TYPE

        url = urljoin(self.base_url, relative)
        try:
            return self._http.build_request(method, url, content=content, headers=headers)
        except httpx.InvalidURL as exc:
            raise MalformedPathError(f"Invalid request URL: {url!r}", path=path) from exc

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _send(self, request: httpx.Request) -> Response:
        """Send the request, read and release the body, and check the status."""
        started = time.monotonic()
        try:
            http_response = self._http.send(request, stream=True)
            try:
                http_response.read()
            finally:
                http_response.close()
        except httpx.RequestError as exc:
            self._log_dispatch(request, started, error_reason=f"{type(exc).__name__}: {exc}")
            raise TransportError(
                f"{request.method} {request.url}: {exc}",
                method=request.method,
                url=str(request.url),
            ) from exc

        if is_success(http_response.status_code):
            self._log_dispatch(request, started, status_code=http_response.status_code)
        else:
            self._log_dispatch(
                request,
                started,
                status_code=http_response.status_code,
                error_reason=http_response.reason_phrase,
            )

        response = Response(http_response)
        check_response(response)
        return response

    @staticmethod
    def _log_dispatch(request: httpx.Request, started: float, **fields: object) -> None:
        duration_ms = round((time.monotonic() - started) * 1000, 1)
        outcome = fields.get("status_code", "failed")
        logger.debug(
            "%s %s -> %s (%.1fms)",
            request.method,
            request.url,
            outcome,
            duration_ms,
            extra={
                "method": request.method,
                "url": str(request.url),
                "duration_ms": duration_ms,
                **fields,
            },
        )

    def do(
        self,
        request: httpx.Request,
        model: type[ResourceT] | None = None,
    ) -> tuple[ResourceT | None, Response]:
        """Send a request and decode a single-resource document into ``model``.

        With no model the body is discarded and ``(None, response)`` returned.
        """
        response = self._send(request)
        if model is None:
            return None, response

        try:
            value = unmarshal_payload(response.content, model)
        except ValueError as exc:
            raise PayloadDecodingError(
                f"Cannot decode {model.__name__} from {request.method} {request.url}: {exc}",
                response=response,
            ) from exc
        return value, response

    def do_many(
        self,
        request: httpx.Request,
        model: type[ResourceT],
    ) -> tuple[list[ResourceT], Response]:
        """Send a request and decode a collection document into ``list[model]``.

        The returned response carries the pagination offsets of the
        document's ``first``/``prev``/``next``/``last`` links.
        """
        response = self._send(request)

        try:
            items, links = unmarshal_many_payload(response.content, model)
        except ValueError as exc:
            raise PayloadDecodingError(
                f"Cannot decode list of {model.__name__} from "
                f"{request.method} {request.url}: {exc}",
                response=response,
            ) from exc

        offsets = parse_offsets(links)
        return items, dataclasses.replace(
            response,
            first_offset=offsets.first,
            prev_offset=offsets.prev,
            next_offset=offsets.next,
            last_offset=offsets.last,
        )
