"""Error hierarchy for the Kitsu client.

All client errors extend KitsuError. Errors are raised to the caller, never
logged or retried here. Whenever a response exists it is attached to the
error so the caller can inspect status and headers without a second call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from kitsu.models.documents import APIError, ErrorDocument

if TYPE_CHECKING:
    from kitsu.models.responses import Response


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class KitsuError(Exception):
    """Base error for all Kitsu client errors."""

    message: str = "Kitsu client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(KitsuError):
    """Connection, DNS, timeout or read failure. No response is available."""

    message = "Transport failure"


class MalformedRequestError(KitsuError):
    """The request could not be built; nothing was sent."""

    message = "Malformed request"


class MalformedPathError(MalformedRequestError):
    """The request path could not be parsed as a URL."""

    message = "Malformed request path"


class SerializationError(MalformedRequestError):
    """The request body could not be encoded."""

    message = "Request body could not be serialized"


class PayloadDecodingError(KitsuError):
    """The response body did not match the expected JSON:API document."""

    message = "Response payload could not be decoded"

    def __init__(
        self,
        message: str | None = None,
        response: Response | None = None,
        **kwargs: object,
    ) -> None:
        self.response = response
        super().__init__(message, **kwargs)


class ErrorResponse(KitsuError):
    """The API answered with a non-2xx status.

    Carries the wrapped response and the decoded ``errors`` entries, which
    are empty when the body held no parseable error document.
    """

    message = "API error response"

    def __init__(self, response: Response, errors: list[APIError] | None = None) -> None:
        self.response = response
        self.errors = list(errors or [])
        super().__init__(self._render())

    def _render(self) -> str:
        request = self.response.request
        return (
            f"{request.method} {request.url}: "
            f"{self.response.status_code} [{', '.join(str(e) for e in self.errors)}]"
        )

    def __str__(self) -> str:
        return self._render()


# ---------------------------------------------------------------------------
# Status check
# ---------------------------------------------------------------------------


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def decode_errors(body: bytes) -> list[APIError]:
    """Parse a JSON:API error document, returning [] if it is not one."""
    if not body:
        return []
    try:
        return ErrorDocument.model_validate_json(body).errors
    except ValueError:
        # ValidationError, or UnicodeDecodeError for bodies that are not UTF-8.
        return []


def check_response(response: Response) -> None:
    """Raise ErrorResponse if the response status is outside 200-299.

    The body must already have been read.
    """
    if is_success(response.status_code):
        return
    try:
        body = response.content
    except httpx.ResponseNotRead:
        body = b""
    raise ErrorResponse(response, decode_errors(body))
