"""Unit tests for the error hierarchy and the status check."""

from __future__ import annotations

import httpx
import pytest

from kitsu.errors import (
    ErrorResponse,
    KitsuError,
    MalformedPathError,
    MalformedRequestError,
    PayloadDecodingError,
    SerializationError,
    TransportError,
    check_response,
    decode_errors,
    is_success,
)
from kitsu.models.documents import APIError
from kitsu.models.responses import Response


def _response(status: int, content: bytes = b"") -> Response:
    return Response(
        httpx.Response(
            status,
            content=content,
            request=httpx.Request("GET", "https://kitsu.io/api/edge/anime/1"),
        )
    )


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [TransportError, MalformedPathError, SerializationError, PayloadDecodingError],
    )
    def test_all_errors_are_kitsu_errors(self, cls: type[KitsuError]):
        assert issubclass(cls, KitsuError)

    def test_request_building_errors_share_a_base(self):
        assert issubclass(MalformedPathError, MalformedRequestError)
        assert issubclass(SerializationError, MalformedRequestError)

    def test_default_and_custom_messages(self):
        assert str(TransportError()) == "Transport failure"
        err = MalformedPathError("bad path", path="%zz")
        assert err.message == "bad path"
        assert err.details == {"path": "%zz"}


class TestAPIError:
    def test_rendering(self):
        err = APIError(title="Record not found", detail="gone", code="404", status="404")
        assert str(err) == "404: error 404: Record not found(gone)"

    def test_numeric_status_is_coerced(self):
        assert APIError.model_validate({"status": 422}).status == "422"

    def test_missing_members_default_to_empty(self):
        assert APIError.model_validate({"title": "Oops"}) == APIError(title="Oops")

    def test_null_members_are_empty(self):
        err = APIError.model_validate({"title": "t", "detail": None, "code": None, "status": "404"})
        assert err == APIError(title="t", status="404")


class TestDecodeErrors:
    def test_error_document(self):
        body = b'{"errors":[{"title":"A","status":"400"},{"title":"B","status":"400"}]}'
        assert [e.title for e in decode_errors(body)] == ["A", "B"]

    def test_null_member_keeps_sibling_entries(self):
        body = (
            b'{"errors":[{"title":"t","detail":null,"code":"404","status":"404"},'
            b'{"title":"x"}]}'
        )
        errors = decode_errors(body)

        assert [e.title for e in errors] == ["t", "x"]
        assert str(errors[0]) == "404: error 404: t()"

    @pytest.mark.parametrize("body", [b"", b"null", b"[]", b"Internal Server Error", b'{"errors":{}}'])
    def test_anything_else_is_empty(self, body: bytes):
        assert decode_errors(body) == []


class TestCheckResponse:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_statuses(self, status: int):
        assert is_success(status)
        check_response(_response(status))

    @pytest.mark.parametrize("status", [100, 301, 400, 404, 500, 503])
    def test_failure_statuses(self, status: int):
        assert not is_success(status)
        with pytest.raises(ErrorResponse) as exc_info:
            check_response(_response(status))
        assert exc_info.value.response.status_code == status

    def test_error_response_without_entries_renders(self):
        with pytest.raises(ErrorResponse) as exc_info:
            check_response(_response(500, b"Internal Server Error"))
        assert str(exc_info.value) == "GET https://kitsu.io/api/edge/anime/1: 500 []"
