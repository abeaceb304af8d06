"""Tests for wren.errors — the exception hierarchy."""

from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from wren.errors import (
    BadRequest,
    ConfigurationError,
    HTTPError,
    NotFound,
    RequestParseError,
    RequestTimeout,
    RequestTooLarge,
    WrenError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, HTTPError, BadRequest, NotFound, RequestParseError],
    )
    def test_all_are_wren_errors(self, cls: type) -> None:
        assert issubclass(cls, WrenError)

    def test_parse_error_is_bad_request(self) -> None:
        assert issubclass(RequestParseError, BadRequest)

    def test_configuration_error_is_not_http(self) -> None:
        assert not issubclass(ConfigurationError, HTTPError)


class TestStatuses:
    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (BadRequest(), 400),
            (NotFound(), 404),
            (RequestTimeout(), 408),
            (RequestTooLarge(), 413),
            (RequestParseError(), 400),
        ],
    )
    def test_status(self, exc: HTTPError, status: int) -> None:
        assert exc.status == status

    def test_default_details(self) -> None:
        assert RequestTimeout().detail == "request timed out"
        assert RequestTooLarge().detail == "request too large"
        assert RequestParseError().detail == "could not read request"


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=418, detail="teapot")) == "418: teapot"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_raisable(self) -> None:
        with pytest.raises(NotFound) as exc_info:
            raise NotFound("no such thing")
        assert exc_info.value.detail == "no such thing"


class TestRequestParseError:
    def test_reason_kept_apart_from_detail(self) -> None:
        exc = RequestParseError("invalid method")
        assert exc.reason == "invalid method"
        assert exc.detail == "could not read request"

    def test_reason_defaults_empty(self) -> None:
        assert RequestParseError().reason == ""


class TestRaisingThroughContextManagers:
    @pytest.mark.parametrize(
        "exc",
        [HTTPError(status=418, detail="teapot"), RequestParseError("bad"), RequestTooLarge()],
    )
    def test_propagates_unchanged(self, exc: HTTPError) -> None:
        @contextmanager
        def scope() -> Iterator[None]:
            yield

        with pytest.raises(type(exc)) as exc_info:
            with scope():
                raise exc
        assert exc_info.value is exc
        assert exc_info.value.__traceback__ is not None
