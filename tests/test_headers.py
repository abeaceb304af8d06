"""Tests for wren.http.headers — immutable, case-insensitive Headers."""

import pytest

from wren.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_getitem(self) -> None:
        h = _h(("User-Agent", "curl/8.0"))
        assert h["User-Agent"] == "curl/8.0"

    def test_case_insensitive(self) -> None:
        h = _h(("Accept-Encoding", "gzip"))
        assert h["accept-encoding"] == "gzip"
        assert h["ACCEPT-ENCODING"] == "gzip"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "Accept" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = _h(("Accept", "*/*"))
        assert 42 not in h  # type: ignore[operator]

    def test_len_deduplicates(self) -> None:
        h = _h(("X-Tag", "a"), ("X-Tag", "b"), ("Host", "localhost"))
        assert len(h) == 2

    def test_iter_yields_unique_lowercase_keys(self) -> None:
        h = _h(("Accept", "*/*"), ("Content-Type", "text/plain"), ("Accept", "text/xml"))
        assert list(h) == ["accept", "content-type"]

    def test_get_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("accept") == "*/*"
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        h = _h(("X-Tag", "a"), ("X-Tag", "b"), ("Accept", "*/*"))
        assert h.get_list("x-tag") == ["a", "b"]
        assert h.get_list("X-Missing") == []

    def test_first_value_wins(self) -> None:
        h = _h(("X-Tag", "a"), ("X-Tag", "b"))
        assert h["x-tag"] == "a"

    def test_raw_property(self) -> None:
        raw = ((b"a", b"1"), (b"b", b"2"))
        assert Headers(raw).raw is raw

    def test_empty_headers(self) -> None:
        h = Headers()
        assert len(h) == 0
        assert list(h) == []

    def test_repr(self) -> None:
        assert "accept" in repr(_h(("Accept", "*/*")))
