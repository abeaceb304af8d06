"""Immutable HTTP request.

Everything is read off the socket before the request exists, so the
body is plain bytes, not an async stream.
"""

from dataclasses import dataclass

from wren.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """A fully received HTTP/1.1 request.

    ``target`` is the raw request-target from the request line; ``path``
    and ``query`` are split out of it (``path`` still percent-encoded,
    the router decodes per segment).
    """

    method: str
    target: str
    path: str
    query: str
    http_version: str
    headers: Headers
    body: bytes = b""
    client: tuple[str, int] | None = None

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def content_length(self) -> int | None:
        """The Content-Length header as int."""
        value = self.headers.get("content-length")
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def user_agent(self) -> str:
        """The User-Agent header, or ``""`` when the client sent none."""
        return self.headers.get("user-agent", "") or ""

    @property
    def accept_encoding(self) -> str:
        """The raw Accept-Encoding header, or ``""``."""
        return self.headers.get("accept-encoding", "") or ""

    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8")
