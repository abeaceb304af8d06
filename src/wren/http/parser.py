"""Request reading on top of httptools.

httptools does the request-line and header parsing; this module feeds it
bytes from an anyio stream until one message is complete and turns the
collected pieces into a frozen ``Request``.
"""

from urllib.parse import unquote

import anyio
import httptools
from anyio.abc import ByteReceiveStream

from wren.errors import RequestParseError, RequestTooLarge
from wren.http.headers import Headers
from wren.http.request import Request
from wren.routing.router import split_path

RECV_BUFFER_SIZE = 64 * 1024
DOT_SEGMENTS = frozenset({".", ".."})


class _RequestCollector:
    """httptools callback target. Accumulates one request."""

    __slots__ = ("body", "complete", "headers", "http_version", "method", "parser", "url")

    def __init__(self) -> None:
        self.parser: httptools.HttpRequestParser | None = None
        self.method = b""
        self.http_version = ""
        self.url = b""
        self.headers: list[tuple[bytes, bytes]] = []
        self.body = bytearray()
        self.complete = False

    def on_url(self, url: bytes) -> None:
        # may arrive in pieces when the request line spans reads
        if not self.complete:
            self.url += url

    def on_header(self, name: bytes, value: bytes) -> None:
        if not self.complete:
            self.headers.append((name, value))

    def on_headers_complete(self) -> None:
        # the parser moves on to any following message, so capture these now
        if not self.complete and self.parser is not None:
            self.method = self.parser.get_method()
            self.http_version = self.parser.get_http_version()

    def on_body(self, body: bytes) -> None:
        if not self.complete:
            self.body += body

    def on_message_complete(self) -> None:
        self.complete = True


async def read_request(
    stream: ByteReceiveStream,
    *,
    max_size: int,
    client: tuple[str, int] | None = None,
) -> Request:
    """Read and parse exactly one request from *stream*.

    Reads in chunks until httptools reports the message complete.
    Bytes after the first message are ignored (no pipelining).

    Raises:
        RequestParseError: malformed bytes, a dot-segment path, or the
            peer closing the stream before the request was complete.
        RequestTooLarge: more than *max_size* bytes arrived before the
            message completed.
    """
    collector = _RequestCollector()
    parser = httptools.HttpRequestParser(collector)
    collector.parser = parser
    received = 0

    while not collector.complete:
        try:
            data = await stream.receive(RECV_BUFFER_SIZE)
        except anyio.EndOfStream:
            msg = "connection closed before the request was complete"
            raise RequestParseError(msg) from None
        except (anyio.BrokenResourceError, OSError) as exc:
            raise RequestParseError(f"read failed: {exc}") from exc

        received += len(data)
        if received > max_size:
            raise RequestTooLarge(f"request exceeded {max_size} bytes")

        try:
            parser.feed_data(data)
        except httptools.HttpParserUpgrade:
            # Upgrade and CONNECT are not supported; the message itself parsed.
            break
        except httptools.HttpParserError as exc:
            if collector.complete:
                # trailing bytes after the first message
                break
            raise RequestParseError(str(exc)) from exc

    return _build_request(collector, client)


def _build_request(
    collector: _RequestCollector,
    client: tuple[str, int] | None,
) -> Request:
    target = collector.url.decode("latin-1")
    try:
        url = httptools.parse_url(collector.url)
    except httptools.HttpParserInvalidURLError as exc:
        raise RequestParseError(f"invalid request target {target!r}") from exc

    path = (url.path or b"/").decode("latin-1")
    query = (url.query or b"").decode("latin-1")

    if any(unquote(part) in DOT_SEGMENTS for part in split_path(path)):
        raise RequestParseError(f"dot-segment in request path {path!r}")

    return Request(
        method=collector.method.decode("ascii"),
        target=target,
        path=path,
        query=query,
        http_version=collector.http_version,
        headers=Headers(tuple(collector.headers)),
        body=bytes(collector.body),
        client=client,
    )
