"""HTTP response entity with chainable .with_*() transformation API.

A ``ResponseEntity`` is what every handler returns: status, content type,
optional content encoding, and body. Each transformation returns a new
entity. The builder turns it into wire bytes exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus

TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"


def reason_phrase(status: int) -> str:
    """Standard reason phrase for *status*.

    Raises ``ValueError`` for a code outside the standard table.
    """
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        msg = f"Unknown HTTP status code {status}"
        raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class ResponseEntity:
    """A transient response built by a handler.

    Construction fails fast on a status code with no standard reason
    phrase, so a bad code never reaches the socket.
    """

    status: int = 200
    content_type: str = TEXT_PLAIN
    content_encoding: str = ""
    body: str | bytes = b""

    def __post_init__(self) -> None:
        reason_phrase(self.status)

    # -- Chainable transformations --

    def with_status(self, status: int) -> ResponseEntity:
        """Return a new entity with a different status code."""
        return replace(self, status=status)

    def with_content_type(self, content_type: str) -> ResponseEntity:
        """Return a new entity with a different content type."""
        return replace(self, content_type=content_type)

    def with_content_encoding(self, content_encoding: str) -> ResponseEntity:
        """Return a new entity that asks the builder to compress its body."""
        return replace(self, content_encoding=content_encoding)

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    # -- Constructors --

    @classmethod
    def plain(cls, status: int, body: str | bytes = "") -> ResponseEntity:
        """A ``text/plain`` entity."""
        return cls(status=status, content_type=TEXT_PLAIN, body=body)

    @classmethod
    def octets(cls, status: int, body: bytes = b"") -> ResponseEntity:
        """An ``application/octet-stream`` entity."""
        return cls(status=status, content_type=OCTET_STREAM, body=body)
