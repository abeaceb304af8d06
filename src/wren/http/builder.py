"""Response serialization — turns a response entity into wire bytes.

The whole response is built into one buffer so the connection handler
can deliver it with a single write.
"""

from wren.http.encoding import compress, is_supported
from wren.http.response import ResponseEntity, reason_phrase

HTTP_VERSION = "HTTP/1.1"
CRLF = b"\r\n"


def build_response(
    status: int,
    content_type: str,
    content_encoding: str,
    body: str | bytes,
) -> bytes:
    """Serialize a response.

    Layout::

        HTTP/1.1 <code> <reason>\\r\\n
        Content-Type: <type>\\r\\n
        [Content-Encoding: <scheme>\\r\\n]
        Content-Length: <n>\\r\\n
        \\r\\n
        <body>

    A recognised *content_encoding* compresses the body and
    ``Content-Length`` counts the compressed bytes. An empty or
    unrecognised one leaves the body untouched and emits no
    ``Content-Encoding`` header.

    Raises ``ValueError`` when *status* has no standard reason phrase.
    """
    payload = body.encode("utf-8") if isinstance(body, str) else body

    lines = [
        f"{HTTP_VERSION} {status} {reason_phrase(status)}",
        f"Content-Type: {content_type}",
    ]
    if content_encoding and is_supported(content_encoding):
        payload = compress(payload, content_encoding)
        lines.append(f"Content-Encoding: {content_encoding}")
    lines.append(f"Content-Length: {len(payload)}")

    head = CRLF.join(line.encode("latin-1") for line in lines)
    return head + CRLF + CRLF + payload


def serialize(entity: ResponseEntity) -> bytes:
    """Serialize a ``ResponseEntity`` with ``build_response``."""
    return build_response(
        entity.status,
        entity.content_type,
        entity.content_encoding,
        entity.body,
    )
