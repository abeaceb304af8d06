"""Content-encoding negotiation and body compression.

Supports the two stream-compression schemes every HTTP client knows:
``gzip`` (RFC 1952) and ``deflate`` (the zlib stream of RFC 1950, which
is what RFC 9110 means by the token).
"""

import gzip
import zlib

# Checked in this order only when the client lists several equally.
SUPPORTED_ENCODINGS: tuple[str, ...] = ("gzip", "deflate")


def select_encoding(accept_encoding: str | None) -> str:
    """Pick the content encoding for a response.

    Splits the ``Accept-Encoding`` value on commas, trims each token,
    drops any ``;q=`` parameter, and returns the first token in the
    client's order that the server supports. Returns ``""`` when
    nothing matches.

    ``"identity, gzip"`` -> ``"gzip"``; ``"deflate, gzip"`` -> ``"deflate"``.
    """
    if not accept_encoding:
        return ""
    for token in accept_encoding.split(","):
        scheme = token.split(";", 1)[0].strip().lower()
        if scheme in SUPPORTED_ENCODINGS:
            return scheme
    return ""


def is_supported(content_encoding: str) -> bool:
    return content_encoding in SUPPORTED_ENCODINGS


def compress(body: bytes, content_encoding: str) -> bytes:
    """Compress *body* with *content_encoding*.

    Raises ``ValueError`` for an unsupported scheme.
    """
    if content_encoding == "gzip":
        return gzip.compress(body)
    if content_encoding == "deflate":
        return zlib.compress(body)
    msg = f"Unsupported content encoding {content_encoding!r}"
    raise ValueError(msg)
