"""Wren exception hierarchy.

Shared across Router, parser, handlers, and the connection pipeline so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when server configuration or route registration is invalid.

    Always surfaces at startup, never while serving a request.
    """


# Not frozen: raising sets __traceback__ and __context__ on the instance.
@dataclass(eq=False)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Raised by the parser or by handlers. The connection handler catches
    these and turns them into a plain-text response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — the request could not be understood."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route or resource for the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class RequestTimeout(HTTPError):  # noqa: N818
    """408 — the client did not finish sending the request in time."""

    def __init__(self, detail: str = "request timed out") -> None:
        super().__init__(status=408, detail=detail)


class RequestTooLarge(HTTPError):  # noqa: N818
    """413 — the request exceeded ``ServerConfig.max_request_size``."""

    def __init__(self, detail: str = "request too large") -> None:
        super().__init__(status=413, detail=detail)


class RequestParseError(BadRequest):
    """The request bytes could not be parsed into a ``Request``.

    ``reason`` carries the parser's explanation for logging; the client
    only ever sees the generic detail.
    """

    def __init__(self, reason: str = "", detail: str = "could not read request") -> None:
        super().__init__(detail=detail)
        self.reason = reason
