"""Error-to-response mapping for the connection pipeline.

Every recoverable failure ends up as a plain-text ``ResponseEntity``;
nothing here raises.
"""

import logging

from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import ResponseEntity

INTERNAL_ERROR_DETAIL = "unexpected error occurred"


def not_found(path: str) -> ResponseEntity:
    """404 for a path no route matched."""
    return ResponseEntity.plain(404, f"the requested resource {path} is not supported")


def handle_http_error(exc: HTTPError, logger: logging.Logger) -> ResponseEntity:
    """Map an ``HTTPError`` to a response carrying its status and detail."""
    reason = getattr(exc, "reason", "") or exc.detail
    logger.debug("%d %s", exc.status, reason)
    try:
        return ResponseEntity.plain(exc.status, exc.detail or str(exc.status))
    except ValueError:
        logger.error("HTTPError with non-standard status %d, sending 500", exc.status)
        return ResponseEntity.plain(500, INTERNAL_ERROR_DETAIL)


def handle_internal_error(exc: Exception, request: Request, logger: logging.Logger) -> ResponseEntity:
    """Handle unexpected handler exceptions as 500 errors."""
    logger.exception("500 %s %s: %s", request.method, request.path, exc)
    return ResponseEntity.plain(500, INTERNAL_ERROR_DETAIL)
