"""Connection handler — one accepted connection, one request, one response.

The only component that touches an accepted stream. Reads a request,
routes it, dispatches to the handler, writes the serialized response, and
closes the stream on every exit path.
"""

import anyio
from anyio.abc import ByteStream, SocketAttribute

from wren._internal.invoke import invoke
from wren.errors import HTTPError, RequestTimeout
from wren.http.parser import read_request
from wren.http.request import Request
from wren.http.response import ResponseEntity
from wren.server.context import ServerContext
from wren.server.errors import (
    INTERNAL_ERROR_DETAIL,
    handle_http_error,
    handle_internal_error,
    not_found,
)
from wren.server.sender import send_response


async def handle_connection(stream: ByteStream, ctx: ServerContext) -> None:
    """Serve exactly one request on *stream*, then close it."""
    logger = ctx.logger
    client = _peer(stream)
    request: Request | None = None

    async with stream:
        entity: ResponseEntity | None = None
        try:
            with anyio.fail_after(ctx.config.read_timeout):
                # parse errors are mapped here so only TimeoutError leaves the scope
                try:
                    request = await read_request(
                        stream,
                        max_size=ctx.config.max_request_size,
                        client=client,
                    )
                except HTTPError as exc:
                    reason = getattr(exc, "reason", "") or exc.detail
                    logger.warning(
                        "error reading request from %s: %s", _format_peer(client), reason
                    )
                    entity = handle_http_error(exc, logger)
        except TimeoutError:
            logger.warning("timed out reading request from %s", _format_peer(client))
            entity = handle_http_error(RequestTimeout(), logger)

        if entity is None:
            entity = await dispatch(request, ctx)

        written = await send_response(entity, stream, logger)

    request_line = f"{request.method} {request.target}" if request else "-"
    logger.info(
        '%s "%s" %d %s',
        _format_peer(client),
        request_line,
        entity.status,
        written if written is not None else "-",
    )


async def dispatch(request: Request, ctx: ServerContext) -> ResponseEntity:
    """Route *request* and call the matched handler.

    Never raises: a miss becomes a 404, an ``HTTPError`` from the handler
    keeps its status, and anything else becomes a 500.
    """
    match = ctx.router.match(request.method, request.path)
    if match is None:
        ctx.logger.info("no handler found for %s %s", request.method, request.path)
        return not_found(request.path)

    try:
        entity = await invoke(match.route.handler, request, match.path_params)
    except HTTPError as exc:
        return handle_http_error(exc, ctx.logger)
    except Exception as exc:
        return handle_internal_error(exc, request, ctx.logger)

    if not isinstance(entity, ResponseEntity):
        ctx.logger.error(
            "handler for %s %s returned %s, not ResponseEntity",
            match.route.method,
            match.route.pattern,
            type(entity).__name__,
        )
        return ResponseEntity.plain(500, INTERNAL_ERROR_DETAIL)
    return entity


def _peer(stream: ByteStream) -> tuple[str, int] | None:
    address = stream.extra(SocketAttribute.remote_address, None)
    if isinstance(address, tuple) and len(address) >= 2:
        return (str(address[0]), int(address[1]))
    return None


def _format_peer(client: tuple[str, int] | None) -> str:
    if client is None:
        return "-"
    return f"{client[0]}:{client[1]}"
