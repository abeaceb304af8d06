"""Listener loop — binds once, then accepts forever.

Each accepted connection runs as its own task in a task group; the
accept loop never waits on anything but ``accept()``.
"""

import anyio
from anyio.abc import ByteStream, SocketAttribute, SocketListener, TaskGroup, TaskStatus

from wren.server.connection import handle_connection
from wren.server.context import ServerContext


async def serve(
    ctx: ServerContext,
    *,
    task_status: TaskStatus[int] = anyio.TASK_STATUS_IGNORED,
) -> None:
    """Bind the configured address and serve until cancelled.

    Bind failure is the one fatal error: it is logged and re-raised.
    Reports the bound port through *task_status*, so
    ``port = await tg.start(serve, ctx)`` works with ``port=0``.
    """
    config = ctx.config
    logger = ctx.logger

    try:
        listener = await anyio.create_tcp_listener(
            local_host=config.host,
            local_port=config.port,
        )
    except OSError as exc:
        logger.critical("could not listen on %s:%d: %s", config.host, config.port, exc)
        raise

    limiter = anyio.CapacityLimiter(config.max_connections) if config.max_connections else None

    async with listener, anyio.create_task_group() as tg:
        port = listener.extra(SocketAttribute.local_port)
        logger.info("listening on %s:%d (%d routes)", config.host, port, len(ctx.router))
        task_status.started(port)
        for socket_listener in listener.listeners:
            tg.start_soon(_accept_loop, socket_listener, tg, ctx, limiter)


async def _accept_loop(
    listener: SocketListener,
    tg: TaskGroup,
    ctx: ServerContext,
    limiter: anyio.CapacityLimiter | None,
) -> None:
    while True:
        try:
            stream = await listener.accept()
        except anyio.ClosedResourceError:
            return
        except OSError as exc:
            ctx.logger.warning("error accepting connection: %s", exc)
            continue
        tg.start_soon(_run_connection, stream, ctx, limiter)


async def _run_connection(
    stream: ByteStream,
    ctx: ServerContext,
    limiter: anyio.CapacityLimiter | None,
) -> None:
    """Run one connection handler, keeping its failures out of the task group."""
    try:
        if limiter is None:
            await handle_connection(stream, ctx)
        else:
            async with limiter:
                await handle_connection(stream, ctx)
    except Exception:
        ctx.logger.exception("unhandled error on connection")
        await anyio.aclose_forcefully(stream)
