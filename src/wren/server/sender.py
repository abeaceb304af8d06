"""Response sending — serializes a response entity and writes it once."""

import logging

import anyio
from anyio.abc import ByteSendStream

from wren.http.builder import serialize
from wren.http.response import ResponseEntity


async def send_response(
    entity: ResponseEntity,
    stream: ByteSendStream,
    logger: logging.Logger,
) -> int | None:
    """Serialize *entity* and write it to *stream* in a single send.

    Returns the number of bytes written, or ``None`` when the write
    failed. Failures are logged and never retried.
    """
    payload = serialize(entity)
    try:
        await stream.send(payload)
    except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as exc:
        logger.warning("error writing response: %s", exc)
        return None
    return len(payload)
