"""Logging setup for the ``wren`` logger tree.

Components never log through a module-level global: the server context
carries a logger and hands it (or a child) to whatever needs one.
"""

import logging
import sys

LOGGER_NAME = "wren"
LOG_FORMAT = "[HTTP-SERVER] %(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_HANDLER_FLAG = "_wren_handler"


def configure_logging(level: str = "info", *, stream=None) -> logging.Logger:
    """Attach a single stdout handler to the ``wren`` logger and set its level.

    Idempotent: calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(getattr(h, _HANDLER_FLAG, False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
        logger.propagate = False

    return logger
