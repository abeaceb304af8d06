"""Process-wide server state, built once at startup.

The context is the only thing connection tasks share. Everything in it
is immutable after construction, so tasks read it without locks.
"""

import logging
from dataclasses import dataclass

from wren.config import ServerConfig
from wren.routing.router import Router


@dataclass(frozen=True, slots=True)
class ServerContext:
    """Frozen runtime state handed to the listener and every connection."""

    config: ServerConfig
    router: Router
    logger: logging.Logger

    @classmethod
    def create(
        cls,
        config: ServerConfig,
        router: Router,
        logger: logging.Logger | None = None,
    ) -> "ServerContext":
        """Validate *config*, freeze *router*, and build the context."""
        config.validate()
        router.compile()
        return cls(
            config=config,
            router=router,
            logger=logger or logging.getLogger("wren.server"),
        )
