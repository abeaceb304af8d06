"""Wren application class.

Mutable during setup (route registration, startup hooks).
Frozen into a ``ServerContext`` when the server starts.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Any

import anyio
from anyio.abc import TaskStatus

from wren._internal.invoke import invoke
from wren._internal.log import configure_logging
from wren._internal.types import Handler
from wren.config import ServerConfig
from wren.errors import ConfigurationError
from wren.routing.route import Route
from wren.routing.router import Router
from wren.server.context import ServerContext
from wren.server.listener import serve


class App:
    """The wren application.

    Mutable during setup: register routes with ``@app.route`` or
    ``app.add_route``. Frozen the first time the context is needed
    (``serve``, ``run``, or ``context()``); registering after that raises
    ``ConfigurationError``.

    Registration order is match order, so register literal routes before
    parameterised routes of the same shape::

        app.add_route("GET", "/files/latest", latest)
        app.add_route("GET", "/files/:name", read_file)

    Thread safety:
        The setup phase is single-threaded. The freeze transition uses a
        Lock + double-check so exactly one caller builds the context.
    """

    __slots__ = (
        "_context",
        "_freeze_lock",
        "_logger",
        "_router",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._logger = logger or logging.getLogger("wren.server")
        self._router = Router()
        self._startup_hooks: list[Callable[..., Any]] = []
        self._context: ServerContext | None = None
        self._freeze_lock = threading.Lock()

    # -- Setup --

    def route(
        self,
        pattern: str,
        *,
        method: str = "GET",
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            pattern: Path pattern. ``:name`` segments capture one path segment.
            method: HTTP method. Defaults to ``"GET"``.
            name: Optional route name, shown by ``wren routes``.
        """

        def decorator(func: Handler) -> Handler:
            self.add_route(method, pattern, func, name=name)
            return func

        return decorator

    def add_route(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        *,
        name: str | None = None,
    ) -> Route:
        """Register *handler* for ``method pattern``. Pattern errors raise now."""
        self._check_not_frozen()
        return self._router.add(method, pattern, handler, name=name)

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once before the listener binds. Sync or async."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in match order."""
        return self._router.routes

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    # -- Runtime --

    def context(self) -> ServerContext:
        """Return the frozen server context, building it on first use."""
        if self._context is not None:
            return self._context
        with self._freeze_lock:
            if self._context is None:
                self._context = ServerContext.create(self.config, self._router, self._logger)
        return self._context

    async def serve(
        self,
        *,
        task_status: TaskStatus[int] = anyio.TASK_STATUS_IGNORED,
        **overrides: Any,
    ) -> None:
        """Run startup hooks, then serve until cancelled.

        Keyword *overrides* replace ``ServerConfig`` fields for this run
        (``await app.serve(port=0)``). Reports the bound port through
        *task_status*.
        """
        ctx = self.context()
        if overrides:
            config = replace(ctx.config, **overrides)
            config.validate()
            ctx = replace(ctx, config=config)

        for hook in self._startup_hooks:
            await invoke(hook)

        await serve(ctx, task_status=task_status)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Configure logging and serve forever (blocking).

        Bind failure propagates; Ctrl-C shuts down cleanly.
        """
        overrides: dict[str, Any] = {}
        if host is not None:
            overrides["host"] = host
        if port is not None:
            overrides["port"] = port

        configure_logging(self.config.log_level)
        try:
            anyio.run(self._serve_with, overrides)
        except KeyboardInterrupt:
            self._logger.info("shutting down")

    async def _serve_with(self, overrides: dict[str, Any]) -> None:
        await self.serve(**overrides)

    def _check_not_frozen(self) -> None:
        if self._context is not None:
            msg = "Cannot modify the app after the server context has been built."
            raise ConfigurationError(msg)
