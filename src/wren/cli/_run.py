"""``wren run`` — start the server.

Resolves an import string to a wren App, applies CLI overrides to its
config, and serves until interrupted.
"""

import argparse
import sys
from dataclasses import replace
from typing import Any

from wren.cli._resolve import resolve_app
from wren.config import ServerConfig
from wren.errors import ConfigurationError

# CLI flag attribute -> ServerConfig field
_OVERRIDES: dict[str, str] = {
    "host": "host",
    "port": "port",
    "storage_dir": "storage_dir",
    "log_level": "log_level",
    "read_timeout": "read_timeout",
    "max_connections": "max_connections",
}


def build_config(args: argparse.Namespace, base: ServerConfig | None = None) -> ServerConfig:
    """Apply the flags the user actually passed on top of *base*."""
    changes: dict[str, Any] = {}
    for attr, field_name in _OVERRIDES.items():
        value = getattr(args, attr, None)
        if value is not None:
            changes[field_name] = value
    config = replace(base or ServerConfig(), **changes)
    config.validate()
    return config


def run_server(args: argparse.Namespace) -> None:
    """Start the wren server.

    Factories (like the default ``wren.handlers:create_app``) receive the
    overridden config, so ``--storage-dir`` reaches the file handlers.
    A ready-made App gets its config replaced before it freezes.
    """
    try:
        config = build_config(args)
        app = resolve_app(args.app, config=config)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if app.config is not config:
        try:
            app.config = build_config(args, app.config)
        except ConfigurationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc

    try:
        app.run()
    except OSError as exc:
        print(f"Error: could not start server: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
