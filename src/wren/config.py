"""Server configuration.

One frozen dataclass for the whole process. The CLI builds it from flags,
the app freezes it into the server context, and connection tasks only read it.
"""

from dataclasses import dataclass
from pathlib import Path

from wren.errors import ConfigurationError

LOG_LEVELS: frozenset[str] = frozenset({"debug", "info", "warning", "error", "critical"})
TRANSPORTS: frozenset[str] = frozenset({"tcp"})


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(port=3000, storage_dir="/var/lib/wren")
    """

    # Listener
    host: str = "0.0.0.0"
    port: int = 8080
    transport: str = "tcp"

    # File handlers
    storage_dir: str | Path = "tmp/"

    # Logging
    log_level: str = "info"

    # Limits
    max_request_size: int = 16 * 1024 * 1024  # 16 MB
    read_timeout: float | None = None  # None = wait for the client forever
    max_connections: int = 0  # 0 = one task per connection, unbounded

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is out of range."""
        if self.transport not in TRANSPORTS:
            msg = f"Unsupported transport {self.transport!r}. Supported: {', '.join(sorted(TRANSPORTS))}"
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"Port {self.port} is outside 0-65535."
            raise ConfigurationError(msg)
        if self.max_request_size <= 0:
            msg = "max_request_size must be positive."
            raise ConfigurationError(msg)
        if self.read_timeout is not None and self.read_timeout <= 0:
            msg = "read_timeout must be positive or None."
            raise ConfigurationError(msg)
        if self.max_connections < 0:
            msg = "max_connections must be >= 0."
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}."
            raise ConfigurationError(msg)
