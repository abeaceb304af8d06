"""Built-in route handlers.

Each handler is a ``(request, path_params) -> ResponseEntity`` capability
with no ambient state; the file handlers get their storage root and
logger from the ``FileStore`` they are bound to.

``register_routes`` installs them in the order the route table needs:
literal routes first, then the parameterised ones.
"""

import logging
from pathlib import Path

import anyio

from wren._internal.types import PathParams
from wren.app import App
from wren.config import ServerConfig
from wren.http.encoding import select_encoding
from wren.http.request import Request
from wren.http.response import ResponseEntity

INVALID_NAME_DETAIL = "invalid file name provided"
FILE_NOT_FOUND_DETAIL = "file not found"
WRITE_FAILED_DETAIL = "unexpected error occurred"


def default(request: Request, params: PathParams) -> ResponseEntity:
    """``GET /`` — empty 200."""
    return ResponseEntity.plain(200)


def echo(request: Request, params: PathParams) -> ResponseEntity:
    """``GET /echo/:name`` — echo the segment, compressed if the client allows."""
    encoding = select_encoding(request.accept_encoding)
    return ResponseEntity.plain(200, params["name"]).with_content_encoding(encoding)


def user_agent(request: Request, params: PathParams) -> ResponseEntity:
    """``GET /user-agent`` — echo the User-Agent header."""
    return ResponseEntity.plain(200, request.user_agent)


def valid_file_name(name: str) -> bool:
    """True if *name* is a plain file name that stays inside the storage root."""
    if not name or ".." in name:
        return False
    return not any(ch in name for ch in ("/", "\\", "\x00"))


class FileStore:
    """Reads and writes files under a single storage directory.

    Names are validated before any filesystem call, so a rejected name
    never touches the disk.
    """

    __slots__ = ("logger", "root")

    def __init__(self, root: str | Path, logger: logging.Logger | None = None) -> None:
        self.root = Path(root)
        self.logger = logger or logging.getLogger("wren.handlers")

    async def ensure_root(self) -> None:
        """Create the storage directory if it does not exist yet."""
        await anyio.Path(self.root).mkdir(parents=True, exist_ok=True)

    async def read_file(self, request: Request, params: PathParams) -> ResponseEntity:
        """``GET /files/:name`` — return the stored bytes."""
        name = params["name"]
        if not valid_file_name(name):
            self.logger.warning("invalid file name in request: %r", name)
            return ResponseEntity.plain(400, INVALID_NAME_DETAIL)

        path = anyio.Path(self.root / name)
        try:
            data = await path.read_bytes()
        except OSError as exc:
            self.logger.warning("error reading file %s: %s", path, exc)
            return ResponseEntity.plain(404, FILE_NOT_FOUND_DETAIL)
        return ResponseEntity.octets(200, data)

    async def write_file(self, request: Request, params: PathParams) -> ResponseEntity:
        """``POST /files/:name`` — store the request body."""
        name = params["name"]
        if not valid_file_name(name):
            self.logger.warning("invalid file name in request: %r", name)
            return ResponseEntity.plain(400, INVALID_NAME_DETAIL)

        path = anyio.Path(self.root / name)
        try:
            await path.write_bytes(request.body)
        except OSError as exc:
            self.logger.warning("error writing file %s: %s", path, exc)
            return ResponseEntity.plain(500, WRITE_FAILED_DETAIL)
        return ResponseEntity.octets(201)


def register_routes(app: App, store: FileStore) -> None:
    """Install the built-in routes. Literal patterns go first."""
    app.add_route("GET", "/", default, name="default")
    app.add_route("GET", "/user-agent", user_agent, name="user_agent")
    app.add_route("GET", "/echo/:name", echo, name="echo")
    app.add_route("GET", "/files/:name", store.read_file, name="read_file")
    app.add_route("POST", "/files/:name", store.write_file, name="write_file")
    app.on_startup(store.ensure_root)


def create_app(config: ServerConfig | None = None) -> App:
    """Build the standard server: default config, built-in routes."""
    app = App(config)
    store = FileStore(app.config.storage_dir)
    register_routes(app, store)
    return app
