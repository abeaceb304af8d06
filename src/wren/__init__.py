"""Wren — a minimal HTTP/1.1 server on raw stream sockets.

One request per connection, an ordered route table with ``:name``
parameters, and gzip/deflate response compression.

Basic usage::

    from wren import App, ResponseEntity

    app = App()

    @app.route("/hello/:name")
    def hello(request, params):
        return ResponseEntity.plain(200, f"hello {params['name']}")

    app.run()

Or run the built-in server (echo, user-agent, files)::

    wren run --port 8080
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "BadRequest",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Request",
    "ResponseEntity",
    "ServerConfig",
    "WrenError",
    "create_app",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "ServerConfig":
        from wren.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "ResponseEntity":
        from wren.http.response import ResponseEntity

        return ResponseEntity

    if name == "create_app":
        from wren.handlers import create_app

        return create_app

    if name in ("BadRequest", "ConfigurationError", "HTTPError", "NotFound", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
