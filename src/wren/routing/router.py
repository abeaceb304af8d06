"""Ordered route table with first-registered-wins matching.

Routes are registered during setup and frozen by ``compile()``. After
that the table is read-only and safe to share between connection tasks
without locking.
"""

from urllib.parse import unquote

from wren._internal.types import Handler, PathParams
from wren.errors import ConfigurationError
from wren.routing.route import PathSegment, Route, RouteMatch


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty ``/``-delimited pieces.

    ``"/a/"`` and ``"/a"`` both give ``["a"]``; ``"/"`` and ``""`` give ``[]``.
    """
    return [part for part in path.split("/") if part]


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern into segments.

    Examples::

        "/"            -> ()
        "/user-agent"  -> (PathSegment("user-agent"),)
        "/echo/:name"  -> (PathSegment("echo"), PathSegment(":name", is_param=True, param_name="name"))

    Raises ``ConfigurationError`` for an unnamed ``:`` segment or a
    parameter name used twice in the same pattern.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in split_path(pattern):
        if not part.startswith(":"):
            segments.append(PathSegment(value=part))
            continue
        name = part[1:]
        if not name:
            msg = f"Route pattern {pattern!r} has a parameter segment without a name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route pattern {pattern!r} uses parameter {name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))
    return tuple(segments)


class Router:
    """Insertion-ordered route table.

    Matching scans routes in registration order and returns the first
    one whose method and every segment agree. A literal route therefore
    has to be registered before a parameterised route of the same shape
    that would otherwise capture its requests.

    Usage::

        router = Router()
        router.add("GET", "/user-agent", user_agent)
        router.add("GET", "/echo/:name", echo)
        router.compile()
        match = router.match("GET", "/echo/hello")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        *,
        name: str | None = None,
    ) -> Route:
        """Register a route. Must be called before ``compile()``."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise ConfigurationError(msg)
        if not method:
            msg = f"Route {pattern!r} needs an HTTP method."
            raise ConfigurationError(msg)

        route = Route(
            method=method.upper(),
            pattern=pattern,
            segments=parse_pattern(pattern),
            handler=handler,
            name=name,
        )
        self._routes.append(route)
        return route

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match a request method and path against the table.

        Path pieces are percent-decoded after splitting, so an encoded
        ``%2F`` stays inside its segment. Returns ``None`` when no route
        matches; the caller decides what a miss means.
        """
        # decode after splitting: %2F never adds a segment
        parts = [unquote(part) for part in split_path(path)]

        for route in self._routes:
            if route.method != method:
                continue
            if len(route.segments) != len(parts):
                continue
            params = _bind(route.segments, parts)
            if params is not None:
                return RouteMatch(route=route, path_params=params)

        return None

    def __len__(self) -> int:
        return len(self._routes)


def _bind(segments: tuple[PathSegment, ...], parts: list[str]) -> PathParams | None:
    """Bind *parts* to *segments*, or return ``None`` on a literal mismatch."""
    params: PathParams = {}
    for segment, part in zip(segments, parts, strict=True):
        if segment.is_param:
            params[segment.param_name or ""] = part
        elif segment.value != part:
            return None
    return params
