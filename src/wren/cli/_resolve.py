"""Turn ``"module:attribute"`` strings into App instances.

Both ``wren run`` and ``wren routes`` take the app as an import string.
"""

import importlib
import inspect
from typing import Any

from wren.app import App


def resolve_app(import_string: str, **factory_kwargs: Any) -> App:
    """Import *import_string* and return the wren App it names.

    The attribute defaults to ``app`` (``"server"`` means ``server:app``).
    A callable that is not an App is treated as a factory and called with
    the subset of *factory_kwargs* its signature declares, so
    ``wren.handlers:create_app`` receives ``config`` and a zero-argument
    factory receives nothing.

    Raises:
        ModuleNotFoundError: the module does not import.
        AttributeError: the module has no such attribute.
        TypeError: the factory failed, or the result is not an App.
    """
    module_name, _, attr = import_string.partition(":")
    module = importlib.import_module(module_name)
    target = getattr(module, attr or "app")

    if callable(target) and not isinstance(target, App):
        try:
            target = target(**_accepted_kwargs(target, factory_kwargs))
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, App):
        msg = f"{import_string!r} resolved to {type(target).__name__}, not a wren.App instance"
        raise TypeError(msg)
    return target


def _accepted_kwargs(factory: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
    try:
        params = inspect.signature(factory).parameters
    except (TypeError, ValueError):
        return {}
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()):
        return dict(kwargs)
    return {name: value for name, value in kwargs.items() if name in params}
