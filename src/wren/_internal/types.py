"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Captured path parameters: name -> decoded segment value
PathParams: TypeAlias = dict[str, str]

# Route handler: ``(request, path_params) -> ResponseEntity``, sync or async
Handler: TypeAlias = Callable[..., Any]
