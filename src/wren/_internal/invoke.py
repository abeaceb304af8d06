"""Uniform calls into user code.

Route handlers and startup hooks may be plain functions or coroutines.
The connection pipeline and ``App.serve`` call them through ``invoke``
and never check which kind they got.
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func*; if it hands back an awaitable, await it.

    ::

        entity = await invoke(route.handler, request, path_params)
        await invoke(hook)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result
