"""Registration decorator for the method tables.

This module provides:
- @method: Decorator to register a free function into handler set tables
- Method registry for auto-discovery
"""

import sys
from collections.abc import Callable, Iterable
from typing import Any

from underscore.dispatch import HandlerSet

# Global method registry - methods register themselves at import time
_METHOD_REGISTRY: list[Callable[..., Any]] = []


def method(
    names: list[str] | str | None = None,
    handlers: Iterable[HandlerSet] | None = None,
):
    """Decorator to register a function as a method of one or more handler sets.

    The handler sets are inferred from the HANDLERS constant of the module the
    function is defined in, so every method module must declare one.

    Args:
        names: Method name(s); defaults to the function's own name
        handlers: Optional handler set override (auto-detected from module if not provided)

    Example:
        HANDLERS = (HandlerSet.OBJECTS,)

        @method()
        def unpack(obj, attribute=None):
            ...
    """
    if isinstance(names, str):
        names = [names]

    def decorator(func):
        if handlers is None:
            # the module is still executing, but its HANDLERS constant is
            # already bound because it must come before any decorated function
            module = sys.modules.get(func.__module__)
            detected = getattr(module, "HANDLERS", None)

            if detected is None:
                raise ValueError(
                    f"Method module {func.__module__} must define HANDLERS constant"
                )

            func.__method_handlers__ = tuple(detected)
        else:
            func.__method_handlers__ = tuple(handlers)

        func.__method_names__ = names or [func.__name__]
        _METHOD_REGISTRY.append(func)
        return func

    return decorator
