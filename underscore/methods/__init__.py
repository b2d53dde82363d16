"""Method tables with auto-discovery and registration.

This module provides:
- Auto-discovery of all method modules in this package
- METHOD_MAP: The master registry mapping handler sets and names to functions
- invoke(): dispatch a value to its handler set and call a method on it

Methods are automatically discovered by:
1. Scanning all .py files in this package
2. Importing them to trigger @method decorator registration
3. Building METHOD_MAP from the registry at module load time
"""

import importlib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from underscore.dispatch import HandlerSet, resolve
from underscore.errors import UnknownMethodError

from .base import _METHOD_REGISTRY, method

__all__ = ["METHOD_MAP", "invoke", "lookup_method", "method"]


def discover_and_import_methods():
    """Import every method module in this package to trigger @method registration."""
    methods_dir = Path(__file__).parent

    # Files to skip (infrastructure, not method tables)
    skip_files = {"__init__.py", "base.py"}

    for module_file in sorted(methods_dir.glob("*.py")):
        if module_file.name in skip_files or module_file.name.startswith("_"):
            continue

        importlib.import_module(f".{module_file.stem}", package=__package__)


def build_method_map() -> Mapping[HandlerSet, Mapping[str, Callable[..., Any]]]:
    """Build METHOD_MAP from auto-discovered methods.

    Returns:
        Nested dict: {handler_set: {method_name: function}}
    """
    discover_and_import_methods()

    method_map: dict[HandlerSet, dict[str, Callable[..., Any]]] = {
        handler: {} for handler in HandlerSet
    }

    for func in _METHOD_REGISTRY:
        for handler in func.__method_handlers__:
            table = method_map[handler]

            for name in func.__method_names__:
                # the same function may be registered twice (module reloads),
                # only a different function under one name is a conflict
                if (existing := table.get(name)) is not None and existing is not func:
                    raise ValueError(
                        f"Duplicate method name '{name}' in handler set '{handler.value}': "
                        f"{existing.__module__}.{existing.__name__} and {func.__module__}.{func.__name__}"
                    )

                table[name] = func

    return method_map


def lookup_method(handler: HandlerSet, name: str) -> Callable[..., Any] | None:
    return METHOD_MAP[handler].get(name)


def invoke(value: Any, name: str, *args, **kwargs) -> Any:
    """Call method 'name' of the handler set responsible for 'value'.

    Example:
        invoke({"foo": {"bar": 1}}, "get", "foo.bar") -> 1
    """
    handler = resolve(value)
    if (func := lookup_method(handler, name)) is None:
        raise UnknownMethodError(f"{handler.value} has no method '{name}'")

    return func(value, *args, **kwargs)


# Build the master method registry
METHOD_MAP = build_method_map()
