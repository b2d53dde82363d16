"""Methods for callables: call-count limited wrappers."""

import functools
from collections.abc import Callable
from typing import Any, Final

from underscore.dispatch import HandlerSet
from underscore.methods.base import method

HANDLERS: Final = (HandlerSet.FUNCTIONS,)


@method()
def only(func: Callable[..., Any], times: int) -> Callable[..., Any]:
    """Wrap 'func' so only the first 'times' calls run it; later calls return None."""
    calls = 0

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal calls
        if calls >= times:
            return None

        calls += 1
        return func(*args, **kwargs)

    return wrapper


@method()
def once(func: Callable[..., Any]) -> Callable[..., Any]:
    return only(func, 1)


@method()
def after(func: Callable[..., Any], times: int) -> Callable[..., Any]:
    """Wrap 'func' so it only runs from the 'times'-th call onward; earlier calls return None."""
    calls = 0

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal calls
        calls += 1
        if calls < times:
            return None

        return func(*args, **kwargs)

    return wrapper
