"""Methods for lists, tuples and dicts."""

from collections.abc import Callable, Mapping
from typing import Any, Final

from underscore import utils
from underscore.dispatch import HandlerSet
from underscore.methods.base import method
from underscore.operators import contains as _contains

HANDLERS: Final = (HandlerSet.ARRAYS,)


@method()
def each(collection: Any, func: Callable[[Any], Any]) -> Any:
    """Apply 'func' to every value. Dicts keep their keys, everything else becomes a list."""
    if isinstance(collection, Mapping):
        return {k: func(v) for k, v in collection.items()}

    return [func(v) for _, v in utils.entries(collection)]


@method()
def size(collection: Any) -> int:
    return len(utils.entries(collection))


@method()
def contains(collection: Any, value: Any) -> bool:
    return _contains(value, collection)
