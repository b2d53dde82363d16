"""Generic helpers for arrays, objects, numbers, strings and functions.

Values are routed by kind to a table of plain functions:

    dispatch({"foo": "bar"}) -> HandlerSet.ARRAYS
    METHOD_MAP[HandlerSet.ARRAYS]["get"]({"foo": {"bar": 1}}, "foo.bar") -> 1

The most used functions are also importable from here directly, and
from_(value) wraps a value for chained calls.
"""

from loguru import logger

from underscore.config import SETTINGS, Settings
from underscore.dispatch import HandlerSet, Kind, classify, dispatch, resolve
from underscore.errors import (
    PathError,
    UnderscoreError,
    UnknownMethodError,
    UnknownOperatorError,
    UnknownTypeError,
)
from underscore.methods import METHOD_MAP, invoke
from underscore.methods.collection import (
    filter_by,
    find_by,
    first,
    get,
    has,
    keys,
    last,
    pluck,
    remove,
    replace,
    set,
    set_and_get,
    sort,
    to_array,
    to_json,
    to_object,
    values,
)
from underscore.methods.objects import methods, unpack
from underscore.operators import compare
from underscore.repository import (
    Arrays,
    Functions,
    Number,
    Objects,
    Repository,
    Strings,
    from_,
    repository_for,
)

__all__ = [
    "Arrays",
    "Functions",
    "HandlerSet",
    "Kind",
    "METHOD_MAP",
    "Number",
    "Objects",
    "PathError",
    "Repository",
    "SETTINGS",
    "Settings",
    "Strings",
    "UnderscoreError",
    "UnknownMethodError",
    "UnknownOperatorError",
    "UnknownTypeError",
    "classify",
    "compare",
    "dispatch",
    "filter_by",
    "find_by",
    "first",
    "from_",
    "get",
    "has",
    "invoke",
    "keys",
    "last",
    "methods",
    "pluck",
    "remove",
    "replace",
    "repository_for",
    "resolve",
    "set",
    "set_and_get",
    "sort",
    "to_array",
    "to_json",
    "to_object",
    "unpack",
    "values",
]

# libraries stay quiet unless the application asks for their logs
logger.disable("underscore")
if SETTINGS.log:
    logger.enable("underscore")
