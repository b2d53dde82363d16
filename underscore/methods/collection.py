"""Methods shared by every keyed container: Arrays (lists, tuples, dicts) and Objects (records).

All of these accept mappings, sequences and records interchangeably and
address nested data with delimited paths ("child.sort", "users.*.name").
"""

import types
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Final

from underscore import paths, utils
from underscore.dispatch import HandlerSet
from underscore.methods.base import method
from underscore.operators import SortKey, compare
from underscore.paths import MISSING

HANDLERS: Final = (HandlerSet.ARRAYS, HandlerSet.OBJECTS)


@method()
def get(collection: Any, path: Any, default: Any = None, *, delimiter: str | None = None) -> Any:
    """Read the value at 'path', or 'default' if any segment is missing.

    A callable default is only called (with no arguments) when it's needed.

    Example:
        get({"foo": {"bar": "ter"}}, "foo.bar") -> "ter"
        get([{"id": 1}, {"id": 2}], "id") -> [1, 2]
        get({"a": {"x": 1}, "b": {"x": 2}}, "*.x") -> [1, 2]
    """
    found = paths.lookup(collection, path, delimiter)
    if found is MISSING:
        return default() if callable(default) else default

    return found


@method()
def has(collection: Any, path: Any, *, delimiter: str | None = None) -> bool:
    return paths.lookup(collection, path, delimiter) is not MISSING


@method()
def set(collection: Any, path: Any, value: Any, *, delimiter: str | None = None) -> Any:
    """Write 'value' at 'path', creating intermediate dicts for missing segments.

    Always use the return value: immutable containers (tuples, frozen
    dataclasses, ...) are rebuilt rather than changed in place.

    Like get(), an existing key equal to the whole path is written directly."""
    segments = paths.split(path, delimiter)
    if not segments:
        return collection

    if paths.child(collection, path) is not MISSING:
        return paths.put(collection, path, value)

    return paths.assign(collection, segments, value)


@method()
def remove(collection: Any, path: Any | Iterable[Any], *, delimiter: str | None = None) -> Any:
    """Delete the entry at 'path' (or at each of several paths). Missing paths are ignored."""
    if path is None:
        return collection

    if isinstance(path, (str, int)):
        path = [path]

    for p in path:
        segments = paths.split(p, delimiter)
        if not segments or not utils.is_container(collection):
            continue

        if paths.child(collection, p) is not MISSING:
            collection = paths.drop(collection, p)
        else:
            collection = paths.discard(collection, segments)

    return collection


@method()
def pluck(collection: Any, key: Any) -> Any:
    """Fetch 'key' from every element; missing keys give None so the size is kept."""
    plucked = [(k, get(v, key)) for k, v in utils.entries(collection)]

    if isinstance(collection, Mapping):
        return dict(plucked)

    if utils.is_record(collection):
        return types.SimpleNamespace(**{str(k): v for k, v in plucked})

    return [v for _, v in plucked]


@method()
def filter_by(collection: Any, key: Any, value: Any, operator: str = "eq") -> list[Any]:
    """Return the elements whose 'key' compares true against 'value'.

    Elements without 'key' never match, whatever the operator.

    Example:
        filter_by([{"v": 1}, {"v": 5}], "v", 2, "lt") -> [{"v": 1}]
    """
    found = []
    for _, element in utils.entries(collection):
        current = paths.lookup(element, key)
        if current is MISSING:
            continue

        if compare(current, value, operator):
            found.append(element)

    return found


@method()
def find_by(
    collection: Any, key: Any, value: Any, operator: str = "eq", default: Any = None
) -> Any:
    """Return the first element matching like filter_by(), as an object."""
    if matched := filter_by(collection, key, value, operator):
        return utils.to_object(matched[0])

    return default


@method()
def sort(
    collection: Any,
    sorter: str | Callable[[Any], Any] | None = None,
    direction: str = "asc",
) -> Any:
    """Stable sort by a path, by a callable's result, or by the elements themselves.

    Sequences return a list. Mappings and records return a dict ordered by value."""
    if sorter is None:
        keyfunc = lambda value: value
    elif callable(sorter):
        keyfunc = sorter
    else:
        keyfunc = lambda value: get(value, sorter)

    # sorted() is stable in both directions, so equal keys keep their input order
    ordered = sorted(
        utils.entries(collection),
        key=lambda kv: SortKey(keyfunc(kv[1])),
        reverse=str(direction).lower() == "desc",
    )

    if isinstance(collection, Mapping) or utils.is_record(collection):
        return dict(ordered)

    return [v for _, v in ordered]


@method()
def keys(collection: Any) -> list[Any]:
    return [k for k, _ in utils.entries(collection)]


@method()
def values(collection: Any) -> list[Any]:
    return [v for _, v in utils.entries(collection)]


@method()
def first(collection: Any, take: int | None = None) -> Any:
    """First value, or a list of the first 'take' values."""
    found = values(collection)
    if take is None:
        return found[0] if found else None

    return found[: max(take, 0)]


@method()
def last(collection: Any, take: int | None = None) -> Any:
    """Last value, or a list of the last 'take' values."""
    found = values(collection)
    if take is None:
        return found[-1] if found else None

    return found[-take:] if take > 0 else []


@method()
def replace(collection: Any, old_key: Any, new_key: Any, value: Any) -> Any:
    """Drop 'old_key' then write 'value' under 'new_key'."""
    collection = remove(collection, old_key)
    return set(collection, new_key, value)


@method()
def set_and_get(collection: Any, key: Any, default: Any) -> Any:
    """Store 'default' under 'key' unless something is already there, then return what's there.

    Immutable collections are rebuilt, so only mutable ones keep the new key."""
    if not has(collection, key):
        collection = set(collection, key, default)

    return get(collection, key)


@method(handlers=(HandlerSet.ARRAYS, HandlerSet.OBJECTS, HandlerSet.STRINGS, HandlerSet.NUMBER))
def to_json(value: Any) -> str:
    return utils.to_json(value)


@method()
def to_array(value: Any) -> Any:
    return utils.to_array(value)


@method()
def to_object(value: Any) -> Any:
    return utils.to_object(value)
