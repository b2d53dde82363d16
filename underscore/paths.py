"""Delimited path addressing for nested containers.

A path like "users.0.name" is split on the configured delimiter and walked
left to right through any mix of mappings, sequences and records:

    walk({"users": [{"name": "ada"}]}, ["users", "0", "name"]) -> "ada"

Reads never fail: a missing segment resolves to MISSING and the public
methods turn that into a default. Writes create intermediate dicts as needed
and return the (possibly rebuilt) node because tuples, namedtuples, frozen
dataclasses and read-only mappings can't be changed in place.
"""

import types
from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any, Final

from loguru import logger

from underscore.config import SETTINGS
from underscore.errors import PathError
from underscore.utils import (
    entries,
    is_container,
    is_namedtuple,
    is_record,
    is_sequence,
    record_fields,
    with_field,
    without_field,
)


class _Missing:
    """Marker for 'nothing resolved here' (None is a legitimate stored value)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def split(path: Any, delimiter: str | None = None) -> list[Any]:
    """Break 'path' into segments. Non-string keys are a single segment."""
    if path is None or path == "":
        return []

    if not isinstance(path, str):
        return [path]

    return path.split(delimiter or SETTINGS.delimiter)


def index_of(segment: Any) -> int | None:
    """Return 'segment' as a list index, or None if it isn't one."""
    if isinstance(segment, bool):
        return None

    if isinstance(segment, int):
        return segment if segment >= 0 else None

    if isinstance(segment, str) and segment.isascii() and segment.isdigit():
        return int(segment)

    return None


def key_of(node: Mapping, segment: Any) -> Any:
    """Return the key of 'node' matching 'segment' ("1" also matches 1 and vice versa)."""
    try:
        if segment in node:
            return segment
    except TypeError:
        # unhashable segment can't be a key
        return MISSING

    idx = index_of(segment)
    if idx is not None:
        if idx in node:
            return idx

        if str(idx) in node:
            return str(idx)

    return MISSING


def field_of(node: tuple, segment: Any) -> str | None:
    """Return the namedtuple field addressed by 'segment' (by name or position)."""
    fields = type(node)._fields  # type: ignore[attr-defined]
    if segment in fields:
        return segment

    idx = index_of(segment)
    if idx is not None and idx < len(fields):
        return fields[idx]

    return None


def child(node: Any, segment: Any) -> Any:
    """Step one segment into 'node'."""
    if isinstance(node, Mapping):
        key = key_of(node, segment)
        return MISSING if key is MISSING else node[key]

    if is_sequence(node):
        if is_namedtuple(node) and isinstance(segment, str) and segment in node._fields:
            return getattr(node, segment)

        idx = index_of(segment)
        if idx is not None and idx < len(node):
            return node[idx]

        return MISSING

    if is_record(node):
        return record_fields(node).get(str(segment), MISSING)

    return MISSING


def walk(node: Any, segments: list[Any], wildcard: str | None = None) -> Any:
    """Resolve 'segments' below 'node', or MISSING.

    A wildcard segment gathers the rest of the path across every child.
    A non-index segment applied to a sequence plucks it across the elements.
    """
    if not segments:
        return node

    wildcard = wildcard or SETTINGS.wildcard
    segment, rest = segments[0], segments[1:]

    if segment == wildcard:
        if not is_container(node):
            return MISSING

        found = [walk(value, rest, wildcard) for _, value in entries(node)]
        return [f for f in found if f is not MISSING]

    if (found := child(node, segment)) is not MISSING:
        return walk(found, rest, wildcard)

    # an index that isn't there is just missing, only field names pluck
    if is_sequence(node) and index_of(segment) is None:
        plucked = [walk(element, segments, wildcard) for element in node]
        plucked = [p for p in plucked if p is not MISSING]
        return plucked or MISSING

    return MISSING


def lookup(collection: Any, path: Any, delimiter: str | None = None) -> Any:
    """Resolve a whole path, preferring a literal key match for the full path."""
    if path is None:
        return collection

    if (found := child(collection, path)) is not MISSING:
        return found

    return walk(collection, split(path, delimiter))


def put(node: Any, segment: Any, value: Any) -> Any:
    """Set 'segment' of 'node' to 'value', returning the node (or its replacement)."""
    if isinstance(node, Mapping):
        key = key_of(node, segment)
        if key is MISSING:
            try:
                hash(segment)
            except TypeError:
                raise PathError(f"Can't use {segment!r} as a mapping key") from None

            key = segment

        if isinstance(node, MutableMapping):
            node[key] = value
            return node

        logger.debug("Copying read-only {} to set {}", type(node).__name__, key)
        return {**node, key: value}

    if is_namedtuple(node):
        if (name := field_of(node, segment)) is None:
            raise PathError(f"{type(node).__name__} has no field {segment!r}")

        return node._replace(**{name: value})

    if is_sequence(node):
        idx = index_of(segment)
        if idx is None or idx > len(node):
            raise PathError(
                f"Can't write {segment!r} into a sequence of length {len(node)}"
            )

        if isinstance(node, MutableSequence):
            if idx == len(node):
                node.append(value)
            else:
                node[idx] = value

            return node

        logger.debug("Copying immutable {} to set index {}", type(node).__name__, idx)
        items = list(node)
        put(items, idx, value)
        return tuple(items)

    name = str(segment)
    try:
        setattr(node, name, value)
    except (AttributeError, TypeError):
        return with_field(node, name, value)

    return node


def drop(node: Any, segment: Any) -> Any:
    """Delete 'segment' from 'node' if present, returning the node (or its replacement)."""
    if isinstance(node, Mapping):
        key = key_of(node, segment)
        if key is MISSING:
            return node

        if isinstance(node, MutableMapping):
            del node[key]
            return node

        return {k: v for k, v in node.items() if k != key}

    if is_namedtuple(node):
        if (name := field_of(node, segment)) is None:
            return node

        # a namedtuple can't lose a field, so it becomes a record without it
        return types.SimpleNamespace(
            **{k: v for k, v in node._asdict().items() if k != name}
        )

    if is_sequence(node):
        idx = index_of(segment)
        if idx is None or idx >= len(node):
            return node

        if isinstance(node, MutableSequence):
            del node[idx]
            return node

        return tuple(item for pos, item in enumerate(node) if pos != idx)

    if is_record(node):
        name = str(segment)
        if name not in record_fields(node):
            return node

        try:
            delattr(node, name)
        except (AttributeError, TypeError):
            return without_field(node, name)

        return node

    return node


def assign(node: Any, segments: list[Any], value: Any) -> Any:
    """Write 'value' at 'segments' below 'node', creating dicts along the way."""
    if not is_container(node):
        node = {}

    segment, rest = segments[0], segments[1:]
    if not rest:
        return put(node, segment, value)

    found = child(node, segment)
    target = found if found is not MISSING and is_container(found) else {}
    updated = assign(target, rest, value)

    # the child was changed in place, so the parent doesn't need touching
    if updated is found:
        return node

    return put(node, segment, updated)


def discard(node: Any, segments: list[Any]) -> Any:
    """Remove the entry at 'segments' below 'node'. Missing paths are ignored."""
    segment, rest = segments[0], segments[1:]
    found = child(node, segment)

    # same implicit pluck as walk(): a field name on a sequence reaches every element
    if found is MISSING and is_sequence(node) and index_of(segment) is None:
        for idx, element in enumerate(list(node)):
            if not is_container(element):
                continue

            updated = discard(element, segments)
            if updated is not element:
                node = put(node, idx, updated)

        return node

    if not rest:
        return drop(node, segment)

    if found is MISSING or not is_container(found):
        return node

    updated = discard(found, rest)
    if updated is found:
        return node

    return put(node, segment, updated)
