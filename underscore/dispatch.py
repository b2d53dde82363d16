"""Dispatcher for routing values to the method table of their kind."""

import enum
import io
import mmap
import numbers
import socket
from collections.abc import Iterator, Mapping, Sequence, Set
from typing import Any, Final

from loguru import logger

from underscore.errors import UnknownTypeError


class Kind(enum.Enum):
    """Shape of a runtime value."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NUMBER = "number"
    TEXT = "text"
    CALLABLE = "callable"
    RECORD = "record"


class HandlerSet(enum.Enum):
    """Name of the method table servicing a value."""

    STRINGS = "Strings"
    NUMBER = "Number"
    ARRAYS = "Arrays"
    OBJECTS = "Objects"
    FUNCTIONS = "Functions"


HANDLERS: Final[Mapping[Kind, HandlerSet]] = {
    Kind.SEQUENCE: HandlerSet.ARRAYS,
    Kind.MAPPING: HandlerSet.ARRAYS,
    Kind.NUMBER: HandlerSet.NUMBER,
    Kind.TEXT: HandlerSet.STRINGS,
    Kind.CALLABLE: HandlerSet.FUNCTIONS,
    Kind.RECORD: HandlerSet.OBJECTS,
}

TEXT_TYPES: Final = (str, bytes, bytearray)

# live handles we refuse to treat as records
RESOURCE_TYPES: Final = (io.IOBase, socket.socket, mmap.mmap)


def classify(value: Any) -> Kind:
    """Return the Kind of 'value'.

    Order matters: classes and callable instances are CALLABLE even though they
    are also objects, and str is TEXT even though it is also a Sequence.

    None is treated as an empty placeholder string.

    Raises UnknownTypeError for resource handles and single-pass iterators
    because neither can be addressed like a container."""
    if callable(value):
        return Kind.CALLABLE

    if isinstance(value, numbers.Number):
        return Kind.NUMBER

    if value is None or isinstance(value, TEXT_TYPES):
        return Kind.TEXT

    if isinstance(value, Mapping):
        return Kind.MAPPING

    if isinstance(value, (Sequence, Set)):
        return Kind.SEQUENCE

    if isinstance(value, RESOURCE_TYPES) or isinstance(value, Iterator):
        raise UnknownTypeError(
            f"No handler set for values of type {type(value).__name__}"
        )

    return Kind.RECORD


def resolve(value: Any) -> HandlerSet:
    """Return the HandlerSet responsible for 'value'."""
    try:
        return HANDLERS[classify(value)]
    except UnknownTypeError:
        logger.error("Can't dispatch value of type {}", type(value).__name__)
        raise


# public name used by callers deciding which table services a value
dispatch = resolve
