"""Predicate operators for filter_by/find_by, plus the ordering used by sort."""

import datetime
import numbers
import operator
from collections.abc import Callable, Mapping, Set
from dataclasses import dataclass
from typing import Any, Final

from dateutil import parser as dateparser
from loguru import logger

from underscore.errors import UnknownOperatorError
from underscore.utils import is_sequence


def contains(needle: Any, haystack: Any) -> bool:
    """Membership test where a non-container haystack is a one element list."""
    if isinstance(haystack, Mapping):
        return needle in haystack.values()

    if is_sequence(haystack) or isinstance(haystack, Set):
        return needle in haystack

    return needle == haystack


def timestamp(value: Any) -> float:
    """Convert a date-ish value to POSIX seconds so everything compares as numbers.

    Naive datetimes and parsed strings without an offset are read as local time."""
    if isinstance(value, datetime.datetime):
        return value.timestamp()

    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time()).timestamp()

    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return float(value)

    if isinstance(value, str):
        return dateparser.parse(value).timestamp()

    raise TypeError(f"Can't read a date from {type(value).__name__}")


OPERATORS: Final[Mapping[str, Callable[[Any, Any], Any]]] = dict(
    eq=operator.eq,
    ne=operator.ne,
    lt=operator.lt,
    gt=operator.gt,
    lte=operator.le,
    gte=operator.ge,
    contains=contains,
    not_contains=lambda needle, haystack: not contains(needle, haystack),
    newer=lambda left, right: timestamp(left) > timestamp(right),
    older=lambda left, right: timestamp(left) < timestamp(right),
)

symbol_to_operator: Final = {
    "==": "eq",
    "!=": "ne",
    "<": "lt",
    ">": "gt",
    "<=": "lte",
    ">=": "gte",
}


def get_operator(name: str) -> Callable[[Any, Any], Any]:
    name = symbol_to_operator.get(name, name)
    try:
        return OPERATORS[name]
    except KeyError:
        raise UnknownOperatorError(
            f"Unknown comparison operator {name!r}, expected one of: {', '.join(OPERATORS)}"
        ) from None


def compare(left: Any, right: Any, op: str = "eq") -> bool:
    """Evaluate 'left <op> right'.

    Comparisons the values don't support (ordering a str against an int,
    unparseable dates, ...) are False instead of an error."""
    func = get_operator(op)

    try:
        return bool(func(left, right))
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug("[{}] Can't compare {!r} with {!r}: {}", op, left, right, e)
        return False


def ordering_group(value: Any) -> int:
    if value is None:
        return 0

    if isinstance(value, numbers.Number):
        return 1

    if isinstance(value, (str, bytes, bytearray)):
        return 2

    return 3


@dataclass(slots=True)
class SortKey:
    """Total ordering wrapper for sort keys of mixed types.

    Groups sort as: None, numbers, text, everything else. Inside a group the
    native ordering is used; values without one fall back to their type name
    and otherwise tie (so a stable sort keeps their input order)."""

    value: Any

    def __lt__(self, other: "SortKey") -> bool:
        a, b = self.value, other.value
        ga, gb = ordering_group(a), ordering_group(b)
        if ga != gb:
            return ga < gb

        if ga == 0:
            return False

        try:
            return bool(a < b)
        except TypeError:
            return type(a).__name__ < type(b).__name__
