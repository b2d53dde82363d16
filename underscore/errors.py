"""Exceptions raised by underscore.

Each error also subclasses the builtin exception a caller would naturally
catch for the same condition.
"""


class UnderscoreError(Exception):
    """Base class for all underscore errors."""


class UnknownTypeError(UnderscoreError, TypeError):
    """The dispatcher can't classify a value (open files, sockets, iterators, ...)."""


class UnknownOperatorError(UnderscoreError, ValueError):
    """A predicate operator name isn't one of the registered operators."""


class PathError(UnderscoreError, LookupError):
    """A path can't be written (e.g. a string key or a far out-of-range index on a list)."""


class UnknownMethodError(UnderscoreError, AttributeError):
    """A repository has no method, macro or subject field with the requested name."""
