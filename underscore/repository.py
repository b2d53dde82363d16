"""Repositories: value holders that forward calls to their handler set's method table.

Any method of the holder's table can be called without passing the subject:

    Objects.from_({"foo": "bar"}).set("bis", "ter").keys() -> ["foo", "bis"]

A call whose result belongs to the same handler set replaces the subject and
returns the repository (so calls chain); any other result is returned as-is.
Unknown attributes read and write fields of the subject.
"""

import functools
import numbers
import types
from collections.abc import Callable, Mapping, Set
from dataclasses import dataclass, field
from typing import Any, ClassVar, Final

from underscore import paths, utils
from underscore.dispatch import HANDLERS, HandlerSet, classify, resolve
from underscore.errors import UnknownMethodError, UnknownTypeError
from underscore.methods import lookup_method
from underscore.methods.collection import set as set_path


@dataclass
class Repository:
    """Generic holder for a subject, parameterized by the handler set servicing it."""

    subject: Any = None
    handler: HandlerSet = field(init=False)

    # fixed handler set of typed repositories (None means: resolve from the subject)
    handles: ClassVar[HandlerSet | None] = None

    # macros registered with extend(), each subclass gets its own table
    _macros: ClassVar[dict[str, Callable[..., Any]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._macros = {}

    def __post_init__(self) -> None:
        self.handler = self.handles or resolve(self.subject)

    @staticmethod
    def typecast(subject: Any) -> Any:
        return subject

    @staticmethod
    def get_default() -> Any:
        return None

    @classmethod
    def create(cls) -> "Repository":
        """New repository holding this repository type's default subject."""
        return cls(cls.get_default())

    @classmethod
    def from_(cls, subject: Any) -> "Repository":
        """New repository holding 'subject' converted to this repository's type."""
        return cls(cls.typecast(subject))

    @classmethod
    def extend(cls, name: str, func: Callable[..., Any]) -> None:
        """Register 'func' as an extra method; it receives the subject first like any table method."""
        cls._macros[name] = func

    def obtain(self) -> Any:
        return self.subject

    def is_empty(self) -> bool:
        if utils.is_record(self.subject):
            return not utils.record_fields(self.subject)

        return not self.subject

    def _macro(self, name: str) -> Callable[..., Any] | None:
        for cls in type(self).__mro__:
            if (macro := cls.__dict__.get("_macros", {}).get(name)) is not None:
                return macro

        return None

    def _returns_subject(self, result: Any) -> bool:
        if result is None:
            return False

        try:
            return HANDLERS[classify(result)] is self.handler
        except UnknownTypeError:
            return False

    def _call(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        result = func(self.subject, *args, **kwargs)
        if self._returns_subject(result):
            self.subject = result
            return self

        return result

    def __getattr__(self, name: str) -> Any:
        # only reached when regular attribute lookup failed
        if name.startswith("__"):
            raise AttributeError(name)

        # fields may not exist yet while the dataclass __init__ is running
        handler = self.__dict__.get("handler")
        if handler is not None and (func := lookup_method(handler, name)) is not None:
            return functools.partial(self._call, func)

        if (macro := self._macro(name)) is not None:
            return functools.partial(self._call, macro)

        found = paths.child(self.__dict__.get("subject"), name)
        if found is not paths.MISSING:
            return found

        raise UnknownMethodError(
            f"{type(self).__name__} has no method, macro or field '{name}'"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in {"subject", "handler"} or name.startswith("_"):
            object.__setattr__(self, name, value)
            return

        self.subject = set_path(self.subject, name, value)

    def __str__(self) -> str:
        subject = self.subject
        if (
            isinstance(subject, (Mapping, Set))
            or utils.is_sequence(subject)
            or utils.is_record(subject)
        ):
            return utils.to_json(subject)

        return "" if subject is None else str(subject)


@dataclass
class Arrays(Repository):
    handles: ClassVar[HandlerSet | None] = HandlerSet.ARRAYS

    @staticmethod
    def typecast(subject: Any) -> Any:
        return utils.to_array(subject)

    @staticmethod
    def get_default() -> Any:
        return []


@dataclass
class Objects(Repository):
    handles: ClassVar[HandlerSet | None] = HandlerSet.OBJECTS

    @staticmethod
    def typecast(subject: Any) -> Any:
        return utils.to_object(subject)

    @staticmethod
    def get_default() -> Any:
        return types.SimpleNamespace()


@dataclass
class Strings(Repository):
    handles: ClassVar[HandlerSet | None] = HandlerSet.STRINGS

    @staticmethod
    def typecast(subject: Any) -> Any:
        if isinstance(subject, (bytes, bytearray)):
            return subject.decode()

        return "" if subject is None else str(subject)

    @staticmethod
    def get_default() -> Any:
        return ""


@dataclass
class Number(Repository):
    handles: ClassVar[HandlerSet | None] = HandlerSet.NUMBER

    @staticmethod
    def typecast(subject: Any) -> Any:
        if isinstance(subject, numbers.Number):
            return subject

        if subject is None:
            return 0

        try:
            return int(subject)
        except (TypeError, ValueError):
            return float(subject)

    @staticmethod
    def get_default() -> Any:
        return 0


@dataclass
class Functions(Repository):
    handles: ClassVar[HandlerSet | None] = HandlerSet.FUNCTIONS

    @staticmethod
    def typecast(subject: Any) -> Any:
        if callable(subject):
            return subject

        return lambda *args, **kwargs: subject

    @staticmethod
    def get_default() -> Any:
        return lambda *args, **kwargs: None


REPOSITORIES: Final[Mapping[HandlerSet, type[Repository]]] = {
    HandlerSet.ARRAYS: Arrays,
    HandlerSet.OBJECTS: Objects,
    HandlerSet.STRINGS: Strings,
    HandlerSet.NUMBER: Number,
    HandlerSet.FUNCTIONS: Functions,
}


def repository_for(value: Any) -> type[Repository]:
    """Return the repository class servicing 'value'.

    Raises UnknownTypeError for values the dispatcher can't classify."""
    return REPOSITORIES[resolve(value)]


def from_(value: Any) -> Repository:
    """Wrap 'value' in the repository matching its kind."""
    return repository_for(value)(value)
