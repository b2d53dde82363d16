"""Methods for text. None is dispatched here too and behaves like an empty string."""

from typing import Any, Final

from underscore import utils
from underscore.dispatch import HandlerSet
from underscore.methods.base import method

HANDLERS: Final = (HandlerSet.STRINGS,)


def _text(value: Any) -> str:
    if value is None:
        return ""

    if isinstance(value, (bytes, bytearray)):
        return value.decode()

    return str(value)


@method()
def length(value: Any) -> int:
    return len(_text(value))


@method()
def lower(value: Any) -> str:
    return _text(value).lower()


@method()
def upper(value: Any) -> str:
    return _text(value).upper()


@method()
def title(value: Any) -> str:
    return _text(value).title()


@method()
def from_json(value: Any) -> Any:
    return utils.from_json(value)
