"""Utils.py

Generic views and conversions shared by every method table: how to look at
any value as key -> value pairs, how to turn it back into an object, and how
to serialize it.
"""

import dataclasses
import datetime
import json
import platform
import types
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from typing import Any

from loguru import logger

from underscore.config import SETTINGS
from underscore.dispatch import TEXT_TYPES, Kind, classify
from underscore.errors import UnknownTypeError

ourjson: types.ModuleType
# Only use orjson under CPython, else use default json (because `json` under pypy is faster than orjson)
# (also we are doing this "import name, assign name to global" to get around mypy complaining about double importing with the same alias)
if platform.python_implementation() == "CPython" and SETTINGS.json != "json":
    import orjson

    ourjson = orjson
else:
    ourjson = json


def is_text(value: Any) -> bool:
    return isinstance(value, TEXT_TYPES)


def is_sequence(value: Any) -> bool:
    """Ordered, integer-indexed containers (but never strings)."""
    return isinstance(value, Sequence) and not is_text(value)


def is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_record(value: Any) -> bool:
    """True for generic objects exposing named fields."""
    try:
        return classify(value) is Kind.RECORD
    except UnknownTypeError:
        return False


def is_container(value: Any) -> bool:
    """Anything a path can walk into."""
    return isinstance(value, Mapping) or is_sequence(value) or is_record(value)


def record_fields(obj: Any) -> dict[str, Any]:
    """Return the instance data of 'obj' (slots first, then __dict__).

    Only instance data is returned, so methods and class attributes never
    show up as fields."""
    data: dict[str, Any] = {}
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)

        for name in slots:
            if name in {"__dict__", "__weakref__"}:
                continue

            # unset slots raise AttributeError, so they just aren't fields yet
            if hasattr(obj, name):
                data[name] = getattr(obj, name)

    if hasattr(obj, "__dict__"):
        data.update(vars(obj))

    return data


def entries(value: Any) -> list[tuple[Any, Any]]:
    """View any value as an ordered list of (key, value) pairs."""
    if value is None:
        return []

    if isinstance(value, Mapping):
        return list(value.items())

    if is_sequence(value) or isinstance(value, Set):
        return list(enumerate(value))

    if is_record(value):
        return list(record_fields(value).items())

    return [(0, value)]


def to_array(value: Any) -> dict[Any, Any] | list[Any]:
    """Shallow conversion to a plain dict (keyed things) or list (everything else)."""
    if value is None:
        return []

    if isinstance(value, Mapping):
        return dict(value)

    if is_sequence(value) or isinstance(value, Set):
        return list(value)

    if is_record(value):
        return record_fields(value)

    return [value]


def to_object(value: Any) -> Any:
    """Coerce 'value' into a generic object.

    Records are returned as-is. Containers become a SimpleNamespace keyed by
    str(key), None becomes an empty SimpleNamespace and scalars are stored
    under the 'scalar' field."""
    if value is None:
        return types.SimpleNamespace()

    if is_record(value):
        return value

    if is_namedtuple(value):
        return types.SimpleNamespace(**value._asdict())

    if isinstance(value, Mapping) or is_sequence(value) or isinstance(value, Set):
        return types.SimpleNamespace(**{str(k): v for k, v in entries(value)})

    return types.SimpleNamespace(scalar=value)


def with_field(obj: Any, name: str, value: Any) -> Any:
    """Return a copy of record 'obj' with field 'name' set to 'value'.

    Used when 'obj' refuses assignment (frozen dataclasses, slotted classes
    without the slot, builtin instances)."""
    logger.debug("Rebuilding {} to set field {}", type(obj).__name__, name)

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        if name in {f.name for f in dataclasses.fields(obj) if f.init}:
            return dataclasses.replace(obj, **{name: value})

    return types.SimpleNamespace(**{**record_fields(obj), name: value})


def without_field(obj: Any, name: str) -> Any:
    """Return a copy of record 'obj' without field 'name'."""
    logger.debug("Rebuilding {} to drop field {}", type(obj).__name__, name)

    data = record_fields(obj)
    data.pop(name, None)
    return types.SimpleNamespace(**data)


def jsonable(value: Any) -> Any:
    """Fallback encoder for types neither JSON backend handles natively."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode()

    if isinstance(value, Decimal):
        return str(value)

    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()

    if is_namedtuple(value) or isinstance(value, Set):
        return list(value)

    if isinstance(value, Mapping):
        return dict(value)

    if is_record(value):
        return record_fields(value)

    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def to_json(value: Any) -> str:
    """Compact JSON like {"foo":"bar"} with keys in insertion order.

    Values orjson refuses outright (integers beyond 64 bits) go through json
    so both backends produce the same output."""
    if ourjson.__name__ == "orjson":
        try:
            return ourjson.dumps(
                value, default=jsonable, option=ourjson.OPT_NON_STR_KEYS
            ).decode()
        except ourjson.JSONEncodeError as e:
            logger.debug("orjson refused value, encoding with json: {}", e)

    return json.dumps(
        value, default=jsonable, separators=(",", ":"), ensure_ascii=False
    )


def from_json(text: str | bytes) -> Any:
    return ourjson.loads(text)
