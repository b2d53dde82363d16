"""Methods only meaningful for generic objects."""

from typing import Any, Final

from underscore import utils
from underscore.dispatch import HandlerSet
from underscore.methods.base import method
from underscore.methods.collection import first, get

HANDLERS: Final = (HandlerSet.OBJECTS,)


@method()
def methods(obj: Any) -> list[str]:
    """Names of the public callables of obj's class, own class first then its bases.

    Members of 'object' itself and _private names are left out; dunders the
    classes define themselves are kept."""
    found: list[str] = []
    for cls in type(obj).__mro__:
        if cls is object:
            continue

        for name, attr in vars(cls).items():
            if name in found or (name.startswith("_") and not name.startswith("__")):
                continue

            if isinstance(attr, (property, type)):
                continue

            if isinstance(attr, (staticmethod, classmethod)) or callable(attr):
                found.append(name)

    return found


@method()
def unpack(obj: Any, attribute: Any = None) -> Any:
    """Pull a nested value out of 'obj' and return it as an object.

    With no attribute, the first field's value is used:
        unpack(SimpleNamespace(attributes={"name": "foo"})) -> namespace(name='foo')
    """
    view = utils.to_array(obj)
    found = get(view, attribute) if attribute else first(view)

    return utils.to_object(found)
