"""Methods for numbers."""

from typing import Any, Final

from underscore.dispatch import HandlerSet
from underscore.methods.base import method

HANDLERS: Final = (HandlerSet.NUMBER,)


@method()
def padding(number: Any, amount: int = 1, direction: str = "both") -> str:
    """Zero-pad the string form of 'number' by 'amount' characters.

    Padding on both sides puts the odd character on the right:
        padding(5, 3) -> "0500"
    """
    text = str(number)
    amount = max(amount, 0)

    match direction:
        case "left":
            return "0" * amount + text
        case "right":
            return text + "0" * amount
        case _:
            left = amount // 2
            return "0" * left + text + "0" * (amount - left)


@method()
def padding_left(number: Any, amount: int = 1) -> str:
    return padding(number, amount, "left")


@method()
def padding_right(number: Any, amount: int = 1) -> str:
    return padding(number, amount, "right")
