"""
Translate physical keys and on-screen buttons into calculator events.

Keyboard and pointer input share one event set, so the same logical press
always produces the same transition.
"""

from typing import Dict, Optional

from .engine import CalculatorError
from .numbers import number_to_text
from .state import (
    Backspace,
    CalculatorState,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Event,
    Operation,
    OperatorPressed,
)


class UnknownButtonError(CalculatorError, KeyError):
    """Raised for a button id that is not on the keypad."""


_DIGITS: Dict[str, Event] = {str(d): Digit(d) for d in range(10)}

KEYBOARD: Dict[str, Event] = {
    **_DIGITS,
    ".": DecimalPoint(),
    "+": OperatorPressed(Operation.ADD),
    "-": OperatorPressed(Operation.SUBTRACT),
    "*": OperatorPressed(Operation.MULTIPLY),
    "/": OperatorPressed(Operation.DIVIDE),
    "Enter": Equals(),
    "=": Equals(),
    "Escape": Clear(),
    "c": Clear(),
    "C": Clear(),
    "Backspace": Backspace(),
}

BUTTONS: Dict[str, Event] = {
    **_DIGITS,
    "decimal": DecimalPoint(),
    "add": OperatorPressed(Operation.ADD),
    "subtract": OperatorPressed(Operation.SUBTRACT),
    "multiply": OperatorPressed(Operation.MULTIPLY),
    "divide": OperatorPressed(Operation.DIVIDE),
    "equals": Equals(),
    "clear": Clear(),
    "backspace": Backspace(),
}


def event_for_key(key: str) -> Optional[Event]:
    """Return the event bound to a keyboard key name, or None if the key is unbound."""
    return KEYBOARD.get(key)


def event_for_button(button_id: str) -> Event:
    try:
        return BUTTONS[button_id]
    except KeyError:
        raise UnknownButtonError(button_id) from None


def preview_line(state: CalculatorState) -> str:
    """
    Text for the small line above the display, e.g. "12 ×".

    Empty unless both a left operand and a pending operator are present.
    """
    if state.operation is None or state.previous_value is None:
        return ""
    return f"{number_to_text(state.previous_value)} {state.operation.symbol}"
