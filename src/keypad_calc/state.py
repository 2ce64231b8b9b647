"""
=============================================================================
MODULE NAME: state.py
=============================================================================

INPUT FILES:
- None (value types only).

OUTPUT FILES:
- None.

NOTES:
- CalculatorState is immutable; every input event produces a new value.
- Events are small frozen dataclasses so the engine can dispatch on type.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

ERROR_DISPLAY = "Error"


class Operation(str, Enum):
    """Binary operators the keypad can commit."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
}


@dataclass(frozen=True, slots=True)
class CalculatorState:
    """Everything the calculator remembers between two key presses."""

    display: str = "0"
    previous_value: Optional[float] = None
    operation: Optional[Operation] = None
    waiting_for_operand: bool = False

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_DISPLAY


INITIAL_STATE = CalculatorState()


@dataclass(frozen=True, slots=True)
class Digit:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Digit must be an int, got {self.value!r}")
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit must be between 0 and 9, got {self.value}")


@dataclass(frozen=True, slots=True)
class DecimalPoint:
    pass


@dataclass(frozen=True, slots=True)
class OperatorPressed:
    operation: Operation


@dataclass(frozen=True, slots=True)
class Equals:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


Event = Union[Digit, DecimalPoint, OperatorPressed, Equals, Clear, Backspace]


__all__ = [
    "ERROR_DISPLAY",
    "Operation",
    "CalculatorState",
    "INITIAL_STATE",
    "Digit",
    "DecimalPoint",
    "OperatorPressed",
    "Equals",
    "Clear",
    "Backspace",
    "Event",
]
