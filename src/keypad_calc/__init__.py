"""
Keypad calculator: an immediate-execution arithmetic state machine.

Exposes the pure engine, the display formatter and the session wrapper
used by the web and command-line shells.
"""

from .engine import DivideByZeroError, apply, evaluate
from .formatter import format_display
from .session import Calculator
from .state import (
    INITIAL_STATE,
    Backspace,
    CalculatorState,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Operation,
    OperatorPressed,
)

__version__ = "0.1.0"

__all__ = [
    "INITIAL_STATE",
    "Backspace",
    "Calculator",
    "CalculatorState",
    "Clear",
    "DecimalPoint",
    "Digit",
    "DivideByZeroError",
    "Equals",
    "Operation",
    "OperatorPressed",
    "apply",
    "evaluate",
    "format_display",
]
