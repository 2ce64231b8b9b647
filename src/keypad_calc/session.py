"""
Calculator session: the one mutable holder of state for a shell.

Shells call the action methods (or ``press_key`` / ``press_button``) and
read back ``snapshot()`` for rendering.
"""

import logging
from typing import Dict, Optional, Union

from . import engine
from .formatter import format_display
from .keymap import event_for_button, event_for_key, preview_line
from .state import (
    INITIAL_STATE,
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

logger = logging.getLogger(__name__)


class Calculator:
    """Calculator session managing state and operations."""

    def __init__(self, state: Optional[CalculatorState] = None):
        self.state = state if state is not None else INITIAL_STATE

    def apply(self, event: Event) -> CalculatorState:
        """
        Apply one input event and keep the resulting state.

        Args:
            event: Any calculator event

        Returns:
            The new state
        """
        before = self.state
        self.state = engine.apply(before, event)
        logger.debug("%r: %r -> %r", event, before, self.state)
        return self.state

    def reset(self) -> CalculatorState:
        """Reset calculator to initial state."""
        return self.apply(Clear())

    def input_digit(self, digit: Union[int, str]) -> CalculatorState:
        return self.apply(Digit(int(digit)))

    def input_dot(self) -> CalculatorState:
        return self.apply(DecimalPoint())

    def set_operation(self, op: Union[Operation, str]) -> CalculatorState:
        return self.apply(OperatorPressed(Operation(op)))

    def compute(self) -> CalculatorState:
        return self.apply(Equals())

    def backspace(self) -> CalculatorState:
        return self.apply(Backspace())

    def press_key(self, key: str) -> bool:
        """
        Feed a keyboard key name.

        Returns:
            True if the key is bound to an event, False if it was ignored
        """
        event = event_for_key(key)
        if event is None:
            logger.debug("Ignoring unbound key %r", key)
            return False
        self.apply(event)
        return True

    def press_button(self, button_id: str) -> CalculatorState:
        return self.apply(event_for_button(button_id))

    @property
    def rendered(self) -> str:
        return format_display(self.state.display)

    def snapshot(self) -> Dict:
        """JSON-serializable view of the current state for the shells."""
        state = self.state
        return {
            "display": state.display,
            "rendered": format_display(state.display),
            "preview": preview_line(state),
            "previous_value": state.previous_value,
            "operation": state.operation.value if state.operation else None,
            "waiting_for_operand": state.waiting_for_operand,
            "mode": engine.mode(state),
            "is_error": state.is_error,
        }
