"""
Calculator engine: pure transitions from one CalculatorState to the next.

Operation model (immediate execution, no precedence):
    1. Digits and the decimal point build the literal in ``display``
    2. An operator commits the literal as the left operand
    3. The next operator or ``=`` evaluates the pending operation eagerly
    4. A divide by zero moves the calculator into the error state
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Optional, Union

from .numbers import number_to_text, parse_number
from .state import (
    ERROR_DISPLAY,
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

EQUALS = "="

MODE_ENTERING = "entering"
MODE_PENDING_OPERATOR = "pending_operator"
MODE_ERROR = "error"


class CalculatorError(Exception):
    """Base class for calculator errors."""


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """Raised by evaluate() when the right operand of a division is zero."""


_OPERATIONS: Dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: lambda a, b: a + b,
    Operation.SUBTRACT: lambda a, b: a - b,
    Operation.MULTIPLY: lambda a, b: a * b,
    Operation.DIVIDE: lambda a, b: a / b,
}


def evaluate(a: float, b: float, op: Optional[Operation]) -> float:
    """
    Apply a single binary operation.

    Args:
        a: Left operand
        b: Right operand
        op: Operation to perform; an unset operator returns ``b``

    Returns:
        Result of the operation

    Raises:
        DivideByZeroError: If dividing by zero
    """
    if op is Operation.DIVIDE and b == 0:
        raise DivideByZeroError(f"cannot divide {a} by zero")
    func = _OPERATIONS.get(op)
    if func is None:
        return b
    return func(a, b)


def input_digit(state: CalculatorState, digit: int) -> CalculatorState:
    if state.waiting_for_operand:
        return replace(state, display=str(digit), waiting_for_operand=False)
    if state.display == "0":
        return replace(state, display=str(digit))
    return replace(state, display=state.display + str(digit))


def input_decimal(state: CalculatorState) -> CalculatorState:
    if state.waiting_for_operand:
        return replace(state, display="0.", waiting_for_operand=False)
    if "." not in state.display:
        return replace(state, display=state.display + ".")
    return state


def backspace(state: CalculatorState) -> CalculatorState:
    """Drop the last typed character; a lone character becomes "0". The error marker stays."""
    if state.is_error:
        return state
    if len(state.display) > 1:
        return replace(state, display=state.display[:-1])
    return replace(state, display="0")


def clear(state: Optional[CalculatorState] = None) -> CalculatorState:
    return INITIAL_STATE


def perform_operation(
    state: CalculatorState, op: Union[Operation, str]
) -> CalculatorState:
    """
    Commit an operator or ``=``.

    Args:
        state: Current state
        op: An Operation, or the string "=" to finish the chain

    Returns:
        The next state. Three cases apply:
            - no left operand yet: the display becomes the left operand
            - an operand was typed since the last operator: evaluate eagerly
            - operator pressed again before typing: replace the operator
    """
    if state.is_error:
        return state

    is_equals = op == EQUALS
    next_operation = None if is_equals else Operation(op)
    input_value = parse_number(state.display)

    if state.previous_value is None:
        return replace(
            state,
            previous_value=input_value,
            operation=next_operation,
            waiting_for_operand=not is_equals,
        )

    if not state.waiting_for_operand:
        try:
            result = evaluate(state.previous_value, input_value, state.operation)
        except DivideByZeroError as e:
            logger.info("Entering error state: %s", e)
            return CalculatorState(
                display=ERROR_DISPLAY,
                previous_value=None,
                operation=None,
                waiting_for_operand=True,
            )

        return CalculatorState(
            display=number_to_text(result),
            previous_value=None if is_equals else result,
            operation=next_operation,
            waiting_for_operand=not is_equals,
        )

    # Operator override; "=" while still waiting changes nothing.
    if is_equals:
        return state
    return replace(state, operation=next_operation)


def _on_operator(state: CalculatorState, event: OperatorPressed) -> CalculatorState:
    return perform_operation(state, event.operation)


_HANDLERS: Dict[type, Callable[[CalculatorState, Event], CalculatorState]] = {
    Digit: lambda state, event: input_digit(state, event.value),
    DecimalPoint: lambda state, event: input_decimal(state),
    OperatorPressed: _on_operator,
    Equals: lambda state, event: perform_operation(state, EQUALS),
    Clear: lambda state, event: clear(state),
    Backspace: lambda state, event: backspace(state),
}


def apply(state: CalculatorState, event: Event) -> CalculatorState:
    """Return the state that follows ``state`` after ``event``."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported calculator event: {event!r}")
    return handler(state, event)


def mode(state: CalculatorState) -> str:
    if state.is_error:
        return MODE_ERROR
    if state.waiting_for_operand:
        return MODE_PENDING_OPERATOR
    return MODE_ENTERING
