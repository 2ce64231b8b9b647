import pytest

from keypad_calc import engine
from keypad_calc.keymap import (
    BUTTONS,
    UnknownButtonError,
    event_for_button,
    event_for_key,
    preview_line,
)
from keypad_calc.state import INITIAL_STATE, CalculatorState, Clear, Equals, Operation

KEY_TO_BUTTON = {
    "7": "7",
    ".": "decimal",
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    "Enter": "equals",
    "Escape": "clear",
    "Backspace": "backspace",
}


@pytest.mark.parametrize("key, button", sorted(KEY_TO_BUTTON.items()))
def test_keyboard_and_buttons_agree(key, button):
    assert event_for_key(key) == event_for_button(button)


def test_equivalent_sequences_reach_same_state():
    keys = ["1", "2", "*", "3", "Enter"]
    buttons = ["1", "2", "multiply", "3", "equals"]
    by_key = INITIAL_STATE
    for key in keys:
        by_key = engine.apply(by_key, event_for_key(key))
    by_button = INITIAL_STATE
    for button in buttons:
        by_button = engine.apply(by_button, event_for_button(button))
    assert by_key == by_button
    assert by_key.display == "36"


def test_alternate_keys():
    assert event_for_key("=") == Equals()
    assert event_for_key("c") == event_for_key("C") == Clear()
    assert event_for_key("x") is None
    assert event_for_key("Shift") is None


def test_every_button_has_an_event():
    assert set(BUTTONS) == {str(d) for d in range(10)} | {
        "decimal",
        "add",
        "subtract",
        "multiply",
        "divide",
        "equals",
        "clear",
        "backspace",
    }
    with pytest.raises(UnknownButtonError):
        event_for_button("percent")
    with pytest.raises(KeyError):
        event_for_button("")


def test_preview_line():
    assert preview_line(INITIAL_STATE) == ""
    assert preview_line(CalculatorState(previous_value=5.0)) == ""
    assert preview_line(CalculatorState(previous_value=5.0, operation=Operation.MULTIPLY)) == "5 ×"
    assert preview_line(CalculatorState(previous_value=2.5, operation=Operation.DIVIDE)) == "2.5 ÷"
    assert preview_line(CalculatorState(previous_value=-1.0, operation=Operation.SUBTRACT)) == "-1 -"
