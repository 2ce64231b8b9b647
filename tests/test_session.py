import pytest

from keypad_calc import Calculator
from keypad_calc.state import INITIAL_STATE


def test_session_actions():
    calc = Calculator()
    calc.input_digit("1")
    calc.input_digit(2)
    calc.set_operation("+")
    calc.input_dot()
    calc.input_digit(5)
    calc.compute()
    assert calc.state.display == "12.5"

    calc.backspace()
    assert calc.state.display == "12."

    assert calc.reset() == INITIAL_STATE


def test_press_key_reports_unbound_keys():
    calc = Calculator()
    assert calc.press_key("9") is True
    assert calc.press_key("x") is False
    assert calc.state.display == "9"


def test_invalid_operator_rejected():
    calc = Calculator()
    with pytest.raises(ValueError):
        calc.set_operation("^")


def test_snapshot_pending_operation():
    calc = Calculator()
    for button in ["6", "divide"]:
        calc.press_button(button)
    assert calc.snapshot() == {
        "display": "6",
        "rendered": "6",
        "preview": "6 ÷",
        "previous_value": 6.0,
        "operation": "/",
        "waiting_for_operand": True,
        "mode": "pending_operator",
        "is_error": False,
    }


def test_snapshot_error_and_rendering():
    calc = Calculator()
    for key in ["1", "/", "0", "Enter"]:
        calc.press_key(key)
    snap = calc.snapshot()
    assert snap["is_error"] is True
    assert "error" not in snap
    assert snap["rendered"] == "Error"
    assert snap["mode"] == "error"
    assert snap["preview"] == ""

    calc.reset()
    for key in "99999*99999=":
        calc.press_key(key)
    assert calc.state.display == "9999800001"
    assert calc.rendered == "9.999800e+9"
