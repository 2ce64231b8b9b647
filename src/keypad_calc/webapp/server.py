"""
Flask server for the keypad calculator web UI.

Serves the keypad page and a small JSON API that forwards button and
keyboard presses into a single calculator session.
"""

import logging
import threading

from flask import Flask, jsonify, render_template, request

from .. import config
from ..keymap import UnknownButtonError
from ..session import Calculator

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Global calculator session; the dev server is threaded, so guard it.
calculator = Calculator()
_calculator_lock = threading.Lock()

_ACTIONS = ("digit", "dot", "op", "equals", "clear", "backspace")
_DIGITS = {str(d) for d in range(10)}


@app.route("/")
def index():
    """Render the keypad page."""
    with _calculator_lock:
        snapshot = calculator.snapshot()
    return render_template("index.html", snapshot=snapshot)


@app.route("/api/state", methods=["GET"])
def get_state():
    """Return the current calculator snapshot."""
    with _calculator_lock:
        return jsonify(calculator.snapshot())


@app.route("/api/calculate", methods=["POST"])
def calculate():
    """
    Handle calculator actions via API.

    Expected JSON payload:
        {
            "action": "digit|dot|op|equals|clear|backspace",
            "value": "..."  // digit 0-9 or operator + - * /
        }

    Returns:
        JSON snapshot of the calculator state
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not data:
        return jsonify({"error": "No data provided"}), 400

    action = data.get("action", "")
    value = data.get("value")

    if action not in _ACTIONS:
        return jsonify({"error": f"Unknown action: {action}"}), 400

    if action == "digit" and str(value) not in _DIGITS:
        return jsonify({"error": f"Invalid digit: {value}"}), 400
    if action == "op" and value not in ("+", "-", "*", "/"):
        return jsonify({"error": f"Invalid operator: {value}"}), 400

    with _calculator_lock:
        if action == "digit":
            calculator.input_digit(value)
        elif action == "dot":
            calculator.input_dot()
        elif action == "op":
            calculator.set_operation(value)
        elif action == "equals":
            calculator.compute()
        elif action == "clear":
            calculator.reset()
        elif action == "backspace":
            calculator.backspace()
        return jsonify(calculator.snapshot())


@app.route("/api/key", methods=["POST"])
def press_key():
    """
    Forward a keyboard key name, e.g. {"key": "Enter"}.

    Unbound keys are ignored, as a keyboard would ignore them.
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not isinstance(data.get("key"), str):
        return jsonify({"error": "key is required"}), 400

    with _calculator_lock:
        calculator.press_key(data["key"])
        return jsonify(calculator.snapshot())


@app.route("/api/button", methods=["POST"])
def press_button():
    """Forward an on-screen button id, e.g. {"button": "multiply"}."""
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not isinstance(data.get("button"), str):
        return jsonify({"error": "button is required"}), 400

    with _calculator_lock:
        try:
            calculator.press_button(data["button"])
        except UnknownButtonError:
            logger.warning("Rejected unknown button %r", data["button"])
            return jsonify({"error": f"Unknown button: {data['button']}"}), 400
        return jsonify(calculator.snapshot())


@app.route("/api/reset", methods=["POST"])
def reset():
    """Reset calculator to initial state."""
    with _calculator_lock:
        calculator.reset()
        return jsonify(calculator.snapshot())


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the keypad calculator web server")
    parser.add_argument(
        "--host",
        default=config.HOST,
        help=f"Host to bind to (default: {config.HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.PORT,
        help=f"Port to bind to (default: {config.PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )

    args = parser.parse_args()
    config.configure_logging(args.log_level)

    print("Starting keypad calculator web server...")
    print(f"Access at: http://{args.host}:{args.port}")

    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
