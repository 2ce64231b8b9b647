from functools import reduce

import pytest

from keypad_calc import engine
from keypad_calc.keymap import event_for_key
from keypad_calc.state import INITIAL_STATE


def run_keys(*keys, state=INITIAL_STATE):
    """Replay keyboard keys through the engine from ``state``."""
    return reduce(lambda s, key: engine.apply(s, event_for_key(key)), keys, state)


@pytest.fixture
def press():
    return run_keys
