"""Display formatting: bound the width of what the keypad screen shows."""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from .numbers import number_to_text, parse_number
from .state import ERROR_DISPLAY

MAX_PLAIN_MAGNITUDE = 999_999_999
MIN_PLAIN_MAGNITUDE = 0.000001
MAX_LITERAL_LENGTH = 12

EXPONENT_DIGITS = 6
FIXED_DIGITS = 8

_TRAILING_ZEROS = re.compile(r"\.?0+$")


def _round_half_up(value: Decimal, exponent: int) -> Decimal:
    # Ties round away from zero, on the exact binary value of the float.
    return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


def _exponential(value: float) -> str:
    exact = Decimal(value)
    exp = exact.adjusted()
    rounded = _round_half_up(exact, exp - EXPONENT_DIGITS)
    if rounded.adjusted() > exp:
        # 9.9999995 rounds up to 10.000000
        exp += 1
        rounded = _round_half_up(exact, exp - EXPONENT_DIGITS)
    mantissa = rounded.scaleb(-exp)
    sign = "-" if exp < 0 else "+"
    return f"{mantissa}e{sign}{abs(exp)}"


def _fixed(value: float) -> str:
    rounded = _round_half_up(Decimal(value), -FIXED_DIGITS)
    return _TRAILING_ZEROS.sub("", format(rounded, "f"), count=1)


def format_display(text: str) -> str:
    """
    Map raw display text to the string rendered on screen.

    Args:
        text: The engine's raw ``display`` value

    Returns:
        Exponential notation for very large or very small magnitudes, a
        rounded fixed-point form for long decimal literals, otherwise
        ``text`` unchanged
    """
    if text == ERROR_DISPLAY:
        return text

    value = parse_number(text)
    if math.isnan(value):
        return text
    if math.isinf(value):
        return number_to_text(value)

    magnitude = abs(value)
    if magnitude > MAX_PLAIN_MAGNITUDE or (magnitude < MIN_PLAIN_MAGNITUDE and value != 0):
        return _exponential(value)

    if "." in text and len(text) > MAX_LITERAL_LENGTH:
        return _fixed(value)

    return text
