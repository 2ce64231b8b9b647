"""
Conversions between display text and floats.

The display holds literals that are still being typed ("12.", "-", "1e+"),
so parsing takes the longest numeric prefix instead of the whole string.
"""

import math
import re
from decimal import Decimal

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Results at or beyond this magnitude are written in exponent form.
_POSITIONAL_LIMIT = 1e21


def parse_number(text: str) -> float:
    """
    Parse the leading numeric literal of ``text``.

    Args:
        text: Display text, possibly an unfinished literal

    Returns:
        The parsed value, or NaN when no numeric prefix exists
    """
    match = _NUMERIC_PREFIX.match(text.strip())
    if not match:
        return math.nan
    return float(match.group(0))


def number_to_text(value: float) -> str:
    """
    Render a computed result as the literal the display should hold.

    Integral results drop the fractional part ("8", not "8.0"). Other values
    use the shortest round-trip digits, positional for exponents from -6 up
    to 20 and ``<mantissa>e<sign><exponent>`` outside that range.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < _POSITIONAL_LIMIT:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"
