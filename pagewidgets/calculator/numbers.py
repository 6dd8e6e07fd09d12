"""Numeral text <-> float conversion for the calculator display.

Parsing takes the longest numeric prefix of the entry, the way a browser's
parseFloat does, so partial entries like "5." or "-" still have a value.
Formatting is the shortest round-trip digit string laid out with the
ECMAScript Number#toString rules, so the same float always renders the
same way regardless of locale or Python's own repr thresholds.
"""

from __future__ import annotations

import math
import re

_NUMERIC_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# Decimal exponent window rendered without "e" notation
_PLAIN_MAX_EXP = 21
_PLAIN_MIN_EXP = -6


def parse_number(text: str) -> float:
    """Parse the leading numeral of text; NaN when there is none."""
    m = _NUMERIC_PREFIX_RE.match(text.lstrip())
    if not m:
        return math.nan
    token = m.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def _shortest_digits(value: float) -> tuple[str, int]:
    """Split a positive finite float into (digits, n) with value = 0.digits * 10**n.

    digits carries no leading or trailing zeros.
    """
    mantissa, _, exp = repr(value).partition("e")
    int_part, _, frac = mantissa.partition(".")
    raw = int_part + frac
    digits = raw.lstrip("0")
    n = len(int_part) + int(exp or 0) - (len(raw) - len(digits))
    return digits.rstrip("0"), n


def format_number(value: float) -> str:
    """Render a float for the display."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(abs(value))
    k = len(digits)

    if k <= n <= _PLAIN_MAX_EXP:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _PLAIN_MAX_EXP:
        return sign + digits[:n] + "." + digits[n:]
    if _PLAIN_MIN_EXP < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    exp_text = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return sign + digits + exp_text
    return sign + digits[0] + "." + digits[1:] + exp_text
