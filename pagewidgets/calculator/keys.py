"""Keyboard translation for hosts that drive the calculator from keys.

Maps single keys (characters or named keys like "Enter") to events.
"""

from __future__ import annotations

from typing import Optional

from pagewidgets.calculator.evaluator import Operator
from pagewidgets.calculator.events import (
    CalculatorEvent,
    ClearPressed,
    DecimalPressed,
    DeletePressed,
    DigitPressed,
    EqualsPressed,
    OperatorPressed,
)
from pagewidgets.calculator.state import DIGITS

# Typographic operator aliases found on keypads and in pasted text
_OPERATOR_ALIASES = {
    "x": Operator.MULTIPLY,
    "X": Operator.MULTIPLY,
    "×": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "−": Operator.SUBTRACT,
}

_EQUALS_KEYS = ("=", "Enter")
_CLEAR_KEYS = ("c", "C", "Escape")
_DELETE_KEYS = ("<", "Backspace")


def event_for_key(key: str) -> Optional[CalculatorEvent]:
    """Translate one key into an event, or None if the key means nothing."""
    if len(key) == 1 and key in DIGITS:
        return DigitPressed(key)
    if key == ".":
        return DecimalPressed()
    if key in _OPERATOR_ALIASES:
        return OperatorPressed(_OPERATOR_ALIASES[key])
    if key in ("+", "-", "*", "/"):
        return OperatorPressed(Operator(key))
    if key in _EQUALS_KEYS:
        return EqualsPressed()
    if key in _CLEAR_KEYS:
        return ClearPressed()
    if key in _DELETE_KEYS:
        return DeletePressed()
    return None


def events_for_keys(text: str) -> list[tuple[str, CalculatorEvent]]:
    """Translate a string of single-character keys, skipping whitespace.

    Returns (key, event) pairs in input order.

    Raises:
        ValueError: text contains a key with no calculator meaning.
    """
    pairs = []
    for key in text:
        if key.isspace():
            continue
        event = event_for_key(key)
        if event is None:
            raise ValueError(f"Unknown calculator key: {key!r}")
        pairs.append((key, event))
    return pairs
