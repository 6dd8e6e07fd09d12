"""The calculator's mutable state and the two helpers that edit it.

InputBuffer owns the digit/decimal composition rules for the entry under
construction; Accumulator owns the pending left operand and operator.
Both operate on a shared CalculatorState owned by the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pagewidgets.calculator.evaluator import Operator

DIGITS = "0123456789"


@dataclass
class CalculatorState:
    """Everything the calculator remembers between events.

    current_entry is never empty and holds at most one ".".
    awaiting_fresh_entry means the next digit or decimal starts a new
    number instead of extending current_entry.
    """

    current_entry: str = "0"
    pending_operand: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_fresh_entry: bool = False


class InputBuffer:
    """Composes current_entry one key at a time."""

    def __init__(self, state: CalculatorState) -> None:
        self._state = state

    @property
    def value(self) -> str:
        return self._state.current_entry

    def append_digit(self, digit: str) -> None:
        s = self._state
        if s.awaiting_fresh_entry:
            s.current_entry = digit
            s.awaiting_fresh_entry = False
        elif s.current_entry == "0":
            s.current_entry = digit
        else:
            s.current_entry += digit

    def append_decimal(self) -> None:
        s = self._state
        if s.awaiting_fresh_entry:
            s.current_entry = "0."
            s.awaiting_fresh_entry = False
        elif "." not in s.current_entry:
            s.current_entry += "."

    def delete_last(self) -> None:
        s = self._state
        if len(s.current_entry) <= 1:
            s.current_entry = "0"
        else:
            s.current_entry = s.current_entry[:-1]

    def reset(self) -> None:
        self._state.current_entry = "0"

    def replace(self, text: str) -> None:
        """Show a computed value; the next digit starts a new number."""
        self._state.current_entry = text
        self._state.awaiting_fresh_entry = True


class Accumulator:
    """Holds the left operand and operator of the one pending operation."""

    def __init__(self, state: CalculatorState) -> None:
        self._state = state

    @property
    def operand(self) -> Optional[float]:
        return self._state.pending_operand

    @property
    def operator(self) -> Optional[Operator]:
        return self._state.pending_operator

    @property
    def pending(self) -> bool:
        """True while a left operand is waiting for its right-hand side."""
        return self._state.pending_operand is not None

    def capture(self, operator: Operator, value: float) -> None:
        s = self._state
        s.pending_operand = value
        s.pending_operator = operator
        s.awaiting_fresh_entry = True

    def clear_all(self) -> None:
        s = self._state
        s.pending_operand = None
        s.pending_operator = None
        s.awaiting_fresh_entry = False
