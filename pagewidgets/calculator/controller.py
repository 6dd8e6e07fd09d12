"""Calculator state machine.

One CalculatorController per keypad. Each event is handled to completion
and ends with exactly one render of the display string. The phase the
machine is in (idle, operator pending, entering the right operand) is
implied by pending_operator and awaiting_fresh_entry rather than stored.
"""

from __future__ import annotations

import dataclasses
from typing import Callable, Optional

from pagewidgets.calculator.evaluator import DivideByZero, Operator, apply
from pagewidgets.calculator.events import (
    CalculatorEvent,
    ClearPressed,
    DecimalPressed,
    DeletePressed,
    DigitPressed,
    EqualsPressed,
    OperatorPressed,
)
from pagewidgets.calculator.numbers import format_number, parse_number
from pagewidgets.calculator.state import Accumulator, CalculatorState, InputBuffer
from pagewidgets.models import Severity
from pagewidgets.notify import Notifier

RenderSink = Callable[[str], None]


def _ignore_render(display: str) -> None:
    pass


def _ignore_notify(message: str, severity: Severity) -> None:
    pass


class CalculatorController:
    """Drives InputBuffer and Accumulator from keypad events.

    Args:
        render: Called with the display string after every event.
        notify: Called as notify(message, severity) when a division by
            zero is refused.
    """

    def __init__(
        self,
        render: Optional[RenderSink] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self._state = CalculatorState()
        self._buffer = InputBuffer(self._state)
        self._accumulator = Accumulator(self._state)
        self._render = _ignore_render if render is None else render
        self._notify = _ignore_notify if notify is None else notify

    @property
    def display(self) -> str:
        return self._buffer.value

    @property
    def state(self) -> CalculatorState:
        """A copy of the current state; mutating it has no effect."""
        return dataclasses.replace(self._state)

    def dispatch(self, event: CalculatorEvent) -> str:
        """Apply one event and render. Returns the display string."""
        if isinstance(event, DigitPressed):
            self._buffer.append_digit(event.digit)
        elif isinstance(event, DecimalPressed):
            self._buffer.append_decimal()
        elif isinstance(event, OperatorPressed):
            self._press_operator(event.operator)
        elif isinstance(event, EqualsPressed):
            self._calculate()
        elif isinstance(event, ClearPressed):
            self._buffer.reset()
            self._accumulator.clear_all()
        elif isinstance(event, DeletePressed):
            self._buffer.delete_last()
        else:
            raise TypeError(f"Unknown calculator event: {event!r}")

        display = self.display
        self._render(display)
        return display

    # Host-facing shorthands, one per keypad button

    def digit(self, d: str) -> str:
        return self.dispatch(DigitPressed(d))

    def decimal(self) -> str:
        return self.dispatch(DecimalPressed())

    def operator(self, op: Operator | str) -> str:
        return self.dispatch(OperatorPressed(Operator(op)))

    def equals(self) -> str:
        return self.dispatch(EqualsPressed())

    def clear(self) -> str:
        return self.dispatch(ClearPressed())

    def delete(self) -> str:
        return self.dispatch(DeletePressed())

    def _press_operator(self, op: Operator) -> None:
        # A bare untouched zero cannot start a chain, so "0 - 5" is
        # unreachable from the initial state.
        if self._buffer.value == "0" and not self._accumulator.pending:
            return

        if self._accumulator.pending and not self._state.awaiting_fresh_entry:
            # Fold the pending operation; on a refused division the
            # current entry becomes the new left operand unchanged.
            self._calculate()

        self._accumulator.capture(op, parse_number(self._buffer.value))

    def _calculate(self) -> None:
        """Evaluate the pending operation into the entry, if it has both operands."""
        if not self._accumulator.pending or self._state.awaiting_fresh_entry:
            return

        try:
            result = apply(
                self._accumulator.operator,
                self._accumulator.operand,
                parse_number(self._buffer.value),
            )
        except DivideByZero as e:
            self._notify(str(e), Severity.ERROR)
            return

        self._accumulator.clear_all()
        self._buffer.replace(format_number(result))
