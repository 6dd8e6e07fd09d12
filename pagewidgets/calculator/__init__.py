"""Sequential two-operand calculator.

The controller folds one pending binary operation at a time: pressing a
second operator evaluates the first, there is no precedence.
"""

from pagewidgets.calculator.controller import CalculatorController
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
from pagewidgets.calculator.keys import event_for_key, events_for_keys
from pagewidgets.calculator.numbers import format_number, parse_number
from pagewidgets.calculator.state import CalculatorState

__all__ = [
    "CalculatorController",
    "CalculatorEvent",
    "CalculatorState",
    "ClearPressed",
    "DecimalPressed",
    "DeletePressed",
    "DigitPressed",
    "DivideByZero",
    "EqualsPressed",
    "Operator",
    "OperatorPressed",
    "apply",
    "event_for_key",
    "events_for_keys",
    "format_number",
    "parse_number",
]
