"""Input events accepted by the calculator controller.

CalculatorEvent is a tagged union: exactly one of the six classes below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pagewidgets.calculator.evaluator import Operator
from pagewidgets.calculator.state import DIGITS


@dataclass(frozen=True)
class DigitPressed:
    digit: str

    def __post_init__(self) -> None:
        if len(self.digit) != 1 or self.digit not in DIGITS:
            raise ValueError(f"Not a digit: {self.digit!r}")


@dataclass(frozen=True)
class DecimalPressed:
    pass


@dataclass(frozen=True)
class OperatorPressed:
    operator: Operator

    def __post_init__(self) -> None:
        # Accept the bare symbol ("+") as well as the enum member
        object.__setattr__(self, "operator", Operator(self.operator))


@dataclass(frozen=True)
class EqualsPressed:
    pass


@dataclass(frozen=True)
class ClearPressed:
    pass


@dataclass(frozen=True)
class DeletePressed:
    pass


CalculatorEvent = Union[
    DigitPressed,
    DecimalPressed,
    OperatorPressed,
    EqualsPressed,
    ClearPressed,
    DeletePressed,
]
