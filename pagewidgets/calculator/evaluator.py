"""Binary arithmetic for the calculator.

Operands are IEEE-754 doubles; no fixed-point or arbitrary-precision
guarantee is made (0.1 + 0.2 is 0.30000000000000004 here too).
"""

from __future__ import annotations

from enum import Enum


class Operator(str, Enum):
    """The four calculator operators, valued by their key symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class DivideByZero(ZeroDivisionError):
    """Raised when the right operand of a division is zero."""

    def __init__(self, message: str = "Cannot divide by zero!") -> None:
        super().__init__(message)


def apply(operator: Operator, left: float, right: float) -> float:
    """Apply operator to (left, right).

    Args:
        operator: One of the four calculator operators.
        left: Pending operand captured when the operator was pressed.
        right: Value of the entry typed after it.

    Returns:
        The arithmetic result, possibly inf or NaN.

    Raises:
        DivideByZero: operator is DIVIDE and right is zero (either sign).
    """
    if operator == Operator.ADD:
        return left + right
    if operator == Operator.SUBTRACT:
        return left - right
    if operator == Operator.MULTIPLY:
        return left * right
    if operator == Operator.DIVIDE:
        if right == 0:
            raise DivideByZero()
        return left / right
    raise ValueError(f"Unknown operator: {operator!r}")
