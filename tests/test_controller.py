"""Tests for the calculator state machine.

Covers entry, chaining, equals idempotence, the bare-zero operator guard,
divide-by-zero recovery, delete/clear, and the one-render-per-event rule.
"""

import pytest

from pagewidgets.calculator import (
    CalculatorController,
    CalculatorState,
    DecimalPressed,
    DigitPressed,
    EqualsPressed,
    Operator,
    OperatorPressed,
    events_for_keys,
)
from pagewidgets.models import Severity


# --- Entry ---

def test_initial_state(calc):
    assert calc.display == "0"
    assert calc.state == CalculatorState()


def test_digits_compose(calc):
    assert calc.digit("5") == "5"
    assert calc.digit("5") == "55"


def test_decimal_entry(calc, press):
    assert press("3.14") == "3.14"
    assert press(".") == "3.14"


# --- Operator guard ---

def test_operator_from_initial_state_is_noop(calc, renders):
    assert calc.operator("+") == "0"
    assert calc.state == CalculatorState()
    assert renders == ["0"]


def test_operator_guard_applies_to_zero_result(calc, press):
    press("5-5=")
    assert calc.display == "0"
    calc.operator("*")
    assert calc.state.pending_operator is None


# --- Calculate ---

def test_simple_addition(calc, press):
    assert press("5+3=") == "8"
    s = calc.state
    assert s.current_entry == "8"
    assert s.awaiting_fresh_entry is True
    assert s.pending_operand is None
    assert s.pending_operator is None


@pytest.mark.parametrize("keys, expected", [
    ("10-4=", "6"),
    ("3*7=", "21"),
    ("15/4=", "3.75"),
    ("5-8=", "-3"),
    ("0.1+0.2=", "0.30000000000000004"),
    ("2.5*4=", "10"),
])
def test_arithmetic(calc, keys, expected, press):
    assert press(keys) == expected


def test_chaining_folds_on_second_operator(calc, press):
    press("5+3*")
    s = calc.state
    assert s.current_entry == "8"
    assert s.pending_operand == 8.0
    assert s.pending_operator is Operator.MULTIPLY
    assert press("2=") == "16"


def test_no_precedence(calc, press):
    assert press("2+3*4=") == "20"


def test_repeated_operator_replaces_operator(calc, press):
    press("5+*")
    s = calc.state
    assert s.pending_operand == 5.0
    assert s.pending_operator is Operator.MULTIPLY
    assert press("2=") == "10"


def test_operator_chains_from_result(calc, press):
    press("5+3=")
    assert press("*2=") == "16"


def test_digit_after_result_starts_fresh(calc, press):
    press("5+3=")
    assert calc.digit("7") == "7"
    assert calc.state.pending_operand is None


def test_decimal_after_operator_starts_zero_point(calc, press):
    assert press("5+.5=") == "5.5"


def test_equals_without_pending_is_noop(calc, press):
    press("42")
    assert calc.equals() == "42"
    assert calc.state.awaiting_fresh_entry is False


def test_equals_right_after_operator_is_noop(calc, press):
    press("5+")
    before = calc.state
    calc.equals()
    assert calc.state == before


def test_repeated_equals_is_idempotent(calc, press):
    press("5+3=")
    after_first = calc.state
    calc.equals()
    calc.equals()
    assert calc.state == after_first


# --- Divide by zero ---

def test_divide_by_zero_notifies_and_keeps_state(calc, notes, press):
    press("9/0")
    before = calc.state
    assert calc.equals() == "0"
    assert notes == [("Cannot divide by zero!", Severity.ERROR)]
    assert calc.state == before
    assert calc.state.pending_operand == 9.0
    assert calc.state.pending_operator is Operator.DIVIDE


def test_divide_by_zero_can_be_retried(calc, notes, press):
    press("9/0=")
    calc.delete()
    assert press("3=") == "3"
    assert len(notes) == 1


def test_divide_by_zero_decimal_entry(calc, notes, press):
    press("9/0.0=")
    assert len(notes) == 1
    assert calc.display == "0.0"


def test_refused_fold_captures_entry_as_new_operand(calc, notes, press):
    press("9/0+")
    s = calc.state
    assert len(notes) == 1
    assert s.pending_operand == 0.0
    assert s.pending_operator is Operator.ADD
    assert s.awaiting_fresh_entry is True
    assert press("4=") == "4"


# --- Delete / clear ---

def test_delete(calc, press):
    press("7")
    assert calc.delete() == "0"
    assert calc.delete() == "0"


def test_delete_keeps_pending_operation(calc, press):
    press("5+34")
    calc.delete()
    s = calc.state
    assert s.current_entry == "3"
    assert s.pending_operand == 5.0
    assert press("=") == "8"


@pytest.mark.parametrize("keys", ["", "123.4", "5+", "5+3", "5+3=", "9/0=", "5+3*"])
def test_clear_returns_to_initial_state(calc, keys, press):
    press(keys)
    assert calc.clear() == "0"
    assert calc.state == CalculatorState()


# --- Rendering / dispatch ---

def test_render_once_per_event(calc, renders, press):
    press("5+3=")
    assert renders == ["5", "5", "3", "8"]


def test_render_on_refused_division(calc, renders, press):
    press("9/0=")
    assert renders[-1] == "0"
    assert len(renders) == 4


def test_dispatch_events_directly(calc):
    calc.dispatch(DigitPressed("1"))
    calc.dispatch(DecimalPressed())
    calc.dispatch(DigitPressed("5"))
    calc.dispatch(OperatorPressed(Operator.MULTIPLY))
    calc.dispatch(DigitPressed("2"))
    assert calc.dispatch(EqualsPressed()) == "3"


def test_dispatch_rejects_unknown_event(calc):
    with pytest.raises(TypeError):
        calc.dispatch("5")


def test_state_is_a_snapshot(calc):
    snapshot = calc.state
    snapshot.current_entry = "999"
    assert calc.display == "0"


def test_controller_works_without_collaborators():
    calc = CalculatorController()
    for _, event in events_for_keys("9/0="):
        calc.dispatch(event)
    assert calc.display == "0"


def test_invalid_events_raise():
    with pytest.raises(ValueError):
        DigitPressed("12")
    with pytest.raises(ValueError):
        OperatorPressed("%")


def test_operator_event_accepts_symbol():
    assert OperatorPressed("-").operator is Operator.SUBTRACT
