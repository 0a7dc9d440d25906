# tests/test_expressions.py
"""
Tests for the expression tree: evaluation against a store, free-variable
extraction and rendering.
"""
import itertools

import pytest

from logicsim_core import (
    Signal, And, Or, Not, evaluate, free_variables,
    VariableStore, UnboundSignalError,
)


@pytest.fixture
def store():
    return VariableStore({"p": True, "q": False, "r": True})


def test_signal_reads_store(store):
    assert Signal("p").eval(store) is True
    assert Signal("q").eval(store) is False


@pytest.mark.parametrize("a, b", list(itertools.product([False, True], repeat=2)))
def test_truth_tables(a, b):
    store = VariableStore({"a": a, "b": b})
    assert evaluate(And(Signal("a"), Signal("b")), store) == (a and b)
    assert evaluate(Or(Signal("a"), Signal("b")), store) == (a or b)
    assert evaluate(Not(Signal("a")), store) == (not a)


def test_nested_expression(store):
    # (p and not q) or (q and r)
    expr = Or(And(Signal("p"), Not(Signal("q"))), And(Signal("q"), Signal("r")))
    assert expr.eval(store) is True


def test_unbound_signal_is_fatal(store):
    with pytest.raises(UnboundSignalError) as excinfo:
        Signal("missing").eval(store)
    assert excinfo.value.signal_name == "missing"
    assert "Unbound Signal Reference" in excinfo.value.get_diagnostic_report()


def test_and_evaluates_both_operands(store):
    """The left operand already decides the result, but the unbound right one is still reported."""
    with pytest.raises(UnboundSignalError):
        And(Signal("q"), Signal("missing")).eval(store)
    with pytest.raises(UnboundSignalError):
        Or(Signal("p"), Signal("missing")).eval(store)


def test_evaluation_is_idempotent(store):
    expr = Or(And(Signal("p"), Not(Signal("q"))), Signal("r"))
    before = store.as_dict()
    assert expr.eval(store) == expr.eval(store)
    assert store.as_dict() == before


def test_free_variables_of_composite():
    assert free_variables(And(Signal("p"), Not(Signal("q")))) == ["p", "q"]


def test_free_variables_keeps_duplicates_and_order():
    expr = Or(And(Signal("b"), Signal("a")), Not(Signal("b")))
    assert expr.free_variables() == ["b", "a", "b"]


def test_expressions_are_immutable_values():
    expr = And(Signal("a"), Signal("b"))
    assert expr == And(Signal("a"), Signal("b"))
    with pytest.raises(AttributeError):
        expr.left = Signal("c")


def test_str_rendering():
    assert str(Or(And(Signal("a"), Not(Signal("b"))), Signal("c"))) == "((a and not b) or c)"


def test_non_expression_is_rejected(store):
    with pytest.raises(TypeError):
        evaluate("a", store)
    with pytest.raises(TypeError):
        free_variables(42)
