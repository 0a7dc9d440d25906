# tests/test_circuit_validation.py
"""
Structural validation performed when a Circuit is constructed.
"""
import logging

import pytest

from logicsim_core import (
    Circuit, Latch, Update, Signal, Trace,
    StructuralValidationError, StructuralIssueCode, ValidationIssueLevel,
)
from conftest import make_circuit, bits

NAMESPACE = StructuralIssueCode.SIG_NAMESPACE_CONFLICT.code
LENGTH = StructuralIssueCode.STIM_LENGTH_MISMATCH.code


# --- Namespace uniqueness ---

@pytest.mark.parametrize("latches, updates", [
    # input name reused as a latch output
    ([("b", "a")], [("c", "b")]),
    # input name reused as an update output
    ([], [("a", "b")]),
    # two updates share an output
    ([], [("c", "a"), ("c", "b")]),
    # latch output reused as an update output
    ([("a", "c")], [("c", "b")]),
    # two latches share an output
    ([("a", "c"), ("b", "c")], []),
])
def test_namespace_violation_is_rejected(latches, updates):
    with pytest.raises(StructuralValidationError) as excinfo:
        make_circuit({"a": "10", "b": "01"}, outputs=["c"], latches=latches, updates=updates)
    assert NAMESPACE in excinfo.value.codes


def test_duplicate_input_names_are_a_namespace_violation():
    with pytest.raises(StructuralValidationError) as excinfo:
        Circuit(
            name="dup",
            input_names=["a", "a"],
            output_names=["c"],
            latches=[],
            updates=[Update("c", Signal("a"))],
            input_traces=[Trace("a", bits("10")), Trace("a", bits("10"))],
        )
    assert excinfo.value.codes == [NAMESPACE]


def test_namespace_report_names_the_producers():
    with pytest.raises(StructuralValidationError) as excinfo:
        make_circuit({"a": "1"}, outputs=["c"], updates=[("c", "a"), ("c", "not a")])
    report = excinfo.value.get_diagnostic_report()
    assert "Structural Validation Error" in report
    assert "Signal 'c' is produced 2 times" in report
    assert "Circuit:        TestCircuit" in report


# --- Stimulus shape ---

def test_unequal_stimulus_lengths_are_rejected():
    with pytest.raises(StructuralValidationError) as excinfo:
        make_circuit({"a": "101", "b": "110", "c": "1100"}, outputs=["d"], updates=[("d", "a")])
    assert excinfo.value.codes == [LENGTH]
    assert "All inputs must be same length" in str(excinfo.value)


def test_equal_stimulus_lengths_define_simulation_length():
    circuit = make_circuit({"a": "101", "b": "110", "c": "100"}, outputs=["d"], updates=[("d", "a")])
    assert circuit.simulation_length == 3


def test_trace_count_must_match_inputs():
    with pytest.raises(StructuralValidationError) as excinfo:
        Circuit(
            name="count", input_names=["a", "b"], output_names=["c"], latches=[],
            updates=[Update("c", Signal("a"))], input_traces=[Trace("a", bits("1"))],
        )
    assert excinfo.value.codes == [StructuralIssueCode.STIM_COUNT_MISMATCH.code]


def test_trace_must_be_bound_to_its_input():
    with pytest.raises(StructuralValidationError) as excinfo:
        Circuit(
            name="names", input_names=["a", "b"], output_names=["c"], latches=[],
            updates=[Update("c", Signal("a"))],
            input_traces=[Trace("b", bits("1")), Trace("a", bits("1"))],
        )
    assert excinfo.value.codes == [StructuralIssueCode.STIM_SIGNAL_MISMATCH.code] * 2


def test_circuit_without_inputs_is_rejected():
    with pytest.raises(StructuralValidationError) as excinfo:
        Circuit(name="empty", input_names=[], output_names=["q"], latches=[Latch("q", "q")],
                updates=[], input_traces=[])
    assert StructuralIssueCode.STIM_MISSING.code in excinfo.value.codes


# --- Outputs and references ---

def test_undriven_output_is_rejected():
    with pytest.raises(StructuralValidationError) as excinfo:
        make_circuit({"a": "1"}, outputs=["c", "ghost"], updates=[("c", "a")])
    assert excinfo.value.codes == [StructuralIssueCode.OUT_UNDRIVEN.code]


def test_input_is_not_a_driven_output():
    with pytest.raises(StructuralValidationError) as excinfo:
        make_circuit({"a": "1"}, outputs=["a"])
    assert StructuralIssueCode.OUT_UNDRIVEN.code in excinfo.value.codes


def test_latch_output_counts_as_driven():
    circuit = make_circuit({"a": "10"}, outputs=["b"], latches=[("a", "b")])
    assert circuit.latch_output_names == ["b"]


def test_undeclared_reference_is_only_a_warning(caplog):
    with caplog.at_level(logging.WARNING):
        circuit = make_circuit({"a": "1"}, outputs=["c"], updates=[("c", "a and ghost")])
    assert [w.code for w in circuit.validation_warnings] == [StructuralIssueCode.SIG_UNDECLARED_REFERENCE.code]
    assert circuit.validation_warnings[0].level == ValidationIssueLevel.WARNING
    assert "ghost" in caplog.text


def test_several_errors_are_reported_together():
    with pytest.raises(StructuralValidationError) as excinfo:
        make_circuit({"a": "10", "b": "1"}, outputs=["a", "c"], updates=[("a", "b")])
    assert set(excinfo.value.codes) == {LENGTH, NAMESPACE, StructuralIssueCode.OUT_UNDRIVEN.code}


def test_derived_sets():
    circuit = make_circuit(
        {"a": "10", "b": "01"}, outputs=["y"],
        latches=[("y", "q")], updates=[("x", "a and q"), ("y", "x or b")],
    )
    assert circuit.legal_at_start == ["a", "b", "q"]
    assert circuit.update_output_names == ["x", "y"]
    assert circuit.input_trace("b") == Trace("b", bits("01"))
