# tests/test_simulation.py
"""
Behaviour of the cycle loop: latch delay, combinational evaluation, the
order-sensitive legality check, and the run_simulation facade.
"""
import pytest

from logicsim_core import (
    SimulationContext, SimulationEngine, VariableStore, run_simulation,
    IllegalDependencyOrderError, CycleOrderError, UnboundSignalError,
    SimulationRunError,
)
from conftest import make_circuit, bits


def simulate(circuit):
    """Runs the engine directly and returns {output name: trace text}."""
    engine = SimulationEngine(SimulationContext(circuit=circuit, store=VariableStore()))
    return {trace.signal_name: str(trace).split(" ")[0] for trace in engine.execute()}


# --- Latch semantics ---

def test_latch_delays_input_by_one_cycle():
    circuit = make_circuit({"a": "1011"}, outputs=["b"], latches=[("a", "b")])
    assert simulate(circuit) == {"b": "0101"}


def test_latch_chain_behaves_as_shift_register():
    circuit = make_circuit(
        {"a": "10000"}, outputs=["q1", "q2", "q3"],
        latches=[("a", "q1"), ("q1", "q2"), ("q2", "q3")],
    )
    assert simulate(circuit) == {"q1": "01000", "q2": "00100", "q3": "00010"}


def test_latch_declaration_order_does_not_matter():
    forward = make_circuit({"a": "1100"}, outputs=["q2"], latches=[("a", "q1"), ("q1", "q2")])
    backward = make_circuit({"a": "1100"}, outputs=["q2"], latches=[("q1", "q2"), ("a", "q1")])
    assert simulate(forward) == simulate(backward) == {"q2": "0011"}


def test_latch_from_update_output():
    # Toggle flip-flop: q' = q xor t, built from and/or/not.
    circuit = make_circuit(
        {"t": "11101"}, outputs=["q", "d"],
        latches=[("d", "q")],
        updates=[("d", "(q and not t) or (not q and t)")],
    )
    assert simulate(circuit) == {"q": "01011", "d": "10110"}


# --- Combinational semantics ---

def test_combinational_and_has_no_delay():
    circuit = make_circuit({"a": "110", "b": "101"}, outputs=["c"], updates=[("c", "a and b")])
    assert simulate(circuit) == {"c": "100"}


def test_updates_see_earlier_updates_in_same_cycle():
    circuit = make_circuit(
        {"a": "0101", "b": "0011"}, outputs=["x", "y"],
        updates=[("x", "a or b"), ("y", "not x")],
    )
    assert simulate(circuit) == {"x": "0111", "y": "1000"}


def test_updates_may_read_latch_outputs():
    circuit = make_circuit(
        {"a": "1111"}, outputs=["c"],
        latches=[("a", "q")], updates=[("c", "a and q")],
    )
    assert simulate(circuit) == {"c": "0111"}


# --- Legality of the declared update order ---

def test_out_of_order_updates_fail_at_cycle_zero():
    circuit = make_circuit({"a": "10"}, outputs=["x"], updates=[("x", "y"), ("y", "a")])
    with pytest.raises(IllegalDependencyOrderError) as excinfo:
        simulate(circuit)
    error = excinfo.value
    assert error.cycle == 0
    assert error.update_name == "x"
    assert error.missing_signals == ["y"]
    assert error.dependency_cycle == []
    assert error.legal_order == ["y", "x"]
    assert "may be cyclical" in str(error)


def test_same_updates_in_dependency_order_succeed():
    circuit = make_circuit({"a": "10"}, outputs=["x"], updates=[("y", "a"), ("x", "y")])
    assert simulate(circuit) == {"x": "10"}


def test_combinational_loop_is_reported_as_loop():
    circuit = make_circuit(
        {"a": "1"}, outputs=["x"],
        updates=[("x", "a and y"), ("y", "x")],
    )
    with pytest.raises(IllegalDependencyOrderError) as excinfo:
        simulate(circuit)
    assert set(excinfo.value.dependency_cycle) == {"x", "y"}
    assert excinfo.value.legal_order == []
    assert "combinational loop" in excinfo.value.get_diagnostic_report()


def test_self_referencing_update_is_rejected():
    circuit = make_circuit({"a": "1"}, outputs=["x"], updates=[("x", "x or a")])
    with pytest.raises(IllegalDependencyOrderError) as excinfo:
        simulate(circuit)
    assert excinfo.value.dependency_cycle == ["x"]


def test_unrelated_loop_does_not_mask_an_ordering_mistake():
    circuit = make_circuit(
        {"a": "1"}, outputs=["x"],
        updates=[("x", "y"), ("y", "a"), ("p", "q"), ("q", "p")],
    )
    with pytest.raises(IllegalDependencyOrderError) as excinfo:
        simulate(circuit)
    error = excinfo.value
    assert error.update_name == "x"
    assert error.dependency_cycle == []
    assert "combinational loop" not in error.get_diagnostic_report()


def test_loop_through_latch_is_legal():
    circuit = make_circuit(
        {"en": "1111"}, outputs=["q"],
        latches=[("n", "q")], updates=[("n", "en and not q")],
    )
    assert simulate(circuit) == {"q": "0101"}


def test_undeclared_signal_fails_the_legality_check():
    circuit = make_circuit({"a": "1"}, outputs=["c"], updates=[("c", "a and ghost")])
    with pytest.raises(IllegalDependencyOrderError) as excinfo:
        simulate(circuit)
    assert excinfo.value.missing_signals == ["ghost"]
    assert excinfo.value.legal_order == []


def test_latch_with_undeclared_input_fails_in_cycle_one():
    circuit = make_circuit({"a": "10"}, outputs=["q"], latches=[("ghost", "q")])
    with pytest.raises(UnboundSignalError):
        simulate(circuit)


# --- Stepping protocol ---

def test_manual_stepping_matches_execute():
    circuit = make_circuit({"a": "1011"}, outputs=["b"], latches=[("a", "b")])
    engine = SimulationEngine(SimulationContext(circuit=circuit))
    engine.initialize()
    for time in range(1, circuit.simulation_length):
        engine.next_cycle(time)
    assert str(engine.output_traces["b"]) == "0101 b"


def test_cycles_cannot_be_skipped_or_repeated():
    circuit = make_circuit({"a": "1011"}, outputs=["b"], latches=[("a", "b")])
    engine = SimulationEngine(SimulationContext(circuit=circuit))
    with pytest.raises(CycleOrderError):
        engine.next_cycle(1)
    engine.initialize()
    with pytest.raises(CycleOrderError):
        engine.next_cycle(2)
    with pytest.raises(CycleOrderError):
        engine.initialize()
    engine.next_cycle(1)
    engine.next_cycle(2)
    engine.next_cycle(3)
    with pytest.raises(CycleOrderError):
        engine.next_cycle(4)


# --- run_simulation facade ---

def test_run_simulation_returns_result():
    circuit = make_circuit(
        {"a": "110", "b": "101"}, outputs=["c", "q"],
        latches=[("c", "q")], updates=[("c", "a and b")],
    )
    result = run_simulation(circuit)
    assert result.circuit_name == "TestCircuit"
    assert result.simulation_length == 3
    assert result.output("c").to_list() == bits("100")
    assert result.output("q").to_list() == bits("010")
    assert result.format_traces() == ["110 a", "101 b", "100 c", "010 q"]
    assert result.final_values == {"a": False, "b": True, "q": False, "c": False}


def test_rerunning_reproduces_identical_traces():
    circuit = make_circuit(
        {"a": "10110"}, outputs=["x", "q"],
        latches=[("x", "q")], updates=[("x", "a or q")],
    )
    first = run_simulation(circuit)
    second = run_simulation(circuit)
    assert first.output_traces == second.output_traces
    assert first.output_traces[0] is not second.output_traces[0]


def test_run_simulation_wraps_faults():
    circuit = make_circuit({"a": "10"}, outputs=["x"], updates=[("x", "y"), ("y", "a")])
    with pytest.raises(SimulationRunError) as excinfo:
        run_simulation(circuit)
    assert isinstance(excinfo.value.__cause__, IllegalDependencyOrderError)
    report = str(excinfo.value)
    assert "Error Type:     Illegal Dependency Order" in report
    assert "Cycle:          0" in report
    assert "for example: y, x" in report


def test_input_traces_are_not_modified():
    circuit = make_circuit({"a": "1011"}, outputs=["b"], latches=[("a", "b")])
    run_simulation(circuit)
    assert str(circuit.input_traces[0]) == "1011 a"


def test_run_simulation_wraps_unbound_signal():
    circuit = make_circuit({"a": "10"}, outputs=["q"], latches=[("ghost", "q")])
    with pytest.raises(SimulationRunError) as excinfo:
        run_simulation(circuit)
    assert isinstance(excinfo.value.__cause__, UnboundSignalError)
    assert "Error Type:     Unbound Signal Reference" in str(excinfo.value)
