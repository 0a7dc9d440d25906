# src/logicsim_core/simulation/execution.py
"""
Public entry point for running a simulation.

`run_simulation` hides the engine and context behind one call: it creates the
run's variable store, drives every cycle, packages the traces into a
`SimulationResult`, and turns any diagnosable fault into a single
`SimulationRunError` with the original exception chained.
"""
import logging

from ..data_structures import Circuit
from ..errors import SimulationRunError, DiagnosableError, format_diagnostic_report

from .context import SimulationContext
from .engine import SimulationEngine
from .results import SimulationResult
from .store import VariableStore

logger = logging.getLogger(__name__)


def run_simulation(circuit: Circuit) -> SimulationResult:
    """
    Simulates `circuit` for its full stimulus length.

    Args:
        circuit: A validated `Circuit`, built directly or by `CircuitBuilder`.

    Returns:
        A `SimulationResult` holding the untouched input traces and one trace per
        declared output.

    Raises:
        SimulationRunError: If the run aborts, e.g. on an update that reads a
                            signal not yet defined in the current cycle.
    """
    try:
        context = SimulationContext(circuit=circuit, store=VariableStore())
        engine = SimulationEngine(context)
        output_traces = engine.execute()

        result = SimulationResult(
            circuit_name=circuit.name,
            simulation_length=circuit.simulation_length,
            input_traces=tuple(circuit.input_traces),
            output_traces=tuple(output_traces),
            final_values=context.store.as_dict(),
        )
        logger.info(f"Simulation of '{circuit.name}' completed: {result.simulation_length} cycle(s).")
        return result

    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred during simulation: {e}")
        raise SimulationRunError(e.get_diagnostic_report()) from e

    except Exception as e:
        logger.critical(f"An unexpected internal error occurred during simulation: {e}", exc_info=True)
        report = format_diagnostic_report(
            error_type=f"An Unexpected Simulation Error Occurred ({type(e).__name__})",
            details=f"The simulator encountered an unexpected internal error: {e}",
            suggestion="This may be a bug. Review the traceback and consider filing a bug report.",
            context={'circuit': circuit.name}
        )
        raise SimulationRunError(report) from e
