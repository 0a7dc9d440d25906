# src/logicsim_core/simulation/results.py
"""
The formal result contract of a simulation run.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..trace import Trace


@dataclass(frozen=True)
class SimulationResult:
    """
    The outcome of a completed run.

    Attributes:
        circuit_name: Name of the simulated circuit.
        simulation_length: Number of cycles simulated (cycle 0 included).
        input_traces: The stimulus, unmodified, in input declaration order.
        output_traces: One fully populated trace per declared output, in
                       output declaration order.
        final_values: Every signal's value at the end of the last cycle.
    """
    circuit_name: str
    simulation_length: int
    input_traces: Tuple[Trace, ...]
    output_traces: Tuple[Trace, ...]
    final_values: Dict[str, bool]

    def output(self, signal_name: str) -> Trace:
        for trace in self.output_traces:
            if trace.signal_name == signal_name:
                return trace
        raise KeyError(signal_name)

    def format_traces(self) -> List[str]:
        """Input traces followed by output traces, one `"0101 name"` line each."""
        return [str(trace) for trace in self.input_traces] + [str(trace) for trace in self.output_traces]
