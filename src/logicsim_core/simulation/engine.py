# src/logicsim_core/simulation/engine.py

"""
Defines the `SimulationEngine`, which drives the cycle loop of one run.

A cycle has three phases, always in this order:

1. Load every input's stimulus value for the cycle into the store.
2. Latches: reset to false in cycle 0; afterwards each latch output takes the
   value its input had at the end of the previous cycle.
3. Updates: evaluated once each, in declared order, under the legality check.

The legality check is a single linear pass with a growing "legal" set seeded
with the inputs and latch outputs. An update may only read signals already in
the set; its own output joins the set once it has been evaluated. The pass
certifies the declared order and nothing more: the engine never searches for
another order.
"""
import logging
from typing import Dict, List, Optional, Set, Tuple

from ..data_structures import Circuit
from ..elements import Update
from ..trace import Trace
from ..analysis import UpdateDependencyAnalyzer

from .context import SimulationContext
from .store import VariableStore
from .exceptions import CycleOrderError, IllegalDependencyOrderError


logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Runs one simulation of the circuit held by a `SimulationContext`.

    The circuit is never modified. Output traces are created by the engine and
    owned by it until `execute()` hands them out, so running a second engine on
    the same circuit starts from a clean slate.
    """
    def __init__(self, context: SimulationContext):
        self.context: SimulationContext = context
        self.circuit: Circuit = context.circuit
        self.store: VariableStore = context.store
        self.simulation_length: int = self.circuit.simulation_length

        self.output_traces: Dict[str, Trace] = {
            name: Trace.empty(name, self.simulation_length)
            for name in dict.fromkeys(self.circuit.output_names)
        }
        self._legal_at_start: Tuple[str, ...] = tuple(self.circuit.legal_at_start)
        self._latch_outputs_recorded = [
            latch.output_name for latch in self.circuit.latches if latch.output_name in self.output_traces
        ]
        self._next_cycle: int = 0
        logger.debug(f"SimulationEngine initialized for '{self.circuit.name}' ({self.simulation_length} cycles).")

    def execute(self) -> List[Trace]:
        """Runs every cycle and returns the output traces in declaration order."""
        logger.info(f"--- Simulating '{self.circuit.name}' for {self.simulation_length} cycle(s) ---")
        if self.simulation_length > 0:
            self.initialize()
            for time in range(1, self.simulation_length):
                self.next_cycle(time)
        return list(self.output_traces.values())

    def initialize(self) -> None:
        """Computes cycle 0: stimulus, latch reset, update pass."""
        if self._next_cycle != 0:
            raise CycleOrderError(expected_cycle=self._next_cycle, requested_cycle=0)
        self._load_inputs(0)
        for latch in self.circuit.latches:
            latch.initialize(self.store)
        self._record_latch_outputs(0)
        self._perform_updates(0)
        self._next_cycle = 1

    def next_cycle(self, time: int) -> None:
        """Computes cycle `time`, which must directly follow the last computed cycle."""
        if time != self._next_cycle or time == 0:
            raise CycleOrderError(expected_cycle=self._next_cycle, requested_cycle=time)
        if time >= self.simulation_length:
            raise CycleOrderError(expected_cycle=self.simulation_length - 1, requested_cycle=time)

        # Latches must see the values as they stood at the end of the previous cycle.
        previous = self.store.snapshot()
        self._load_inputs(time)
        for latch in self.circuit.latches:
            latch.advance(self.store, previous)
        self._record_latch_outputs(time)
        self._perform_updates(time)
        self._next_cycle = time + 1

    def _load_inputs(self, time: int) -> None:
        for name, trace in zip(self.circuit.input_names, self.circuit.input_traces):
            self.store.set(name, trace.get_value(time))

    def _record_latch_outputs(self, time: int) -> None:
        for name in self._latch_outputs_recorded:
            self.output_traces[name].set_value(time, self.store.get(name))

    def _perform_updates(self, time: int) -> None:
        legal: Set[str] = set(self._legal_at_start)

        for update in self.circuit.updates:
            missing = [name for name in dict.fromkeys(update.dependencies()) if name not in legal]
            if missing:
                raise self._illegal_order_error(update, missing, time)

            value = update.apply(self.store)
            if update.output_name in self.output_traces:
                self.output_traces[update.output_name].set_value(time, value)

            legal.add(update.output_name)

        logger.debug(f"[{self.circuit.name}] cycle {time}: {self.store.as_dict()}")

    def _illegal_order_error(self, update: Update, missing: List[str], time: int) -> IllegalDependencyOrderError:
        analyzer = UpdateDependencyAnalyzer(self.circuit.updates)
        loop: List[str] = analyzer.find_cycle_through([update.output_name, *missing])
        suggestion_order: Optional[List[str]] = None
        # A reordering only helps when every missing signal is produced by some update.
        if not loop and set(missing) <= set(self.circuit.update_output_names):
            suggestion_order = analyzer.legal_order()
        logger.error(
            f"[{self.circuit.name}] update '{update.output_name}' reads {missing} before they are defined in cycle {time}."
        )
        return IllegalDependencyOrderError(
            update_name=update.output_name,
            missing_signals=missing,
            cycle=time,
            circuit_name=self.circuit.name,
            dependency_cycle=loop,
            legal_order=suggestion_order or [],
        )
