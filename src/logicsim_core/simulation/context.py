# src/logicsim_core/simulation/context.py
"""
Defines the `SimulationContext`, the complete state handed to one engine run.
"""
from dataclasses import dataclass, field

from ..data_structures import Circuit
from .store import VariableStore


@dataclass(frozen=True)
class SimulationContext:
    """
    What a single simulation run operates on: the validated circuit and the one
    variable store that lives for the duration of that run.

    The binding is frozen; only the store's contents change while the run
    executes. Build a new context (and therefore a new store) for every run.
    """
    circuit: Circuit
    store: VariableStore = field(default_factory=VariableStore)
