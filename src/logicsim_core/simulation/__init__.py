# src/logicsim_core/simulation/__init__.py
from .exceptions import (
    UnboundSignalError,
    IllegalDependencyOrderError,
    CycleOrderError,
)
from .store import VariableStore
from .config import ConfigParsingError, parse_stimulus_config
from .context import SimulationContext
from .results import SimulationResult
from .engine import SimulationEngine
from .execution import run_simulation

__all__ = [
    # Exceptions
    "UnboundSignalError",
    "IllegalDependencyOrderError",
    "CycleOrderError",
    "ConfigParsingError",
    # Core Classes
    "VariableStore",
    "SimulationContext",
    "SimulationResult",
    "SimulationEngine",
    "parse_stimulus_config",
    "run_simulation",
]
