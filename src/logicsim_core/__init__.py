# src/logicsim_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("LogicSim Core package initialized.")

from .expressions import Expression, Signal, And, Or, Not, evaluate, free_variables
from .elements import Latch, Update
from .trace import Trace, TraceValueError
from .data_structures import Circuit
from .validation import (
    StructuralValidator, StructuralValidationError, StructuralIssueCode,
    ValidationIssue, ValidationIssueLevel,
)
from .simulation import (
    VariableStore, SimulationContext, SimulationEngine, SimulationResult, run_simulation,
    UnboundSignalError, IllegalDependencyOrderError, CycleOrderError,
    ConfigParsingError, parse_stimulus_config,
)
from .analysis import UpdateDependencyAnalyzer
from .parser import (
    NetlistParser, ExpressionParser, ParsedCircuitDescription,
    ParsingError, SchemaValidationError, ExpressionSyntaxError,
)
from .circuit_builder import CircuitBuilder
from .errors import LogicSimError, CircuitBuildError, SimulationRunError, DiagnosableError

__all__ = [
    # Expressions
    "Expression", "Signal", "And", "Or", "Not", "evaluate", "free_variables",
    # Circuit elements & data structures
    "Latch", "Update", "Trace", "TraceValueError", "Circuit",
    # Validation
    "StructuralValidator", "StructuralValidationError", "StructuralIssueCode",
    "ValidationIssue", "ValidationIssueLevel",
    # Simulation
    "VariableStore", "SimulationContext", "SimulationEngine", "SimulationResult", "run_simulation",
    "UnboundSignalError", "IllegalDependencyOrderError", "CycleOrderError",
    "ConfigParsingError", "parse_stimulus_config",
    # Analysis
    "UpdateDependencyAnalyzer",
    # Parsing & building
    "NetlistParser", "ExpressionParser", "ParsedCircuitDescription",
    "ParsingError", "SchemaValidationError", "ExpressionSyntaxError",
    "CircuitBuilder",
    # Top-Level Errors (Actionable Diagnostics)
    "LogicSimError", "CircuitBuildError", "SimulationRunError", "DiagnosableError",
]
