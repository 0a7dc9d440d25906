# src/logicsim_core/simulation/exceptions.py
"""
Diagnosable exceptions raised while a validated circuit is being simulated.

Every failure in this module is fatal for the run that raised it: nothing is
retried and no partial result is returned. The `run_simulation` facade wraps
these into a single `SimulationRunError`.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class UnboundSignalError(DiagnosableError, KeyError):
    """
    Raised when a signal is read from the variable store before anything has
    written it.

    Also a `KeyError`, since the store is a name-to-value mapping.
    """
    signal_name: str

    def __str__(self):
        return f"Signal not defined: '{self.signal_name}'"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unbound Signal Reference",
            details=f"The signal '{self.signal_name}' was read before any input, latch or update assigned it a value.",
            suggestion="Declare the signal as an input, or add a latch or update that drives it.",
            context={'signal': self.signal_name}
        )


@dataclass()
class IllegalDependencyOrderError(DiagnosableError):
    """
    Raised when an update uses a signal that is not yet legal in the current
    cycle: neither a primary input, a latch output, nor the output of an update
    listed earlier.

    `dependency_cycle` and `legal_order` are filled in by the engine from the
    update dependency graph. They only describe the problem; the engine never
    evaluates updates in any order but the declared one.
    """
    update_name: str
    missing_signals: List[str]
    cycle: int
    circuit_name: Optional[str] = None
    dependency_cycle: List[str] = field(default_factory=list)
    legal_order: List[str] = field(default_factory=list)

    def __str__(self):
        return (f"Variable {self.update_name} may be cyclical: it depends on "
                f"{self.missing_signals}, which are not available in cycle {self.cycle}")

    def get_diagnostic_report(self) -> str:
        details = (
            f"Update '{self.update_name}' depends on {', '.join(repr(s) for s in self.missing_signals)}, "
            "which is neither an input, a latch output, nor the output of an earlier update."
        )
        if self.dependency_cycle:
            loop = " -> ".join(self.dependency_cycle + self.dependency_cycle[:1])
            details += f"\nThe updates form a combinational loop: {loop}"
            suggestion = "Break the loop by routing one of its signals through a latch."
        elif self.legal_order:
            details += "\nThe updates are acyclic but are not listed in dependency order."
            suggestion = f"List the updates in a define-before-use order, for example: {', '.join(self.legal_order)}."
        else:
            suggestion = "Make sure every signal an update reads is defined before that update."
        return format_diagnostic_report(
            error_type="Illegal Dependency Order",
            details=details,
            suggestion=suggestion,
            context={'circuit': self.circuit_name, 'signal': self.update_name, 'cycle': self.cycle}
        )


@dataclass()
class CycleOrderError(DiagnosableError):
    """Raised when the engine is asked to step to any cycle other than the next one."""
    expected_cycle: int
    requested_cycle: int

    def __str__(self):
        return f"Expected to simulate cycle {self.expected_cycle}, but cycle {self.requested_cycle} was requested"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Cycle Order Violation",
            details=str(self),
            suggestion="Call initialize() first, then next_cycle(t) for t = 1, 2, ... without skipping.",
            context={'cycle': self.requested_cycle}
        )
