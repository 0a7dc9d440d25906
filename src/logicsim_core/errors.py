# src/logicsim_core/errors.py
import logging
from typing import Any, Dict, Protocol, abstractmethod
from typing import runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class LogicSimError(Exception):
    """Base class for all custom, user-facing errors in LogicSim Core."""
    pass

class CircuitBuildError(LogicSimError):
    """
    Raised when turning a circuit description into a validated `Circuit` fails,
    from YAML loading through structural validation. The message is a
    pre-formatted diagnostic report.
    """
    pass

class SimulationRunError(LogicSimError):
    """
    Raised when a simulation run aborts after a successful build, e.g. because an
    update references a signal that is not yet available in the current cycle.
    The message is a pre-formatted diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own diagnostic report.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    Concrete base class for every internal exception that can describe itself.

    It is a normal `Exception`, so it can be used in `except` clauses, and it
    declares `get_diagnostic_report` abstract so that every subclass has to
    provide a report.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats the final multi-line report string so that every diagnostic has the
    same look.

    Args:
        error_type: The high-level category of the error (e.g., "Namespace Violation").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: Optional contextual information. Recognised keys are 'circuit',
                 'signal', 'cycle' and 'source_file'.

    Returns:
        A formatted report string ready for display.
    """
    lines = [
        "\n",
        "============== LogicSim Core: Actionable Diagnostic Report ==============",
        f"Error Type:     {error_type}",
    ]
    if circuit := context.get('circuit'):
        lines.append(f"Circuit:        {circuit}")
    if signal := context.get('signal'):
        lines.append(f"Signal:         {signal}")
    # Cycle 0 is a legitimate value, so test against None.
    if (cycle := context.get('cycle')) is not None:
        lines.append(f"Cycle:          {cycle}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("=========================================================================")
    return "\n".join(lines)
