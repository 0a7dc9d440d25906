# src/logicsim_core/data_structures.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .elements import Latch, Update
from .trace import Trace
from .validation import StructuralValidator, StructuralValidationError, ValidationIssue, ValidationIssueLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circuit:
    """
    A synchronous circuit together with the stimulus for its inputs.

    The circuit is validated when it is constructed: a structurally invalid
    circuit cannot exist. It carries no run state; the simulation engine creates
    a fresh variable store and fresh output traces for every run.

    Raises:
        StructuralValidationError: On a signal with more or fewer than one
            producer, mismatched stimulus, or an undriven output.
    """
    name: str
    input_names: Sequence[str]
    output_names: Sequence[str]
    latches: Sequence[Latch]
    updates: Sequence[Update]
    input_traces: Sequence[Trace]
    source_file_path: Optional[Path] = None

    # Non-fatal findings of the structural validator, kept for inspection.
    validation_warnings: Tuple[ValidationIssue, ...] = field(default=(), init=False, compare=False, repr=False)

    def __post_init__(self):
        for attr in ("input_names", "output_names", "latches", "updates", "input_traces"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

        issues = StructuralValidator(self).validate()
        if any(issue.level == ValidationIssueLevel.ERROR for issue in issues):
            raise StructuralValidationError(issues, circuit_name=self.name)

        warnings = tuple(issue for issue in issues if issue.level == ValidationIssueLevel.WARNING)
        for issue in warnings:
            logger.warning(str(issue))
        object.__setattr__(self, "validation_warnings", warnings)
        logger.debug(
            f"Circuit '{self.name}' constructed: {len(self.input_names)} inputs, "
            f"{len(self.latches)} latches, {len(self.updates)} updates, {self.simulation_length} cycles."
        )

    @property
    def latch_output_names(self) -> List[str]:
        return [latch.output_name for latch in self.latches]

    @property
    def update_output_names(self) -> List[str]:
        return [update.output_name for update in self.updates]

    @property
    def legal_at_start(self) -> List[str]:
        """Signals available to every update from the start of a cycle: inputs, then latch outputs."""
        return list(self.input_names) + self.latch_output_names

    @property
    def simulation_length(self) -> int:
        # Validation guarantees at least one trace and a common length.
        return self.input_traces[0].length if self.input_traces else 0

    def input_trace(self, signal_name: str) -> Trace:
        for trace in self.input_traces:
            if trace.signal_name == signal_name:
                return trace
        raise KeyError(signal_name)
