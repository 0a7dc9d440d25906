# src/logicsim_core/validation/structural_validator.py
from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import TYPE_CHECKING, Dict, List

from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import StructuralIssueCode

if TYPE_CHECKING:
    from ..data_structures import Circuit


logger = logging.getLogger(__name__)


class StructuralValidator:
    """
    Checks the static structure of a circuit before any cycle is simulated.

    The validator only reports; it is `Circuit` construction that turns
    ERROR-level issues into a `StructuralValidationError`. It does not look at
    the update order: whether the declared order is a legal evaluation order is
    decided cycle by cycle by the simulation engine.
    """

    def __init__(self, circuit: Circuit):
        self.circuit = circuit
        self.issues: List[ValidationIssue] = []

    def validate(self) -> List[ValidationIssue]:
        """Runs every check and returns all issues found (errors, warnings and info)."""
        self.issues = []
        logger.debug(f"Starting structural validation for circuit '{self.circuit.name}'...")

        self._check_stimulus()
        self._check_signal_namespace()
        self._check_outputs()
        self._check_references()

        if self.issues:
            errors = sum(1 for i in self.issues if i.level == ValidationIssueLevel.ERROR)
            warnings = sum(1 for i in self.issues if i.level == ValidationIssueLevel.WARNING)
            logger.info(f"Structural validation of '{self.circuit.name}' found {errors} error(s), {warnings} warning(s).")
        else:
            logger.debug(f"Structural validation of '{self.circuit.name}' found no issues.")
        return self.issues

    def _add_issue(self, level: ValidationIssueLevel, code_enum: StructuralIssueCode, **kwargs):
        kwargs.setdefault('circuit_name', self.circuit.name)
        message = code_enum.format_message(**kwargs)
        self.issues.append(ValidationIssue(
            level=level, code=code_enum.code, message=message,
            signal_name=kwargs.get('signal_name'), circuit_name=kwargs['circuit_name'],
            details=kwargs
        ))

    # --- Checks ---

    def _check_stimulus(self):
        inputs = self.circuit.input_names
        traces = self.circuit.input_traces

        if not inputs:
            self._add_issue(ValidationIssueLevel.ERROR, StructuralIssueCode.STIM_MISSING)

        if len(traces) != len(inputs):
            self._add_issue(
                ValidationIssueLevel.ERROR, StructuralIssueCode.STIM_COUNT_MISMATCH,
                input_count=len(inputs), trace_count=len(traces)
            )
        else:
            for index, (name, trace) in enumerate(zip(inputs, traces)):
                if trace.signal_name != name:
                    self._add_issue(
                        ValidationIssueLevel.ERROR, StructuralIssueCode.STIM_SIGNAL_MISMATCH,
                        index=index, signal_name=name, trace_signal=trace.signal_name
                    )

        lengths = [trace.length for trace in traces]
        if len(set(lengths)) > 1:
            self._add_issue(
                ValidationIssueLevel.ERROR, StructuralIssueCode.STIM_LENGTH_MISMATCH,
                lengths=lengths
            )

    def _check_signal_namespace(self):
        producers: Dict[str, List[str]] = defaultdict(list)
        for name in self.circuit.input_names:
            producers[name].append("input")
        for latch in self.circuit.latches:
            producers[latch.output_name].append(f"latch '{latch}'")
        for update in self.circuit.updates:
            producers[update.output_name].append(f"update '{update.output_name}'")

        for name, claimed_by in producers.items():
            if len(claimed_by) > 1:
                self._add_issue(
                    ValidationIssueLevel.ERROR, StructuralIssueCode.SIG_NAMESPACE_CONFLICT,
                    signal_name=name, count=len(claimed_by), producers=", ".join(claimed_by)
                )

    def _check_outputs(self):
        driven = set(self.circuit.update_output_names) | set(self.circuit.latch_output_names)
        for name, count in Counter(self.circuit.output_names).items():
            if count > 1:
                self._add_issue(
                    ValidationIssueLevel.WARNING, StructuralIssueCode.OUT_DUPLICATE,
                    signal_name=name, count=count
                )
            if name not in driven:
                self._add_issue(ValidationIssueLevel.ERROR, StructuralIssueCode.OUT_UNDRIVEN, signal_name=name)

    def _check_references(self):
        known = (set(self.circuit.input_names)
                 | set(self.circuit.latch_output_names)
                 | set(self.circuit.update_output_names))
        for latch in self.circuit.latches:
            if latch.input_name not in known:
                self._add_issue(
                    ValidationIssueLevel.WARNING, StructuralIssueCode.SIG_UNDECLARED_REFERENCE,
                    signal_name=latch.input_name, referenced_by=f"Latch '{latch}'"
                )
        for update in self.circuit.updates:
            for name in dict.fromkeys(update.dependencies()):
                if name not in known:
                    self._add_issue(
                        ValidationIssueLevel.WARNING, StructuralIssueCode.SIG_UNDECLARED_REFERENCE,
                        signal_name=name, referenced_by=f"Update '{update.output_name}'"
                    )
