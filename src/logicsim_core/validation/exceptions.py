# src/logicsim_core/validation/exceptions.py
"""
Defines the diagnosable exception raised when a circuit fails structural
validation at construction time.
"""
from typing import List, Optional

from .issues import ValidationIssue, ValidationIssueLevel
from ..errors import DiagnosableError, format_diagnostic_report


class StructuralValidationError(DiagnosableError):
    """
    Raised by `Circuit` construction when the structural validator reports one
    or more ERROR-level issues. Warnings and info issues are dropped.

    `codes` lists the issue codes in the order they were found and is the
    programmatic way to tell a namespace violation from a stimulus-shape one.
    """
    def __init__(self, issues: List[ValidationIssue], circuit_name: Optional[str] = None):
        self.circuit_name = circuit_name
        self.issues: List[ValidationIssue] = [
            issue for issue in issues if issue.level == ValidationIssueLevel.ERROR
        ]
        if not self.issues:
            summary_message = "StructuralValidationError was raised with no error-level issues."
        else:
            summary_message = (
                f"Structural validation failed with {len(self.issues)} error(s):\n"
                + "\n".join(f"  - {issue}" for issue in self.issues)
            )
        super().__init__(summary_message)

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

    def get_diagnostic_report(self) -> str:
        issue_lines = "\n".join(f"- [{issue.code}] {issue.message}" for issue in self.issues)
        details = (
            f"The circuit structure is invalid. Found {len(self.issues)} error(s):\n\n{issue_lines}"
        )
        return format_diagnostic_report(
            error_type="Structural Validation Error",
            details=details,
            suggestion="Give every signal exactly one producer (input, latch or update), drive every output, and supply one equal-length trace per input.",
            context={'circuit': self.circuit_name}
        )
