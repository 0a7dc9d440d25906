# src/logicsim_core/parser/exceptions.py
"""
Defines the diagnosable exceptions of the circuit-description loading stage.

`ParsingError` covers file-level and YAML syntax problems, `SchemaValidationError`
covers structural problems found by the Cerberus schema, and
`ExpressionSyntaxError` covers update expressions that are not valid Boolean
expressions. All of them derive from `DiagnosableError` through
`BaseParsingError`, so `CircuitBuilder` and callers can catch them as one family.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """
    A local, concrete base class for all description parsing errors.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the circuit description file.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Raised when a description file is missing, unreadable, or not valid YAML.
    """
    details: str
    file_path: Optional[Path] = None

    def __str__(self):
        return f"Parsing error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Raised when the YAML loads but does not have the structure of a circuit
    description (missing sections, invalid identifiers, duplicated names).
    """
    errors: Dict[str, Any]
    file_path: Optional[Path] = None

    def _error_lines(self, prefix: str) -> str:
        return "\n".join(
            f"{prefix}Field '{field}': {messages[0] if isinstance(messages, list) and messages else messages}"
            for field, messages in sorted(self.errors.items(), key=lambda kv: str(kv[0]))
        )

    def __str__(self):
        return (
            f"YAML schema validation failed for file '{self.file_path}':\n"
            + self._error_lines("  - ")
        )

    def get_diagnostic_report(self) -> str:
        details = (
            "The structure of the YAML file does not conform to the circuit description schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{self._error_lines('  - ')}"
        )
        return format_diagnostic_report(
            error_type="YAML Schema Validation Error",
            details=details,
            suggestion="Correct the specified fields. Check for invalid identifiers, duplicated signal names, or missing sections like 'inputs' or 'simulate'.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class ExpressionSyntaxError(BaseParsingError):
    """Raised when the right-hand side of an update is not a valid Boolean expression."""
    signal_name: str
    expression_text: str
    details: str
    file_path: Optional[Path] = None

    def __str__(self):
        return f"Invalid expression for '{self.signal_name}' ('{self.expression_text}'): {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Expression Syntax",
            details=f"{self.details}\nExpression: '{self.expression_text}'",
            suggestion="Use signal names combined with 'and', 'or', 'not' (or '&', '|', '~') and parentheses.",
            context={'signal': self.signal_name, 'source_file': self.file_path}
        )
