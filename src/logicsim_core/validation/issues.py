# src/logicsim_core/validation/issues.py
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class ValidationIssueLevel(Enum):
    """Severity level of a validation issue."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    def __str__(self):
        return self.value


@dataclass
class ValidationIssue:
    """A single finding of the structural validator, with the signal it concerns."""
    level: ValidationIssueLevel
    code: str
    message: str
    signal_name: Optional[str] = None
    circuit_name: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.level.name} - {self.code}]"]
        if self.circuit_name:
            parts.append(f"Circuit: {self.circuit_name}")
        if self.signal_name:
            parts.append(f"Signal: {self.signal_name}")
        parts.append(f"Message: {self.message}")

        filtered_details = {
            k: v for k, v in self.details.items()
            if k not in ['signal_name', 'circuit_name']
        }
        if filtered_details:
            details_str = ", ".join(f"{k}={v}" for k, v in sorted(filtered_details.items()))
            parts.append(f"Details: ({details_str})")

        return " ".join(parts)
