# src/logicsim_core/validation/__init__.py
import logging
logger = logging.getLogger(__name__)

from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import StructuralIssueCode
from .structural_validator import StructuralValidator
from .exceptions import StructuralValidationError

__all__ = [
    "ValidationIssue",
    "ValidationIssueLevel",
    "StructuralIssueCode",
    "StructuralValidator",
    "StructuralValidationError",
]
