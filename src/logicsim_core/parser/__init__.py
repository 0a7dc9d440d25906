# src/logicsim_core/parser/__init__.py
from .raw_data import (
    ParsedCircuitDescription,
    ParsedLatchData,
    ParsedUpdateData,
)
from .parser import NetlistParser
from .expression_parser import ExpressionParser
from .exceptions import ParsingError, SchemaValidationError, ExpressionSyntaxError

__all__ = [
    # IR Data Structures
    "ParsedCircuitDescription",
    "ParsedLatchData",
    "ParsedUpdateData",
    # Parsers and Exceptions
    "NetlistParser",
    "ExpressionParser",
    "ParsingError",
    "SchemaValidationError",
    "ExpressionSyntaxError",
]
