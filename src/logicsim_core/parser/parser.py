# src/logicsim_core/parser/parser.py
import keyword
import logging
import re
import string
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import cerberus
import yaml

from .raw_data import ParsedCircuitDescription, ParsedLatchData, ParsedUpdateData
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

# Signal and circuit names are plain identifiers. They double as Python
# identifiers inside update expressions, so the same rule applies everywhere.
ID_REGEX_FRAGMENT = r"[a-zA-Z_][a-zA-Z0-9_]*"
ID_REGEX = f"^{ID_REGEX_FRAGMENT}$"
ALLOWED_ID_CHARS = set(string.ascii_letters + string.digits + "_")

# Stimulus written as text: '0'/'1' characters, whitespace allowed for grouping.
STIMULUS_TEXT_REGEX = r"^[01\s]*$"

# Names the expression parser reads as keywords or constants, never as signals.
RESERVED_IDS = frozenset(keyword.kwlist) | {"True", "False", "None"}


class EnhancedValidator(cerberus.Validator):
    """Cerberus validator with the identifier and uniqueness rules of circuit descriptions."""

    def _validate_id_regex(self, constraint: bool, field: str, value: Any):
        """
        Validates that a string is a legal signal identifier.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint: return
        if not isinstance(value, str):
            self._error(field, "must be a string to be validated by id_regex.")
            return

        if not re.match(ID_REGEX, value):
            invalid_chars = sorted(list(set(value) - ALLOWED_ID_CHARS))
            message = (
                f"Identifier '{value}' is invalid. Identifiers must start with a letter or underscore, "
                "and can only contain letters, numbers, and underscores. "
                f"This identifier contains the following forbidden character(s): {invalid_chars}"
            )
            self._error(field, message)
            return

        if value in RESERVED_IDS:
            self._error(
                field,
                f"Identifier '{value}' is a reserved word of the expression syntax and cannot name a signal or circuit."
            )

    def _validate_stimulus_bits(self, constraint: bool, field: str, value: Any):
        """
        Validates one input's stimulus: a string of '0'/'1' characters or a
        list of 0/1/true/false.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint: return
        if isinstance(value, str):
            if not re.match(STIMULUS_TEXT_REGEX, value):
                self._error(field, f"Stimulus '{value}' may only contain '0', '1' and whitespace.")
        elif isinstance(value, list):
            bad = [item for item in value if not (isinstance(item, (bool, int)) and item in (0, 1))]
            if bad:
                self._error(field, f"Stimulus list entries must be 0, 1, true or false; got {bad}.")
        elif isinstance(value, (bool, int)):
            # YAML reads unquoted 1011 as a number (and 0101 as octal).
            self._error(
                field,
                f"Stimulus was read as the number {value!r}. Quote bit strings, e.g. {field}: \"1011\"."
            )
        else:
            self._error(field, f"Stimulus must be a string of 0/1 or a list, got {type(value).__name__}.")

    def _validate_unique_elements(self, constraint: bool, field: str, value: List[Any]):
        """
        Validates that a list holds no duplicated entries.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, list):
            return
        seen = set()
        duplicates = set()
        for item in value:
            if not isinstance(item, str):
                continue  # Let sub-schema validation handle this.
            if item in seen:
                duplicates.add(item)
            seen.add(item)
        if duplicates:
            self._error(field, f"Duplicate entries found: {sorted(duplicates)}")


class NetlistParser:
    """
    Loads and validates a YAML circuit description.
    Its sole responsibility is to produce the intermediate representation
    consumed by `CircuitBuilder`; expressions stay as text.
    """
    _id_rule = {"type": "string", "required": True, "empty": False, "id_regex": True}
    _signal_list_rule = {"type": "string", "empty": False, "id_regex": True}

    _schema = {
        "circuit_name": {"type": "string", "required": False, "id_regex": True},
        "inputs": {"type": "list", "required": True, "schema": _signal_list_rule},
        "outputs": {"type": "list", "required": True, "unique_elements": True, "schema": _signal_list_rule},
        "latches": {
            "type": "list", "required": False, "default": [],
            "schema": {"type": "dict", "schema": {"input": _id_rule, "output": _id_rule}},
        },
        "updates": {
            "type": "list", "required": False, "default": [],
            "schema": {"type": "dict", "schema": {
                "output": _id_rule,
                "expression": {"type": "string", "required": True, "empty": False},
            }},
        },
        "simulate": {
            "type": "dict", "required": True,
            "keysrules": {"type": "string", "id_regex": True},
            "valuesrules": {"stimulus_bits": True},
        },
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("NetlistParser initialized with strict structural validation rules.")

    def parse_file(self, yaml_path: Union[str, Path]) -> ParsedCircuitDescription:
        """Parses a circuit description file into its intermediate representation."""
        resolved_path = Path(yaml_path).resolve()
        logger.info(f"Parsing circuit description: {resolved_path}")
        content = self._load_yaml_file(resolved_path)
        return self._to_description(content, resolved_path, default_name=resolved_path.stem)

    def parse_string(self, yaml_text: str, circuit_name: str = "circuit") -> ParsedCircuitDescription:
        """Parses a circuit description held in memory; `circuit_name` is the fallback name."""
        content = self._load_yaml_text(yaml_text, source=None)
        return self._to_description(content, None, default_name=circuit_name)

    def _to_description(self, content: Dict[str, Any], source: Optional[Path], default_name: str) -> ParsedCircuitDescription:
        if not self._validator.validate(content):
            raise SchemaValidationError(self._validator.errors, source)
        validated = self._validator.document

        description = ParsedCircuitDescription(
            circuit_name=validated.get("circuit_name", default_name),
            input_names=list(validated["inputs"]),
            output_names=list(validated["outputs"]),
            latches=[ParsedLatchData(input_name=l["input"], output_name=l["output"]) for l in validated["latches"]],
            updates=[ParsedUpdateData(output_name=u["output"], expression_text=u["expression"]) for u in validated["updates"]],
            raw_stimulus=dict(validated["simulate"]),
            source_yaml_path=source,
        )
        logger.debug(
            f"Parsed '{description.circuit_name}': {len(description.input_names)} inputs, "
            f"{len(description.latches)} latches, {len(description.updates)} updates."
        )
        return description

    def _load_yaml_file(self, source: Path) -> Dict[str, Any]:
        if not source.is_file():
            raise ParsingError(details=f"Circuit description not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                text = f.read()
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        return self._load_yaml_text(text, source)

    def _load_yaml_text(self, text: str, source: Optional[Path]) -> Dict[str, Any]:
        """Loads YAML and performs basic sanity checks on its root."""
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise ParsingError(details="The YAML document is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML document must be a dictionary (mapping).", file_path=source)
        return content
