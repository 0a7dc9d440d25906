# src/logicsim_core/circuit_builder.py

"""
Defines the CircuitBuilder, which turns the parser's intermediate
representation into a validated, simulation-ready `Circuit`.

The builder's work is:

1.  **Expression synthesis:** parsing every update's right-hand side into an
    expression tree with `ExpressionParser`.
2.  **Stimulus conversion:** turning the raw `simulate` mapping into one
    `Trace` per input, in input declaration order.
3.  **Object synthesis:** instantiating `Latch`, `Update` and finally `Circuit`,
    whose construction runs the structural validator.
4.  **Top-level error handling:** any `DiagnosableError` raised on the way is
    re-raised as a single `CircuitBuildError` carrying its diagnostic report.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .data_structures import Circuit
from .elements import Latch, Update
from .parser import NetlistParser, ExpressionParser, ExpressionSyntaxError
from .parser.raw_data import ParsedCircuitDescription
from .simulation.config import ConfigParsingError, parse_stimulus_config
from .errors import CircuitBuildError, DiagnosableError, format_diagnostic_report


logger = logging.getLogger(__name__)


class CircuitBuilder:
    """
    Synthesizes a validated `Circuit` from a `ParsedCircuitDescription`.
    """

    def __init__(self):
        self._expression_parser = ExpressionParser()

    def build_simulation_model(self, description: ParsedCircuitDescription) -> Circuit:
        """
        The main build-time entry point.

        Raises:
            CircuitBuildError: With a diagnostic report, for any failure from
                               expression parsing to structural validation.
        """
        logger.info(f"--- Starting circuit model synthesis for '{description.circuit_name}' ---")
        try:
            updates = self._build_updates(description)
            latches = [Latch(input_name=l.input_name, output_name=l.output_name) for l in description.latches]
            input_traces = parse_stimulus_config(description.raw_stimulus, description.input_names)

            circuit = Circuit(
                name=description.circuit_name,
                input_names=description.input_names,
                output_names=description.output_names,
                latches=latches,
                updates=updates,
                input_traces=input_traces,
                source_file_path=description.source_yaml_path,
            )
            logger.info(f"--- Circuit model synthesis for '{circuit.name}' successful. ---")
            return circuit

        except DiagnosableError as e:
            raise CircuitBuildError(e.get_diagnostic_report()) from e

        except ConfigParsingError as e:
            report = format_diagnostic_report(
                error_type="Invalid Stimulus",
                details=str(e),
                suggestion="Give every input exactly one trace of '0'/'1' values and no trace for any other signal.",
                context={'circuit': description.circuit_name, 'source_file': description.source_yaml_path}
            )
            raise CircuitBuildError(report) from e

    def build_from_file(self, yaml_path: Union[str, Path], parser: Optional[NetlistParser] = None) -> Circuit:
        """Parses a description file and builds it; parser errors become `CircuitBuildError` too."""
        parser = parser or NetlistParser()
        try:
            description = parser.parse_file(yaml_path)
        except DiagnosableError as e:
            raise CircuitBuildError(e.get_diagnostic_report()) from e
        return self.build_simulation_model(description)

    def _build_updates(self, description: ParsedCircuitDescription) -> List[Update]:
        updates: List[Update] = []
        for parsed in description.updates:
            try:
                expression = self._expression_parser.parse(parsed.expression_text)
            except SyntaxError as e:
                raise ExpressionSyntaxError(
                    signal_name=parsed.output_name,
                    expression_text=parsed.expression_text,
                    details=e.msg or str(e),
                    file_path=description.source_yaml_path,
                ) from e
            updates.append(Update(output_name=parsed.output_name, expression=expression))
        return updates
