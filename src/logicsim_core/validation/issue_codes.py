# src/logicsim_core/validation/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class StructuralIssueCode(Enum):
    """
    Registry of structural validation issue codes and their message templates.
    Each enum member's value is a tuple: (code_str, message_template_str).
    """

    # --- Signal Namespace Issues (SIG_...) ---
    SIG_NAMESPACE_CONFLICT = ("SIG_NAMESPACE_CONFLICT", "Signal '{signal_name}' is produced {count} times (by {producers}). A signal must be precisely one of: an input signal, the output of a latch, or the output of an update.")
    SIG_UNDECLARED_REFERENCE = ("SIG_UNDECLARED_REFERENCE", "{referenced_by} reads signal '{signal_name}', which is not an input, a latch output or an update output.")

    # --- Stimulus Issues (STIM_...) ---
    STIM_MISSING = ("STIM_MISSING", "Circuit '{circuit_name}' declares no input signals, so no simulation length can be derived from stimulus.")
    STIM_COUNT_MISMATCH = ("STIM_COUNT_MISMATCH", "Circuit declares {input_count} input signal(s) but {trace_count} input trace(s) were supplied.")
    STIM_SIGNAL_MISMATCH = ("STIM_SIGNAL_MISMATCH", "Input trace #{index} is bound to signal '{trace_signal}', but input #{index} is '{signal_name}'.")
    STIM_LENGTH_MISMATCH = ("STIM_LENGTH_MISMATCH", "All inputs must be same length: trace lengths are {lengths}.")

    # --- Output Issues (OUT_...) ---
    OUT_UNDRIVEN = ("OUT_UNDRIVEN", "Output signal '{signal_name}' is not driven by any update or latch, so its trace would never be recorded.")
    OUT_DUPLICATE = ("OUT_DUPLICATE", "Output signal '{signal_name}' is declared {count} times.")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    def format_message(self, **kwargs) -> str:
        """Formats the message template with provided keyword arguments."""
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{self.template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{self.template}' Args: {kwargs}"
