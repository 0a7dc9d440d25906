# src/logicsim_core/simulation/config.py
import logging
from typing import Any, Dict, List, Sequence

from ..constants import TRACE_FALSE_TOKENS, TRACE_TRUE_TOKENS
from ..trace import Trace

logger = logging.getLogger(__name__)

class ConfigParsingError(ValueError):
    """Custom exception for errors during stimulus configuration parsing."""
    pass

def _parse_bit(signal: str, position: int, raw: Any) -> bool:
    # bool is a subclass of int, so it is checked first.
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        if raw in TRACE_TRUE_TOKENS:
            return True
        if raw in TRACE_FALSE_TOKENS:
            return False
    raise ValueError(f"Signal '{signal}', cycle {position}: expected 0 or 1, got {raw!r}.")

def parse_stimulus_config(raw_stimulus: Dict[str, Any], input_names: Sequence[str]) -> List[Trace]:
    """
    Converts a raw stimulus mapping into one `Trace` per input, ordered like
    `input_names`.

    Each value is either a string of '0'/'1' characters (earliest cycle first,
    whitespace ignored) or a list of 0/1/true/false.
    """
    if not raw_stimulus:
        raise ConfigParsingError("Stimulus configuration is missing or empty.")
    try:
        unknown = sorted(set(raw_stimulus) - set(input_names))
        if unknown:
            raise ValueError(f"Stimulus given for signal(s) that are not inputs: {unknown}.")

        traces: List[Trace] = []
        for name in input_names:
            if name not in raw_stimulus:
                raise KeyError(f"No stimulus given for input signal '{name}'.")
            raw_values = raw_stimulus[name]
            if isinstance(raw_values, str):
                raw_values = list("".join(raw_values.split()))
            elif not isinstance(raw_values, list):
                raise ValueError(f"Stimulus for '{name}' must be a string of 0/1 or a list, got {type(raw_values).__name__}.")
            traces.append(Trace(name, [_parse_bit(name, i, v) for i, v in enumerate(raw_values)]))
            logger.debug(f"Parsed stimulus for '{name}': {traces[-1]}")
        return traces
    except (KeyError, ValueError) as e:
        raise ConfigParsingError(f"Failed to parse stimulus configuration: {e}") from e
