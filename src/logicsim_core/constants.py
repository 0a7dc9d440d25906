# --- src/logicsim_core/constants.py ---
import logging

logger = logging.getLogger(__name__)

# --- Trace Rendering ---

#: Character used for a cycle in which the signal is high.
TRACE_HIGH_CHAR: str = "1"

#: Character used for a cycle in which the signal is low.
TRACE_LOW_CHAR: str = "0"

#: Character used for a cycle that has not been written yet (e.g. an output
#: trace of a run that aborted part-way).
TRACE_UNSET_CHAR: str = "x"

#: Characters accepted when reading stimulus from text.
TRACE_TRUE_TOKENS = frozenset({"1"})
TRACE_FALSE_TOKENS = frozenset({"0"})

# --- Sequential Semantics ---

#: Value every latch output takes in cycle 0.
LATCH_RESET_VALUE: bool = False

logger.debug("Defined core constants: trace characters, LATCH_RESET_VALUE")
