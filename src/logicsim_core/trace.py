# src/logicsim_core/trace.py
"""
Fixed-length, per-cycle Boolean sequences bound to one signal.

A `Trace` is used both for supplied input stimulus and for recorded output.
Values live in a NumPy boolean array whose length is fixed at creation; a second
mask array remembers which cycles have been written, so an output trace of an
aborted run can be told apart from one that is genuinely all zeros.
"""
import logging
from typing import Iterable, List, Optional

import numpy as np

from .constants import TRACE_HIGH_CHAR, TRACE_LOW_CHAR, TRACE_UNSET_CHAR
from .errors import DiagnosableError, format_diagnostic_report

logger = logging.getLogger(__name__)


class TraceValueError(DiagnosableError, IndexError):
    """Raised for an out-of-range cycle index, or when reading a cycle that was never written."""

    def __init__(self, signal_name: str, time: int, details: str):
        self.signal_name = signal_name
        self.time = time
        self.details = details
        super().__init__(f"Trace '{signal_name}', cycle {time}: {details}")

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Trace Access",
            details=self.details,
            suggestion="Only access cycles 0..length-1, and only read cycles that have been recorded.",
            context={'signal': self.signal_name, 'cycle': self.time}
        )


class Trace:
    """
    The values of one signal over the whole simulation.

    Create a stimulus trace from values, or an empty output trace with
    `Trace.empty(name, length)` and fill it with `set_value`.
    """

    def __init__(self, signal_name: str, values: Iterable[bool]):
        self.signal_name = signal_name
        self._values = np.array([bool(v) for v in values], dtype=bool)
        self._assigned = np.ones(self._values.shape, dtype=bool)

    @classmethod
    def empty(cls, signal_name: str, length: int) -> "Trace":
        if length < 0:
            raise ValueError(f"Trace length must be non-negative, got {length}.")
        trace = cls(signal_name, [])
        trace._values = np.zeros(length, dtype=bool)
        trace._assigned = np.zeros(length, dtype=bool)
        return trace

    @property
    def length(self) -> int:
        return int(self._values.shape[0])

    def __len__(self) -> int:
        return self.length

    def _check_time(self, time: int) -> None:
        if not 0 <= time < self.length:
            raise TraceValueError(self.signal_name, time, f"index out of range for a trace of length {self.length}")

    def set_value(self, time: int, value: bool) -> None:
        self._check_time(time)
        self._values[time] = bool(value)
        self._assigned[time] = True

    def get_value(self, time: int) -> bool:
        self._check_time(time)
        if not self._assigned[time]:
            raise TraceValueError(self.signal_name, time, "no value has been recorded for this cycle")
        return bool(self._values[time])

    def is_complete(self) -> bool:
        return bool(self._assigned.all())

    def to_list(self) -> List[Optional[bool]]:
        """Returns the values as Python booleans, `None` for unset cycles."""
        return [bool(v) if a else None for v, a in zip(self._values, self._assigned)]

    def to_array(self) -> np.ndarray:
        """Returns a copy of the raw values; unset cycles read as False."""
        return self._values.copy()

    def copy(self) -> "Trace":
        duplicate = Trace.empty(self.signal_name, self.length)
        duplicate._values = self._values.copy()
        duplicate._assigned = self._assigned.copy()
        return duplicate

    def __eq__(self, other):
        if not isinstance(other, Trace):
            return NotImplemented
        return (self.signal_name == other.signal_name
                and np.array_equal(self._values, other._values)
                and np.array_equal(self._assigned, other._assigned))

    __hash__ = None

    def __str__(self):
        chars = [
            (TRACE_HIGH_CHAR if value else TRACE_LOW_CHAR) if assigned else TRACE_UNSET_CHAR
            for value, assigned in zip(self._values, self._assigned)
        ]
        return "".join(chars) + " " + self.signal_name

    def __repr__(self):
        return f"Trace({self.signal_name!r}, '{str(self).split(' ')[0]}')"
