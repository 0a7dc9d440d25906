# src/logicsim_core/simulation/store.py
"""
The variable store: the mutable signal-name to Boolean mapping that an
expression is evaluated against.

A store is created for exactly one simulation run and handed explicitly to
every latch, update and expression that needs it. It is never module-level
state, so several runs can live side by side in one process.
"""
import logging
from typing import Dict, Iterator, Mapping, Optional

from .exceptions import UnboundSignalError

logger = logging.getLogger(__name__)


class VariableStore:
    """Name to value mapping with a fail-fast `get` and an unconditional `set`."""

    def __init__(self, initial: Optional[Mapping[str, bool]] = None):
        self._values: Dict[str, bool] = {}
        if initial:
            for name, value in initial.items():
                self.set(name, value)

    def get(self, name: str) -> bool:
        try:
            return self._values[name]
        except KeyError:
            raise UnboundSignalError(signal_name=name) from None

    def set(self, name: str, value: bool) -> None:
        self._values[name] = bool(value)

    def snapshot(self) -> "VariableStore":
        """Returns an independent copy holding the current values."""
        return VariableStore(self._values)

    def as_dict(self) -> Dict[str, bool]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"VariableStore({self._values!r})"
