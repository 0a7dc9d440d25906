# src/logicsim_core/elements.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .constants import LATCH_RESET_VALUE
from .expressions import ExpressionNode, free_variables

if TYPE_CHECKING:
    from .simulation.store import VariableStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Latch:
    """
    One bit of clocked state: the output follows the input one cycle late and
    is reset in cycle 0.
    """
    input_name: str
    output_name: str

    def initialize(self, store: VariableStore) -> None:
        store.set(self.output_name, LATCH_RESET_VALUE)

    def advance(self, store: VariableStore, previous: Optional[VariableStore] = None) -> None:
        """
        Writes the latch output for a new cycle.

        Args:
            store: The store of the cycle being computed; the output is written here.
            previous: Snapshot of the store as it stood at the end of the previous
                      cycle. The input is read from it when given, otherwise from
                      `store` itself.
        """
        source = previous if previous is not None else store
        store.set(self.output_name, source.get(self.input_name))

    def __str__(self):
        return f"{self.input_name} -> {self.output_name}"


@dataclass(frozen=True)
class Update:
    """One bit of combinational logic: `output_name = expression`, same cycle."""
    output_name: str
    expression: ExpressionNode

    def dependencies(self) -> List[str]:
        return free_variables(self.expression)

    def apply(self, store: VariableStore) -> bool:
        """Evaluates the expression, stores the result under `output_name` and returns it."""
        value = self.expression.eval(store)
        store.set(self.output_name, value)
        return value

    def __str__(self):
        return f"{self.output_name} = {self.expression}"
