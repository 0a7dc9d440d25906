# src/logicsim_core/expressions.py

"""
Boolean expression trees over named signals.

The expression language is a closed set of four node types: `Signal`, `And`,
`Or` and `Not`. Nodes are frozen dataclasses and form a strict tree. The two
operations on a tree, `evaluate` and `free_variables`, are plain functions that
dispatch with structural pattern matching over that closed set; the methods on
`Expression` are thin conveniences around them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Union

if TYPE_CHECKING:
    from .simulation.store import VariableStore

logger = logging.getLogger(__name__)


class Expression:
    """Common base of the four expression node types."""
    __slots__ = ()

    def eval(self, store: VariableStore) -> bool:
        return evaluate(self, store)

    def free_variables(self) -> List[str]:
        return free_variables(self)


@dataclass(frozen=True)
class Signal(Expression):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class And(Expression):
    left: ExpressionNode
    right: ExpressionNode

    def __str__(self):
        return f"({self.left} and {self.right})"


@dataclass(frozen=True)
class Or(Expression):
    left: ExpressionNode
    right: ExpressionNode

    def __str__(self):
        return f"({self.left} or {self.right})"


@dataclass(frozen=True)
class Not(Expression):
    operand: ExpressionNode

    def __str__(self):
        return f"not {self.operand}"


ExpressionNode = Union[Signal, And, Or, Not]


def evaluate(expr: ExpressionNode, store: VariableStore) -> bool:
    """
    Evaluates `expr` against the current contents of `store`.

    Both operands of `And` and `Or` are always evaluated, so an unbound signal
    on either side is reported even when the other side already decides the
    result.

    Raises:
        UnboundSignalError: If a referenced signal has no value in the store.
        TypeError: If `expr` is not one of the four node types.
    """
    match expr:
        case Signal(name=name):
            return store.get(name)
        case And(left=left, right=right):
            left_value = evaluate(left, store)
            right_value = evaluate(right, store)
            return left_value and right_value
        case Or(left=left, right=right):
            left_value = evaluate(left, store)
            right_value = evaluate(right, store)
            return left_value or right_value
        case Not(operand=operand):
            return not evaluate(operand, store)
        case _:
            raise TypeError(f"Cannot evaluate object of type '{type(expr).__name__}' as an expression.")


def free_variables(expr: ExpressionNode) -> List[str]:
    """
    Returns every signal name in `expr`, left to right, duplicates included.

    e.g. `free_variables(And(Signal("p"), Not(Signal("p"))))` is `["p", "p"]`.
    """
    match expr:
        case Signal(name=name):
            return [name]
        case And(left=left, right=right) | Or(left=left, right=right):
            return free_variables(left) + free_variables(right)
        case Not(operand=operand):
            return free_variables(operand)
        case _:
            raise TypeError(f"Cannot collect signals of object of type '{type(expr).__name__}'.")
