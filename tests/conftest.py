# tests/conftest.py
import pytest
from typing import Dict, List, Optional, Sequence, Tuple

from logicsim_core import (
    Circuit, CircuitBuilder, NetlistParser, ExpressionParser,
    Latch, Update, Trace,
)


def bits(text: str) -> List[bool]:
    """'1011' -> [True, False, True, True]"""
    return [c == "1" for c in text]


def make_circuit(
    inputs: Dict[str, str],
    outputs: Sequence[str],
    latches: Sequence[Tuple[str, str]] = (),
    updates: Sequence[Tuple[str, str]] = (),
    name: str = "TestCircuit",
) -> Circuit:
    """
    Programmatically builds a Circuit.
    inputs: e.g. {"a": "1011"} (insertion order is the input order)
    latches: e.g. [("a", "b")] for a latch from a to b
    updates: e.g. [("c", "a and b")], expressions in parser syntax
    """
    expression_parser = ExpressionParser()
    return Circuit(
        name=name,
        input_names=list(inputs),
        output_names=list(outputs),
        latches=[Latch(input_name=i, output_name=o) for i, o in latches],
        updates=[Update(output_name=o, expression=expression_parser.parse(e)) for o, e in updates],
        input_traces=[Trace(n, bits(v)) for n, v in inputs.items()],
    )


@pytest.fixture
def parser():
    return NetlistParser()


@pytest.fixture
def builder():
    return CircuitBuilder()


@pytest.fixture
def expression_parser():
    return ExpressionParser()
