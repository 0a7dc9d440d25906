# src/logicsim_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

# The classes in this module are the intermediate representation handed from
# NetlistParser to CircuitBuilder. Expressions are kept as text here; turning
# them into trees is the builder's job, so that syntax errors are reported
# through the same build-time channel as every other structural problem.

@dataclass(frozen=True)
class ParsedLatchData:
    input_name: str
    output_name: str

@dataclass(frozen=True)
class ParsedUpdateData:
    output_name: str
    expression_text: str

@dataclass(frozen=True)
class ParsedCircuitDescription:
    """IR node for one parsed circuit description file."""
    circuit_name: str
    input_names: List[str]
    output_names: List[str]
    latches: List[ParsedLatchData]
    updates: List[ParsedUpdateData]
    raw_stimulus: Dict[str, Any]
    source_yaml_path: Optional[Path] = None
