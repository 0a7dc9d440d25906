# src/logicsim_core/analysis/__init__.py
from .dependencies import UpdateDependencyAnalyzer

__all__ = [
    "UpdateDependencyAnalyzer",
]
