"""Computation engine: cell stores, formulas, evaluation and validation"""

from .cell_store import CellStore
from .evaluator import DependencyEvaluator
from .formula_registry import FormulaRegistry, FormulaSet
from .validation_registry import ValidationRegistry
from .validator import Validator, summarize

__all__ = [
    "CellStore",
    "DependencyEvaluator",
    "FormulaRegistry",
    "FormulaSet",
    "ValidationRegistry",
    "Validator",
    "summarize",
]
