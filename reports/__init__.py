"""BOT return definitions: layouts, formulas and cross-sheet rules"""

from functools import lru_cache

from engine.formula_registry import FormulaRegistry
from engine.validation_registry import ValidationRegistry

from . import (
    balance_sheet,
    income_statement,
    loan_portfolio,
    interest_rates,
    liquid_assets,
    complaint_report,
    deposits_borrowings,
    agent_banking_balances,
    loans_disbursed,
    geographical_distribution,
)
from .samples import SAMPLE_INPUTS

REPORT_MODULES = [
    balance_sheet,
    income_statement,
    loan_portfolio,
    interest_rates,
    liquid_assets,
    complaint_report,
    deposits_borrowings,
    agent_banking_balances,
    loans_disbursed,
    geographical_distribution,
]


@lru_cache(maxsize=1)
def default_formula_registry() -> FormulaRegistry:
    """Formula sets of every supported return."""
    return FormulaRegistry(module.build_formula_set() for module in REPORT_MODULES)


@lru_cache(maxsize=1)
def default_validation_registry() -> ValidationRegistry:
    """Validation rules of every supported return, in form order."""
    rules = [r for module in REPORT_MODULES for r in module.RULES]
    return ValidationRegistry(rules, formula_registry=default_formula_registry())


__all__ = [
    "REPORT_MODULES",
    "SAMPLE_INPUTS",
    "default_formula_registry",
    "default_validation_registry",
]
