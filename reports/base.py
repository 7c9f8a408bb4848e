"""Helpers for declaring report layouts and validation rules as data."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from core.enums import ReportType, ValueUnit
from core.models import DEFAULT_TOLERANCE, CellRef, RuleTerm, ValidationRule
from engine.cells import parse_terms

RhsPart = Tuple[ReportType, str]


def cell_range(prefix: str, start: int, stop: int) -> List[str]:
    """``cell_range("C", 2, 6)`` -> ``["C2", ..., "C6"]`` (inclusive)."""
    return [f"{prefix}{n}" for n in range(start, stop + 1)]


def ref(report_type: ReportType, cell_id: str) -> CellRef:
    return CellRef(report_type=report_type, cell_id=cell_id)


def rule(
    rule_id: str,
    description: str,
    lhs: CellRef,
    rhs: Union[RhsPart, Sequence[RhsPart]],
    lhs_label: Optional[str] = None,
    rhs_label: Optional[str] = None,
    tolerance: float = DEFAULT_TOLERANCE,
    unit: ValueUnit = ValueUnit.AMOUNT,
) -> ValidationRule:
    """Build a rule whose rhs is given as ``(report, "C3+C6+C7")`` parts."""
    parts: Iterable[RhsPart] = [rhs] if isinstance(rhs[0], ReportType) else rhs
    terms = [
        RuleTerm(ref=ref(report_type, term.cell_id), sign=term.sign)
        for report_type, expression in parts
        for term in parse_terms(expression)
    ]
    return ValidationRule(
        id=rule_id,
        description=description,
        lhs=lhs,
        rhs=tuple(terms),
        tolerance=tolerance,
        unit=unit,
        lhs_label=lhs_label,
        rhs_label=rhs_label,
    )
