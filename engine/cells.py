"""Cell id helpers: signed-sum expressions and raw input normalisation."""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Mapping, Optional

from core.enums import Period, ReportType
from core.exceptions import InvalidValueError
from core.models import Formula, FormulaTerm

TERM_PATTERN = re.compile(r"\s*([+-]?)\s*([A-Z]+\d+(?:\.[a-z]+)?)\s*")


def composite_id(cell_id: str, period: Period | str) -> str:
    """Cell id of one period of a dual-period row, e.g. ``C1.ytd``."""
    return f"{cell_id}.{getattr(period, 'value', period)}"


def parse_terms(expression: str) -> List[FormulaTerm]:
    """Parse ``"C9+C10-C13"`` into signed terms.

    Only cell ids joined by ``+`` and ``-`` are accepted.
    """
    terms: List[FormulaTerm] = []
    pos = 0
    while pos < len(expression):
        match = TERM_PATTERN.match(expression, pos)
        if not match or match.end() == pos:
            raise ValueError(f"Cannot parse expression '{expression}' at position {pos}")
        sign, cell_id = match.groups()
        if not sign and terms:
            raise ValueError(f"Missing operator before {cell_id} in '{expression}'")
        terms.append(FormulaTerm(cell_id=cell_id, sign=-1 if sign == "-" else 1))
        pos = match.end()
    if not terms:
        raise ValueError("Empty expression")
    return terms


def make_formula(
    report_type: ReportType,
    target_cell: str,
    expression: str,
    period: Optional[Period] = None,
) -> Formula:
    """Build a formula; with ``period`` every cell id gets that suffix."""
    terms = parse_terms(expression)
    if period is not None:
        target_cell = composite_id(target_cell, period)
        terms = [
            FormulaTerm(cell_id=composite_id(t.cell_id, period), sign=t.sign)
            for t in terms
        ]
    return Formula(report_type=report_type, target_cell=target_cell, terms=tuple(terms))


def coerce_value(value: Any, cell_id: Optional[str] = None) -> float:
    """Convert a raw value to a finite float."""
    if isinstance(value, bool):
        raise InvalidValueError(f"Boolean is not a valid amount for {cell_id}", cell_id)
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidValueError(f"Invalid value {value!r} for {cell_id}", cell_id) from e
    if not math.isfinite(number):
        raise InvalidValueError(f"Non-finite value {value!r} for {cell_id}", cell_id)
    return number


def normalize_inputs(raw: Optional[Mapping[str, Any]]) -> Dict[str, float]:
    """Flatten raw data-source output into ``cell id -> float``.

    Values that are mappings are treated as per-period values of a
    dual-period row: ``{"C1": {"quarterly": 5, "ytd": 20}}`` becomes
    ``{"C1.quarterly": 5.0, "C1.ytd": 20.0}``. ``None`` values are dropped
    so that they read as missing.
    """
    flat: Dict[str, float] = {}
    for cell_id, value in (raw or {}).items():
        if isinstance(value, Mapping):
            for period, period_value in value.items():
                if period_value is None:
                    continue
                key = composite_id(cell_id, period)
                flat[key] = coerce_value(period_value, key)
        elif value is not None:
            flat[cell_id] = coerce_value(value, cell_id)
    return flat
