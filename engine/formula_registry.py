"""Formula registry: static per-report cell layouts and signed-sum formulas."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import structlog

from core.enums import CellKind, Period, ReportType
from core.exceptions import (
    InvalidFormulaSet,
    UnknownCellError,
    UnknownReportError,
    UnresolvedReferenceError,
)
from core.models import CellDefinition, Formula
from engine.cells import composite_id, make_formula

logger = structlog.get_logger(__name__)

# (cell id, label, expression or None for an input)
Row = Tuple[str, str, Optional[str]]


class FormulaSet:
    """Layout and formulas of one report.

    Cells keep the order they were declared in, which is the row order of
    the printed form.
    """

    def __init__(
        self,
        report_type: ReportType,
        inputs: Iterable[CellDefinition | str] = (),
        formulas: Iterable[Formula] = (),
        labels: Optional[Dict[str, str]] = None,
    ):
        self.report_type = report_type
        labels = labels or {}

        definitions: Dict[str, CellDefinition] = {}
        for item in inputs:
            definition = (
                item if isinstance(item, CellDefinition)
                else CellDefinition(cell_id=item, label=labels.get(item, ""))
            )
            if definition.formula is not None:
                raise InvalidFormulaSet(
                    report_type,
                    f"{definition.cell_id} declared as input but carries a formula",
                    [definition.cell_id],
                )
            if definition.cell_id in definitions:
                raise InvalidFormulaSet(
                    report_type, f"input {definition.cell_id} declared twice", [definition.cell_id]
                )
            definitions[definition.cell_id] = definition

        for formula in formulas:
            target = formula.target_cell
            if formula.report_type != report_type:
                raise InvalidFormulaSet(
                    report_type,
                    f"formula for {target} belongs to '{formula.report_type.value}'",
                    [target],
                )
            existing = definitions.get(target)
            if existing is not None:
                reason = "duplicate formula" if existing.formula else "target is declared as input"
                raise InvalidFormulaSet(report_type, f"{reason} for {target}", [target])
            definitions[target] = CellDefinition(
                cell_id=target, label=labels.get(target, ""), formula=formula
            )

        dangling = sorted({
            term.cell_id
            for definition in definitions.values() if definition.formula
            for term in definition.formula.terms
            if term.cell_id not in definitions
        })
        if dangling:
            raise UnresolvedReferenceError(
                report_type, f"unresolved references {', '.join(dangling)}", dangling
            )

        self._definitions = definitions

    @classmethod
    def from_rows(
        cls,
        report_type: ReportType,
        rows: Sequence[Row],
        periods: Sequence[Period] = (),
    ) -> "FormulaSet":
        """Build a set from ``(cell_id, label, expression)`` rows.

        With ``periods`` every row expands into one cell per period and each
        formula is applied to every period independently.
        """
        definitions: List[CellDefinition] = []
        for cell_id, label, expression in rows:
            for period in (periods or (None,)):
                target = composite_id(cell_id, period) if period else cell_id
                text = f"{label} ({period.value})" if period else label
                formula = (
                    make_formula(report_type, cell_id, expression, period)
                    if expression else None
                )
                definitions.append(CellDefinition(cell_id=target, label=text, formula=formula))
        return cls.from_definitions(report_type, definitions)

    @classmethod
    def from_definitions(
        cls, report_type: ReportType, definitions: Iterable[CellDefinition]
    ) -> "FormulaSet":
        """Build a set from definitions, keeping their declared order."""
        definitions = list(definitions)
        inputs = [d for d in definitions if d.formula is None]
        formulas = [d.formula for d in definitions if d.formula is not None]
        labels = {d.cell_id: d.label for d in definitions}
        built = cls(report_type, inputs=inputs, formulas=formulas, labels=labels)
        # Restore form order; the constructor groups inputs before formulas
        built._definitions = {d.cell_id: built._definitions[d.cell_id] for d in definitions}
        return built

    @property
    def cell_ids(self) -> List[str]:
        return list(self._definitions)

    @property
    def input_cells(self) -> List[str]:
        return [cid for cid, d in self._definitions.items() if d.formula is None]

    @property
    def derived_cells(self) -> List[str]:
        return [cid for cid, d in self._definitions.items() if d.formula is not None]

    @property
    def formulas(self) -> List[Formula]:
        return [d.formula for d in self._definitions.values() if d.formula is not None]

    def definition(self, cell_id: str) -> CellDefinition:
        try:
            return self._definitions[cell_id]
        except KeyError:
            raise UnknownCellError(self.report_type, cell_id) from None

    def kind(self, cell_id: str) -> CellKind:
        return self.definition(cell_id).kind

    def __contains__(self, cell_id: str) -> bool:
        return cell_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


class FormulaRegistry:
    """Formula sets of every report, keyed by report type"""

    def __init__(self, formula_sets: Iterable[FormulaSet] = ()):
        self._sets: Dict[ReportType, FormulaSet] = {}
        for formula_set in formula_sets:
            self.register(formula_set)

    def register(self, formula_set: FormulaSet) -> None:
        if formula_set.report_type in self._sets:
            raise InvalidFormulaSet(
                formula_set.report_type, "a formula set is already registered"
            )
        self._sets[formula_set.report_type] = formula_set
        logger.debug(
            "formula_set_registered",
            report_type=formula_set.report_type.value,
            cells=len(formula_set),
            formulas=len(formula_set.derived_cells),
        )

    def formula_set(self, report_type: ReportType) -> FormulaSet:
        try:
            return self._sets[report_type]
        except KeyError:
            raise UnknownReportError(report_type) from None

    def formulas_for(self, report_type: ReportType) -> List[Formula]:
        """All formulas of a report in form order."""
        return self.formula_set(report_type).formulas

    def report_types(self) -> List[ReportType]:
        return list(self._sets)

    def __contains__(self, report_type: ReportType) -> bool:
        return report_type in self._sets
