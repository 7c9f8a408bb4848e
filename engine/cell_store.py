"""Per-report cell store."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from core.enums import CellKind, ReportType
from core.exceptions import InvalidCellError, UnknownCellError
from core.models import Cell
from engine.cells import coerce_value, normalize_inputs
from engine.formula_registry import FormulaSet

DerivedComputer = Callable[[FormulaSet, Mapping[str, float]], Dict[str, float]]


class CellStore:
    """Current values of one report.

    Inputs are written through ``set_input``; derived cells are recomputed
    from scratch after every write, so a read never sees a stale value.
    Inputs that were never supplied read as 0.
    """

    def __init__(
        self,
        formula_set: FormulaSet,
        compute: DerivedComputer,
        inputs: Optional[Mapping[str, Any]] = None,
    ):
        self._formula_set = formula_set
        self._compute = compute
        self._inputs: Dict[str, float] = {}
        self._derived: Dict[str, float] = {}
        if inputs:
            self.set_inputs(inputs)
        else:
            self.recompute()

    @property
    def report_type(self) -> ReportType:
        return self._formula_set.report_type

    @property
    def formula_set(self) -> FormulaSet:
        return self._formula_set

    def set_input(self, cell_id: str, value: Any) -> None:
        """Write one input cell and recompute derived cells."""
        self._check_input(cell_id)
        inputs = dict(self._inputs)
        inputs[cell_id] = coerce_value(value, cell_id)
        self._apply(inputs)

    def set_inputs(self, values: Mapping[str, Any]) -> None:
        """Write several inputs with a single recomputation.

        Accepts the data-source shape, including per-period mappings. The
        whole batch is checked, and the totals computed, before anything is
        written.
        """
        flat = normalize_inputs(values)
        for cell_id in flat:
            self._check_input(cell_id)
        self._apply({**self._inputs, **flat})

    def recompute(self) -> None:
        self._derived = self._compute(self._formula_set, self._inputs)

    def _apply(self, inputs: Dict[str, float]) -> None:
        derived = self._compute(self._formula_set, inputs)
        self._inputs = inputs
        self._derived = derived

    def get(self, cell_id: str) -> float:
        kind = self._formula_set.kind(cell_id)
        if kind == CellKind.DERIVED:
            return self._derived.get(cell_id, 0.0)
        return self._inputs.get(cell_id, 0.0)

    def cell(self, cell_id: str) -> Cell:
        definition = self._formula_set.definition(cell_id)
        return Cell(
            report_type=self.report_type,
            cell_id=cell_id,
            value=self.get(cell_id),
            kind=definition.kind,
            label=definition.label,
        )

    def cells(self) -> List[Cell]:
        return [self.cell(cell_id) for cell_id in self._formula_set.cell_ids]

    def snapshot(self) -> Mapping[str, float]:
        """Read-only copy of every cell value in form order."""
        return MappingProxyType({cid: self.get(cid) for cid in self._formula_set.cell_ids})

    def missing_inputs(self) -> List[str]:
        return [cid for cid in self._formula_set.input_cells if cid not in self._inputs]

    def _check_input(self, cell_id: str) -> None:
        if cell_id not in self._formula_set:
            raise UnknownCellError(self.report_type, cell_id)
        if self._formula_set.kind(cell_id) == CellKind.DERIVED:
            raise InvalidCellError(self.report_type, cell_id)
