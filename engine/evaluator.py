"""Dependency evaluator: topological evaluation of a report's formulas."""

from __future__ import annotations

import math
from collections import deque
from typing import Any, Dict, List, Mapping, Optional, Set

import structlog

from core.enums import ReportType
from core.exceptions import CyclicFormulaError, InvalidValueError
from engine.cell_store import CellStore
from engine.formula_registry import FormulaRegistry, FormulaSet

logger = structlog.get_logger(__name__)


class DependencyEvaluator:
    """Compute every derived cell of a report from its inputs."""

    def __init__(self, registry: FormulaRegistry):
        self.registry = registry

    def execution_order(self, report_type: ReportType) -> List[str]:
        """Derived cells in an order where every cell follows its terms."""
        return self._derived_order(self.registry.formula_set(report_type))

    def evaluate(
        self, report_type: ReportType, inputs: Mapping[str, float]
    ) -> Dict[str, float]:
        return self.compute(self.registry.formula_set(report_type), inputs)

    def build_store(
        self, report_type: ReportType, raw_inputs: Optional[Mapping[str, Any]] = None
    ) -> CellStore:
        """Populated store for ``report_type`` from data-source output."""
        formula_set = self.registry.formula_set(report_type)
        return CellStore(formula_set, self.compute, raw_inputs)

    def compute(
        self, formula_set: FormulaSet, inputs: Mapping[str, float]
    ) -> Dict[str, float]:
        """Derived values for ``inputs``. Missing inputs count as 0."""
        values: Dict[str, float] = {
            cid: inputs[cid] for cid in formula_set.input_cells if cid in inputs
        }
        derived: Dict[str, float] = {}
        for cell_id in self._derived_order(formula_set):
            formula = formula_set.definition(cell_id).formula
            total = 0.0
            for term in formula.terms:
                total += term.sign * values.get(term.cell_id, 0.0)
            if not math.isfinite(total):
                raise InvalidValueError(
                    f"Total of {cell_id} overflows: {formula.expression}", cell_id
                )
            values[cell_id] = total
            derived[cell_id] = total

        logger.debug(
            "report_evaluated",
            report_type=formula_set.report_type.value,
            inputs=len(inputs),
            derived=len(derived),
        )
        return derived

    def _derived_order(self, formula_set: FormulaSet) -> List[str]:
        adjacency: Dict[str, Set[str]] = {cid: set() for cid in formula_set.cell_ids}
        in_degree: Dict[str, int] = {cid: 0 for cid in formula_set.cell_ids}

        for formula in formula_set.formulas:
            for term in formula.terms:
                if formula.target_cell not in adjacency[term.cell_id]:
                    adjacency[term.cell_id].add(formula.target_cell)
                    in_degree[formula.target_cell] += 1

        order = self._topological_sort(adjacency, in_degree)
        if len(order) < len(adjacency):
            placed = set(order)
            remaining = {node for node in adjacency if node not in placed}
            raise CyclicFormulaError(
                formula_set.report_type, self._cycle_members(adjacency, remaining)
            )

        derived = set(formula_set.derived_cells)
        return [node for node in order if node in derived]

    def _topological_sort(
        self, adjacency: Dict[str, Set[str]], in_degree: Dict[str, int]
    ) -> List[str]:
        # Seed in declaration order so the result is deterministic
        queue = deque([node for node, deg in in_degree.items() if deg == 0])
        order: List[str] = []

        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in sorted(adjacency.get(node, set())):
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        return order

    def _cycle_members(
        self, adjacency: Dict[str, Set[str]], remaining: Set[str]
    ) -> Set[str]:
        """Drop nodes that are only downstream of a cycle.

        Kahn's algorithm leaves cycle members plus everything they feed;
        repeatedly removing nodes with no successor left in the set keeps
        only cells that sit on a cycle or between two cycles.
        """
        members = set(remaining)
        changed = True
        while changed:
            changed = False
            for node in list(members):
                if not adjacency.get(node, set()) & members:
                    members.discard(node)
                    changed = True
        return members
