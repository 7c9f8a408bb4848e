"""Cross-sheet validation rule registry."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.enums import ReportType
from core.exceptions import InvalidValidationRule, UnknownCellError
from core.models import CellRef, ValidationRule
from engine.formula_registry import FormulaRegistry


class ValidationRegistry:
    """Ordered collection of validation rules.

    When a formula registry is supplied, every cell a rule references must be
    declared in its report; references to reports that are not registered
    are left for the validator to report as skipped.
    """

    def __init__(
        self,
        rules: Iterable[ValidationRule] = (),
        formula_registry: Optional[FormulaRegistry] = None,
    ):
        self._rules: Dict[str, ValidationRule] = {}
        self._formula_registry = formula_registry
        for rule in rules:
            self.register(rule)

    def register(self, rule: ValidationRule) -> None:
        if rule.id in self._rules:
            raise InvalidValidationRule(f"Duplicate validation rule id {rule.id}", rule.id)
        if self._formula_registry is not None:
            self._check_ref(rule.lhs)
            for term in rule.rhs:
                self._check_ref(term.ref)
        self._rules[rule.id] = rule

    def rules_for(self, report_type: ReportType) -> List[ValidationRule]:
        """Rules whose left-hand side belongs to ``report_type``."""
        return [r for r in self._rules.values() if r.lhs.report_type == report_type]

    def all_rules(self) -> List[ValidationRule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> ValidationRule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise InvalidValidationRule(f"Unknown validation rule {rule_id}", rule_id) from None

    def __len__(self) -> int:
        return len(self._rules)

    def _check_ref(self, ref: CellRef) -> None:
        if ref.report_type not in self._formula_registry:
            return
        if ref.cell_id not in self._formula_registry.formula_set(ref.report_type):
            raise UnknownCellError(ref.report_type, ref.cell_id)
