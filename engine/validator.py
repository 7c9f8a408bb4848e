"""Cross-sheet validator."""

from __future__ import annotations

import math
from typing import Callable, Iterable, List, Mapping, Optional, Union

import structlog

from core.enums import ReportType, ValidationStatus, ValueUnit
from core.exceptions import UnknownCellError
from core.models import CellRef, ValidationResult, ValidationRule, ValidationSummary
from engine.validation_registry import ValidationRegistry

logger = structlog.get_logger(__name__)

Snapshot = Mapping[str, float]
StoreLookup = Callable[[ReportType], Optional[Snapshot]]


def format_amount(value: float) -> str:
    return f"{value:,.2f}"


def format_value(value: float, unit: ValueUnit = ValueUnit.AMOUNT) -> str:
    """Amounts with two decimals, counts as whole numbers when they are."""
    if unit == ValueUnit.COUNT:
        return f"{value:,.0f}" if float(value).is_integer() else f"{value:,}"
    return format_amount(value)


class Validator:
    """Evaluate validation rules against report snapshots.

    ``store_for`` returns the snapshot of a report, or ``None`` when that
    report is not loaded; rules touching an unloaded report are skipped.
    """

    def __init__(self, registry: ValidationRegistry):
        self.registry = registry

    def validate(
        self,
        store_for: Union[StoreLookup, Mapping[ReportType, Snapshot]],
        rules: Optional[Iterable[ValidationRule]] = None,
    ) -> List[ValidationResult]:
        lookup = _as_lookup(store_for)
        rules = list(self.registry.all_rules() if rules is None else rules)
        results = [self.check(rule, lookup) for rule in rules]

        summary = summarize(results)
        logger.info(
            "validation_completed",
            total=summary.total,
            passed=summary.passed,
            failed=summary.failed,
            skipped=summary.skipped,
        )
        return results

    def validate_report(
        self,
        report_type: ReportType,
        store_for: Union[StoreLookup, Mapping[ReportType, Snapshot]],
    ) -> List[ValidationResult]:
        return self.validate(store_for, self.registry.rules_for(report_type))

    def check(self, rule: ValidationRule, store_for: StoreLookup) -> ValidationResult:
        snapshots = {rt: store_for(rt) for rt in rule.report_types}
        missing = [rt for rt, snap in snapshots.items() if snap is None]
        if missing:
            return ValidationResult(
                rule_id=rule.id,
                description=rule.description,
                status=ValidationStatus.SKIPPED,
                missing_reports=missing,
            )

        actual = _resolve(snapshots, rule.lhs)
        expected = 0.0
        for term in rule.rhs:
            expected += term.sign * _resolve(snapshots, term.ref)

        if not math.isfinite(actual - expected):
            logger.warning("validation_overflow", rule_id=rule.id)
            return ValidationResult(
                rule_id=rule.id,
                description=rule.description,
                status=ValidationStatus.FAILED,
                passed=False,
                message=(
                    f"Overflow: {rule.lhs_description} or {rule.rhs_description} "
                    "is too large to compare"
                ),
            )

        difference = actual - expected
        passed = abs(difference) <= rule.tolerance
        message = ""
        if not passed:
            message = (
                f"Mismatch: {rule.lhs_description} ({format_value(actual, rule.unit)}) "
                f"≠ {rule.rhs_description} ({format_value(expected, rule.unit)})"
            )
            logger.warning(
                "validation_mismatch",
                rule_id=rule.id,
                actual=actual,
                expected=expected,
                difference=difference,
            )

        return ValidationResult(
            rule_id=rule.id,
            description=rule.description,
            status=ValidationStatus.PASSED if passed else ValidationStatus.FAILED,
            expected=expected,
            actual=actual,
            difference=difference,
            passed=passed,
            message=message,
        )


def summarize(results: Iterable[ValidationResult]) -> ValidationSummary:
    summary = ValidationSummary()
    for result in results:
        summary.total += 1
        if result.status == ValidationStatus.PASSED:
            summary.passed += 1
        elif result.status == ValidationStatus.FAILED:
            summary.failed += 1
        else:
            summary.skipped += 1
    return summary


def _as_lookup(store_for) -> StoreLookup:
    if isinstance(store_for, Mapping):
        return store_for.get
    return store_for


def _resolve(snapshots: Mapping[ReportType, Snapshot], ref: CellRef) -> float:
    snapshot = snapshots[ref.report_type]
    try:
        return snapshot[ref.cell_id]
    except KeyError:
        raise UnknownCellError(ref.report_type, ref.cell_id) from None
