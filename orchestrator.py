"""Reporting orchestrator"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

import structlog

from core.enums import ReportType
from core.exceptions import DataSourceError
from core.interfaces import ReportDataSource
from core.models import ValidationResult
from engine.cell_store import CellStore
from engine.evaluator import DependencyEvaluator
from engine.formula_registry import FormulaRegistry
from engine.validation_registry import ValidationRegistry
from engine.validator import Validator
from ui.progress import ProgressTracker, NullProgress

logger = structlog.get_logger(__name__)


@dataclass
class ReportingContext:
    """Loaded stores, data-source failures and the latest validation batch"""
    stores: Dict[ReportType, CellStore] = field(default_factory=dict)
    failures: Dict[ReportType, str] = field(default_factory=dict)
    results: List[ValidationResult] = field(default_factory=list)

    def snapshot_for(self, report_type: ReportType) -> Optional[Mapping[str, float]]:
        store = self.stores.get(report_type)
        return store.snapshot() if store is not None else None


class ReportingOrchestrator:
    """Load every report, evaluate it and run the cross-sheet validator"""

    def __init__(
        self,
        source: ReportDataSource,
        formula_registry: Optional[FormulaRegistry] = None,
        validation_registry: Optional[ValidationRegistry] = None,
        progress: Optional[ProgressTracker] = None,
    ):
        if formula_registry is None or validation_registry is None:
            from reports import default_formula_registry, default_validation_registry
            formula_registry = formula_registry or default_formula_registry()
            validation_registry = validation_registry or default_validation_registry()

        self.source = source
        self.formula_registry = formula_registry
        self.evaluator = DependencyEvaluator(formula_registry)
        self.validator = Validator(validation_registry)
        self.progress = progress or NullProgress()
        self.context = ReportingContext()

    async def run(
        self, report_types: Optional[Iterable[ReportType]] = None
    ) -> ReportingContext:
        """Load the given reports (all registered ones by default) and validate"""
        ctx = ReportingContext()
        if report_types is None:
            report_types = self.formula_registry.report_types()
        targets = list(report_types)

        for report_type in targets:
            await self._load(ctx, report_type)

        self.context = ctx
        self.revalidate()
        self.progress.complete()
        return ctx

    async def refresh(self, report_type: ReportType) -> CellStore:
        """Refetch one report bypassing the cache, then revalidate"""
        if hasattr(self.source, "clear_cache"):
            self.source.clear_cache(report_type)
        await self._load(self.context, report_type)
        self.revalidate()
        store = self.context.stores.get(report_type)
        if store is None:
            raise DataSourceError(self.context.failures[report_type], report_type)
        return store

    def update_input(self, report_type: ReportType, cell_id: str, value: float) -> CellStore:
        """Write one input and replace the validation batch"""
        store = self.store(report_type)
        store.set_input(cell_id, value)
        self.revalidate()
        return store

    def store(self, report_type: ReportType) -> CellStore:
        store = self.context.stores.get(report_type)
        if store is None:
            reason = self.context.failures.get(report_type, "report not loaded")
            raise DataSourceError(
                f"Report '{report_type.value}' unavailable: {reason}", report_type
            )
        return store

    def revalidate(self) -> List[ValidationResult]:
        self.context.results = self.validator.validate(self.context.snapshot_for)
        return self.context.results

    def results_for(self, report_type: ReportType) -> List[ValidationResult]:
        """Latest results of the rules that belong to ``report_type``"""
        rule_ids = {r.id for r in self.validator.registry.rules_for(report_type)}
        return [r for r in self.context.results if r.rule_id in rule_ids]

    async def _load(self, ctx: ReportingContext, report_type: ReportType):
        self.progress.start_report(report_type)
        try:
            raw = await self.source.fetch(report_type)
        except DataSourceError as e:
            ctx.stores.pop(report_type, None)
            ctx.failures[report_type] = str(e)
            logger.warning("report_unavailable", report_type=report_type.value, error=str(e))
            self.progress.fail(report_type, str(e))
            return

        ctx.stores[report_type] = self.evaluator.build_store(report_type, raw)
        ctx.failures.pop(report_type, None)
        self.progress.complete_report(report_type)
