"""Core data models for Hesabu"""

import math
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import CellKind, ReportType, ValidationStatus, ValueUnit


DEFAULT_TOLERANCE = 0.01


# ─────────────────────────────────────────────────────────────
# Cells & formulas
# ─────────────────────────────────────────────────────────────

class Cell(BaseModel):
    """Value of one cell in a report store"""
    report_type: ReportType
    cell_id: str
    value: float = 0.0
    kind: CellKind
    label: str = ""


class FormulaTerm(BaseModel):
    """Signed reference to a cell of the same report"""
    model_config = ConfigDict(frozen=True)

    cell_id: str
    sign: Literal[1, -1] = 1


class Formula(BaseModel):
    """Derived cell defined as a signed sum of other cells"""
    model_config = ConfigDict(frozen=True)

    report_type: ReportType
    target_cell: str
    terms: tuple[FormulaTerm, ...]

    @property
    def expression(self) -> str:
        parts = []
        for i, term in enumerate(self.terms):
            if term.sign < 0:
                parts.append(f"-{term.cell_id}")
            else:
                parts.append(term.cell_id if i == 0 else f"+{term.cell_id}")
        return "".join(parts)


class CellDefinition(BaseModel):
    """Row of a report layout: a cell id, its label and optional formula"""
    model_config = ConfigDict(frozen=True)

    cell_id: str
    label: str = ""
    formula: Optional[Formula] = None

    @property
    def kind(self) -> CellKind:
        return CellKind.DERIVED if self.formula is not None else CellKind.INPUT


# ─────────────────────────────────────────────────────────────
# Cross-sheet validation
# ─────────────────────────────────────────────────────────────

class CellRef(BaseModel):
    """Cell address qualified by its report"""
    model_config = ConfigDict(frozen=True)

    report_type: ReportType
    cell_id: str

    @property
    def label(self) -> str:
        return f"{self.report_type.form_code}.{self.cell_id}"


class RuleTerm(BaseModel):
    """Signed cross-sheet reference on the right-hand side of a rule"""
    model_config = ConfigDict(frozen=True)

    ref: CellRef
    sign: Literal[1, -1] = 1


class ValidationRule(BaseModel):
    """Equality check between a cell and a signed sum of other cells"""
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    lhs: CellRef
    rhs: tuple[RuleTerm, ...] = Field(min_length=1)
    tolerance: float = Field(default=DEFAULT_TOLERANCE, ge=0)
    unit: ValueUnit = ValueUnit.AMOUNT
    lhs_label: Optional[str] = None
    rhs_label: Optional[str] = None

    @property
    def lhs_description(self) -> str:
        return self.lhs_label or self.lhs.label

    @property
    def rhs_description(self) -> str:
        if self.rhs_label:
            return self.rhs_label
        parts = []
        for i, term in enumerate(self.rhs):
            if i == 0:
                parts.append(term.ref.label if term.sign > 0 else f"-{term.ref.label}")
            else:
                parts.append(f"{'+' if term.sign > 0 else '-'} {term.ref.label}")
        return " ".join(parts)

    @property
    def report_types(self) -> list[ReportType]:
        """Reports referenced by this rule, lhs first, without duplicates"""
        seen: list[ReportType] = [self.lhs.report_type]
        for term in self.rhs:
            if term.ref.report_type not in seen:
                seen.append(term.ref.report_type)
        return seen


class ValidationResult(BaseModel):
    """Outcome of evaluating one validation rule"""
    rule_id: str
    description: str
    status: ValidationStatus
    expected: Optional[float] = None  # rhs value
    actual: Optional[float] = None  # lhs value
    difference: Optional[float] = None
    passed: Optional[bool] = None
    message: str = ""
    missing_reports: list[ReportType] = []

    @field_validator("expected", "actual")
    @classmethod
    def _finite(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not math.isfinite(value):
            raise ValueError("validation values must be finite")
        return value


class ValidationSummary(BaseModel):
    """Counts per status for a batch of results"""
    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def all_passed(self) -> bool:
        return self.failed == 0
