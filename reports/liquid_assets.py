"""MSP2_05 Computation of Liquid Assets

The required minimum (C11, 5% of total assets) and the liquid asset
ratio are products rather than sums; the minimum is supplied with the
inputs and the ratio is left to the presentation layer.
"""

from core.enums import ReportType
from engine.formula_registry import FormulaSet
from reports.base import cell_range, ref, rule

REPORT_TYPE = ReportType.LIQUID_ASSETS

LIQUID_ASSET_CELLS = cell_range("C", 2, 9)

ROWS = [
    ("C1", "A: TOTAL AVAILABLE LIQUID ASSETS", "+".join(LIQUID_ASSET_CELLS)),
    ("C2", "(a) Cash in hand", None),
    ("C3", "(b) Balances with Banks and Financial Institutions", None),
    ("C4", "(c) Balances with Microfinance Service Providers", None),
    ("C5", "(d) MNOs Float Cash Balances", None),
    ("C6", "(e) Treasury Bills (Unencumbered)", None),
    ("C7", "(f) Other Government Securities with Residual Maturity of One Year "
           "or Less (Unencumbered)", None),
    ("C8", "(g) Private Securities with Residual Maturity of One Year or Less "
           "(Unencumbered)", None),
    ("C9", "(h) Other Liquid Assets Maturing within 12 Months", None),
    ("C10", "B. TOTAL ASSETS", None),
    ("C11", "C: Required Minimum Liquid Assets (5%*B)", None),
    ("C12", "D: Excess (Deficiency) Liquid Assets (A-C)", "C1-C11"),
]

_BALANCE_SHEET_CHECKS = [
    ("C2", "Cash in hand"),
    ("C3", "Balances with Banks"),
    ("C4", "Balances with MFSPs"),
    ("C5", "MNOs Float Cash"),
]

RULES = [
    rule(
        f"MSP2_05.V{n}",
        f"{cell_id} = MSP2_01.{cell_id} ({name})",
        ref(REPORT_TYPE, cell_id),
        (ReportType.BALANCE_SHEET, cell_id),
        lhs_label=cell_id,
        rhs_label=f"MSP2_01.{cell_id}",
    )
    for n, (cell_id, name) in enumerate(_BALANCE_SHEET_CHECKS, start=1)
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
