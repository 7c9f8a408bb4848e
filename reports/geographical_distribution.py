"""MSP2_10 Geographical Distribution of branches, employees and loans

Mainland regions occupy rows 2-27 and Zanzibar regions rows 212-217.
Row 210 totals the mainland, row 228 Zanzibar and row 229 both.
"""

from typing import Dict

from core.enums import ReportType
from engine.formula_registry import FormulaSet
from reports.balance_sheet import REPORT_TYPE as BALANCE_SHEET
from reports.base import ref, rule
from reports.loan_portfolio import REPORT_TYPE as LOAN_PORTFOLIO

REPORT_TYPE = ReportType.GEOGRAPHICAL_DISTRIBUTION

REGIONS = [
    "Arusha", "Dar es Salaam", "Dodoma", "Geita", "Iringa", "Kagera", "Katavi",
    "Kigoma", "Kilimanjaro", "Lindi", "Manyara", "Mara", "Mbeya",
    "Mjini Magharibi", "Morogoro", "Mtwara", "Mwanza", "Njombe", "Pemba North",
    "Pemba South", "Pwani", "Rukwa", "Ruvuma", "Shinyanga", "Simiyu", "Singida",
    "Songwe", "Tabora", "Tanga", "Unguja North", "Unguja South",
    "Unguja Urban West",
]

ZANZIBAR_PREFIXES = ("Mjini", "Pemba", "Unguja")

MAINLAND_REGIONS = [r for r in REGIONS if not r.startswith(ZANZIBAR_PREFIXES)]
ZANZIBAR_REGIONS = [r for r in REGIONS if r.startswith(ZANZIBAR_PREFIXES)]

MAINLAND_FIRST_ROW = 2
ZANZIBAR_FIRST_ROW = 212
MAINLAND_TOTAL_ROW = 210
ZANZIBAR_TOTAL_ROW = 228
GRAND_TOTAL_ROW = 229

COLUMN_LABELS = {
    "B": "Number of Branches",
    "C": "Number of Employees",
    "D": "Compulsory Savings",
    "E": "Borrowers - Female",
    "F": "Borrowers - Male",
    "G": "Borrowers - Youth",
    "H": "Borrowers - Groups",
    "I": "Loans - Female",
    "J": "Loans - Male",
    "K": "Loans - Youth",
    "L": "Loans - Groups",
    "M": "Outstanding - Female",
    "N": "Outstanding - Male",
    "O": "Outstanding - Youth",
    "P": "Outstanding - Groups",
    "Q": "Total Outstanding",
}

ENTERED_COLUMNS = list("BCDEFGHIJKLMNOP")
ALL_COLUMNS = ENTERED_COLUMNS + ["Q"]


def region_rows() -> Dict[int, str]:
    """Row number -> region name."""
    rows = {MAINLAND_FIRST_ROW + i: name for i, name in enumerate(MAINLAND_REGIONS)}
    rows.update({ZANZIBAR_FIRST_ROW + i: name for i, name in enumerate(ZANZIBAR_REGIONS)})
    return rows


def _row(n: int, label: str, entered: Dict[str, str] = None):
    entered = entered or {}
    cells = []
    for column in ALL_COLUMNS:
        expression = f"M{n}+N{n}+O{n}+P{n}" if column == "Q" else entered.get(column)
        cells.append((f"{column}{n}", f"{label} - {COLUMN_LABELS[column]}", expression))
    return cells


def _total(members, column: str) -> str:
    return "+".join(f"{column}{n}" for n in members)


def _rows():
    mainland = range(MAINLAND_FIRST_ROW, MAINLAND_FIRST_ROW + len(MAINLAND_REGIONS))
    zanzibar = range(ZANZIBAR_FIRST_ROW, ZANZIBAR_FIRST_ROW + len(ZANZIBAR_REGIONS))
    regions = region_rows()

    rows = []
    for n in mainland:
        rows.extend(_row(n, regions[n]))
    rows.extend(_row(MAINLAND_TOTAL_ROW, "Mainland Total", {
        column: _total(mainland, column) for column in ENTERED_COLUMNS
    }))
    for n in zanzibar:
        rows.extend(_row(n, regions[n]))
    rows.extend(_row(ZANZIBAR_TOTAL_ROW, "Zanzibar Total", {
        column: _total(zanzibar, column) for column in ENTERED_COLUMNS
    }))
    rows.extend(_row(GRAND_TOTAL_ROW, "Grand Total", {
        column: f"{column}{MAINLAND_TOTAL_ROW}+{column}{ZANZIBAR_TOTAL_ROW}"
        for column in ENTERED_COLUMNS
    }))
    return rows


ROWS = _rows()

RULES = [
    rule(
        "MSP2_10.V1",
        "Compulsory Savings = MSP2_01.C46",
        ref(REPORT_TYPE, f"D{GRAND_TOTAL_ROW}"),
        (BALANCE_SHEET, "C46"),
        lhs_label="Compulsory Savings",
        rhs_label="MSP2_01.C46",
    ),
    rule(
        "MSP2_10.V2",
        "Total Outstanding = MSP2_03.D67",
        ref(REPORT_TYPE, f"Q{GRAND_TOTAL_ROW}"),
        (LOAN_PORTFOLIO, "D67"),
        lhs_label="Total Outstanding",
        rhs_label="MSP2_03.D67",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
