"""MSP2_04 Interest Rates Structure

Only the number of borrowers (C) and outstanding amount (D) columns are
modelled. The rate columns are weighted averages and min/max ranges,
which are not sums of cells.
"""

from core.enums import ReportType, ValueUnit
from engine.formula_registry import FormulaSet
from reports.base import ref, rule

REPORT_TYPE = ReportType.INTEREST_RATES

LOAN_TYPES = {
    1: "Consumer Loans",
    2: "Business Loans",
    3: "Agricultural Loans",
    4: "Group Loans",
    5: "Microenterprise Loans",
    6: "SME Loans",
    7: "Housing Loans",
    8: "Education Loans",
    9: "Health Loans",
    10: "Salaried Loans",
    11: "(a) Government Employees",
    12: "(b) Private Sector Employees",
    13: "Other Loans",
    14: "Islamic Finance Loans",
    15: "Total",
}

SALARIED_ROW = 10
SALARIED_PARTS = (11, 12)
TOTAL_ROW = 15
# Rows added into the total; salaried sub-rows are counted through row 10
TOTAL_PARTS = [n for n in range(1, TOTAL_ROW) if n not in SALARIED_PARTS]


def _sum(column: str, rows) -> str:
    return "+".join(f"{column}{n}" for n in rows)


def _rows():
    rows = []
    for n, loan_type in LOAN_TYPES.items():
        for column, heading in (("C", "Number of Borrowers"), ("D", "Outstanding Amount")):
            if n == SALARIED_ROW:
                expression = _sum(column, SALARIED_PARTS)
            elif n == TOTAL_ROW:
                expression = _sum(column, TOTAL_PARTS)
            else:
                expression = None
            rows.append((f"{column}{n}", f"{loan_type} - {heading}", expression))
    return rows


ROWS = _rows()

RULES = [
    rule(
        "MSP2_04.V1",
        "Total Outstanding (D15) = MSP2_01.C17 + MSP2_01.C22",
        ref(REPORT_TYPE, "D15"),
        (ReportType.BALANCE_SHEET, "C17+C22"),
        lhs_label="Total Outstanding",
        rhs_label="MSP2_01.C17+C22",
    ),
    rule(
        "MSP2_04.V2",
        "Total Borrowers (C15) = MSP2_03.C67",
        ref(REPORT_TYPE, "C15"),
        (ReportType.LOAN_PORTFOLIO, "C67"),
        lhs_label="Total Borrowers",
        rhs_label="MSP2_03.C67",
        unit=ValueUnit.COUNT,
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
