"""MSP2_06 Complaint Report

Rows 1-4 are entered for every column; row 5 (unresolved at the end of the
quarter) is derived as ``row1 + row2 - row3 - row4`` and column K totals
the complaint natures E-J of each row.
"""

from core.enums import ReportType, ValueUnit
from engine.formula_registry import FormulaSet
from reports.base import ref, rule

REPORT_TYPE = ReportType.COMPLAINT_REPORT

ROW_LABELS = {
    1: "Balance at the beginning of the quarter",
    2: "Complaints received during the quarter",
    3: "Complaints resolved during the quarter",
    4: "Complaints withdrawn during the quarter",
    5: "Unresolved complaints at the end of the quarter",
}

COLUMN_LABELS = {
    "C": "Number",
    "D": "Value (TZS)",
    "E": "Interest Rate",
    "F": "Loan Agreement",
    "G": "Loan Repayment",
    "H": "Loan Statement",
    "I": "Loan Process",
    "J": "Others",
    "K": "Total of Natures",
}

NATURE_COLUMNS = ["E", "F", "G", "H", "I", "J"]
ENTERED_COLUMNS = ["C", "D"] + NATURE_COLUMNS


def _rows():
    rows = []
    for n, row_label in ROW_LABELS.items():
        for column in ENTERED_COLUMNS:
            expression = f"{column}1+{column}2-{column}3-{column}4" if n == 5 else None
            rows.append((f"{column}{n}", f"{row_label} - {COLUMN_LABELS[column]}", expression))
        rows.append((
            f"K{n}",
            f"{row_label} - {COLUMN_LABELS['K']}",
            "+".join(f"{column}{n}" for column in NATURE_COLUMNS),
        ))
    return rows


ROWS = _rows()

RULES = [
    rule(
        f"MSP2_06.V{n}",
        f"Row {n}: Number = sum of natures",
        ref(REPORT_TYPE, f"C{n}"),
        (REPORT_TYPE, f"K{n}"),
        lhs_label=f"Row {n} Number",
        rhs_label="sum of natures",
        unit=ValueUnit.COUNT,
    )
    for n in range(1, 5)
] + [
    rule(
        "MSP2_06.V5",
        "Row 5: Unresolved = C1 + C2 - C3 - C4",
        ref(REPORT_TYPE, "C5"),
        (REPORT_TYPE, "C1+C2-C3-C4"),
        lhs_label="Unresolved",
        rhs_label="C1 + C2 - C3 - C4",
        unit=ValueUnit.COUNT,
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
