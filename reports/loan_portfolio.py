"""MSP2_03 Loan Portfolio - sectoral classification of loans

Each sector row carries the number of borrowers (C), the outstanding
amount by classification (E current, F especially mentioned,
G substandard, H doubtful, I loss) and the amount written off (J).
D is the row's total outstanding. Row 67 totals every column; the
provision amount on row 69 is weighted by classification and is supplied
by the data source.
"""

from core.enums import ReportType, ValueUnit
from engine.formula_registry import FormulaSet
from reports.base import ref, rule

REPORT_TYPE = ReportType.LOAN_PORTFOLIO

SECTORS = [
    "Agriculture",
    "Fishing",
    "Forest",
    "Hunting",
    "Financial Intermediaries",
    "Mining and Quarrying",
    "Manufacturing",
    "Building and Construction",
    "Real Estate",
    "Leasing",
    "Transport and Communication",
    "Trade",
    "Tourism",
    "Hotels and Restaurants",
    "Warehousing and Storage",
    "Electricity",
    "Gas",
    "Water",
    "Education",
    "Health",
    "Other Services",
    "Personal (Private)",
]

TOTAL_ROW = 67
PROVISION_ROW = 69

INPUT_COLUMNS = {
    "C": "Number of Borrowers",
    "E": "Current",
    "F": "Especially Mentioned",
    "G": "Substandard",
    "H": "Doubtful",
    "I": "Loss",
    "J": "Amount Written Off",
}
CLASSIFICATION_COLUMNS = "EFGHI"


def sector_rows():
    """Sector name by row number"""
    return {n: name for n, name in enumerate(SECTORS, start=1)}


def _rows():
    rows = []
    for n, sector in sector_rows().items():
        prefix = f"{n}. {sector}"
        rows.append((f"C{n}", f"{prefix} - {INPUT_COLUMNS['C']}", None))
        rows.append((
            f"D{n}",
            f"{prefix} - Total Outstanding",
            "+".join(f"{col}{n}" for col in CLASSIFICATION_COLUMNS),
        ))
        for col in "EFGHIJ":
            rows.append((f"{col}{n}", f"{prefix} - {INPUT_COLUMNS[col]}", None))

    last = len(SECTORS)
    for col in "CDEFGHIJ":
        label = "Total Outstanding" if col == "D" else INPUT_COLUMNS[col]
        rows.append((
            f"{col}{TOTAL_ROW}",
            f"Total - {label}",
            "+".join(f"{col}{n}" for n in range(1, last + 1)),
        ))
    rows.append((f"D{PROVISION_ROW}", "Provision Amount", None))
    return rows


ROWS = _rows()

RULES = [
    rule(
        "MSP2_03.V1",
        "C67 = MSP2_04.C15 (Total Borrowers)",
        ref(REPORT_TYPE, "C67"),
        (ReportType.INTEREST_RATES, "C15"),
        lhs_label="C67",
        rhs_label="MSP2_04.C15",
        unit=ValueUnit.COUNT,
    ),
    rule(
        "MSP2_03.V2",
        "Gross Loans = MSP2_01.C17 + MSP2_01.C22",
        ref(REPORT_TYPE, "D67"),
        (ReportType.BALANCE_SHEET, "C17+C22"),
        lhs_label="Total Outstanding (D67)",
        rhs_label="MSP2_01.C17 + MSP2_01.C22 (Gross Loans)",
    ),
    rule(
        "MSP2_03.V3",
        "Provision Amount = MSP2_01.C22",
        ref(REPORT_TYPE, "D69"),
        (ReportType.BALANCE_SHEET, "C22"),
        lhs_label="Provision Amount (D69)",
        rhs_label="MSP2_01.C22",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
