"""MSP2_07 Deposits and Borrowings with Banks, MSPs, MNOs and lenders abroad

Columns: C deposits TZS, D deposits FCY, E total deposits (C+D),
F borrowed TZS, G borrowed FCY, H total borrowed (F+G).
"""

from typing import Dict, List, Tuple

from core.enums import ReportType
from engine.formula_registry import FormulaSet
from reports.balance_sheet import REPORT_TYPE as BALANCE_SHEET
from reports.base import ref, rule

REPORT_TYPE = ReportType.DEPOSITS_BORROWINGS

ENTERED_COLUMNS = ["C", "D", "F", "G"]
SUMMED_COLUMNS = ["C", "D", "E", "F", "G", "H"]

BANKS = [
    "ABSA BANK TANZANIA LIMITED",
    "ACCESS BANK TANZANIA LIMITED",
    "AFRICAN BANKING CORPORATION LIMITED",
    "AKIBA COMMERCIAL BANK LIMITED",
    "BANK OF AFRICA TANZANIA LIMITED",
    "BANK OF TANZANIA",
    "CITIBANK TANZANIA LIMITED",
    "CRDB BANK PLC",
    "DCB COMMERCIAL BANK PLC",
    "EQUITY BANK TANZANIA LIMITED",
    "EXIM BANK TANZANIA LIMITED",
    "HABIB BANK LIMITED",
    "ICBC TANZANIA LIMITED",
    "I&M BANK TANZANIA LIMITED",
    "KCB BANK TANZANIA LIMITED",
    "MAENDELEO BANK PLC",
    "MAKAMU COMMERCIAL BANK PLC",
    "MBONI COMMERCIAL BANK PLC",
    "MUFINDO COMMERCIAL BANK PLC",
    "NATIONAL BANK OF COMMERCE LIMITED",
    "NMB BANK PLC",
    "PEOPLE'S BANK OF ZANZIBAR",
    "POSTAL BANK LIMITED",
    "STANBIC BANK TANZANIA LIMITED",
    "TANZANIA COMMERCIAL BANK LIMITED",
    "TIB DEVELOPMENT BANK LIMITED",
    "TRIUMPH BANK LIMITED",
    "UNITED BANK FOR AFRICA TANZANIA LIMITED",
    "ZANZIBAR COMMERCIAL BANK LIMITED",
]

MICROFINANCE_PROVIDERS = [
    "AKIBA MICROFINANCE BANK LIMITED",
    "AMANA MICROFINANCE BANK LIMITED",
    "BENKI YA WATU MICROFINANCE BANK LIMITED",
    "CRDB MICROFINANCE BANK LIMITED",
    "ECOBANK MICROFINANCE BANK LIMITED",
    "FINCA MICROFINANCE BANK LIMITED",
    "HABIB MICROFINANCE BANK LIMITED",
    "KILIMO MICROFINANCE BANK LIMITED",
    "MEC MICROFINANCE BANK LIMITED",
    "MWANANCHI MICROFINANCE BANK LIMITED",
    "NMB MICROFINANCE BANK LIMITED",
    "SACCOS MICROFINANCE BANK LIMITED",
    "TANZANIA MICROFINANCE BANK LIMITED",
    "WAKALA MICROFINANCE BANK LIMITED",
]

MOBILE_NETWORK_OPERATORS = [
    "VODACOM TANZANIA LIMITED",
    "AIRTEL TANZANIA LIMITED",
    "TIGO TANZANIA LIMITED",
    "HALOTEL TANZANIA LIMITED",
    "ZANTEL TANZANIA LIMITED",
    "SMART TANZANIA LIMITED",
    "TTCL TANZANIA LIMITED",
    "OTHER MNOs",
]

LENDERS_ABROAD = [
    "AFRICAN DEVELOPMENT BANK",
    "WORLD BANK",
    "EUROPEAN INVESTMENT BANK",
    "INTERNATIONAL FINANCE CORPORATION",
    "KFW DEVELOPMENT BANK",
    "OTHER INTERNATIONAL LENDERS",
]

# (first institution row, institutions, total row, total label)
SECTIONS: List[Tuple[int, List[str], int, str]] = [
    (1, BANKS, 30, "Total Banks and Financial Institutions"),
    (32, MICROFINANCE_PROVIDERS, 46, "Total Microfinance Service Providers"),
    (48, MOBILE_NETWORK_OPERATORS, 56, "Total Mobile Network Operators"),
    (59, LENDERS_ABROAD, 65, "Total Abroad"),
]

COLUMN_LABELS = {
    "C": "Deposits TZS",
    "D": "Deposits FCY",
    "E": "Total Deposits",
    "F": "Borrowed TZS",
    "G": "Borrowed FCY",
    "H": "Total Borrowed",
}


def institution_rows() -> Dict[int, str]:
    """Row number -> institution name for every institution row."""
    rows: Dict[int, str] = {}
    for first, names, _, _ in SECTIONS:
        for offset, name in enumerate(names):
            rows[first + offset] = name
    return rows


def _row(n: int, label: str, entered: Dict[str, str] = None):
    """Cells of one row; ``entered`` gives formulas for C, D, F, G if derived."""
    entered = entered or {}
    cells = []
    for column in SUMMED_COLUMNS:
        if column == "E":
            expression = f"C{n}+D{n}"
        elif column == "H":
            expression = f"F{n}+G{n}"
        else:
            expression = entered.get(column)
        cells.append((f"{column}{n}", f"{label} - {COLUMN_LABELS[column]}", expression))
    return cells


def _rows():
    rows = []
    for first, names, total_row, total_label in SECTIONS:
        for offset, name in enumerate(names):
            rows.extend(_row(first + offset, name))
        members = range(first, first + len(names))
        rows.extend(_row(total_row, total_label, {
            column: "+".join(f"{column}{n}" for n in members) for column in ENTERED_COLUMNS
        }))
        if total_row == 56:
            rows.extend(_row(57, "Total Tanzania", {
                column: f"{column}30+{column}46+{column}56" for column in ENTERED_COLUMNS
            }))
    rows.extend(_row(66, "Grand Total", {
        column: f"{column}57+{column}65" for column in ENTERED_COLUMNS
    }))
    return rows


ROWS = _rows()

RULES = [
    rule(
        "MSP2_07.V1",
        "Total Borrowings TZ = MSP2_01.C37",
        ref(REPORT_TYPE, "H30"),
        (BALANCE_SHEET, "C37"),
        lhs_label="Total Borrowings TZ",
        rhs_label="MSP2_01.C37",
    ),
    rule(
        "MSP2_07.V2",
        "MSP Totals = MSP2_01.C6",
        ref(REPORT_TYPE, "E46"),
        (BALANCE_SHEET, "C6"),
        lhs_label="MSP Totals",
        rhs_label="MSP2_01.C6",
    ),
    rule(
        "MSP2_07.V3",
        "Total TZ = MSP2_01.C3 + C6 + C7",
        ref(REPORT_TYPE, "E57"),
        (BALANCE_SHEET, "C3+C6+C7"),
        lhs_label="Total TZ",
        rhs_label="MSP2_01.C3 + C6 + C7",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
