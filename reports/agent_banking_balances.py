"""MSP2_08 Agent Banking Balances held with banks"""

from core.enums import ReportType
from engine.formula_registry import FormulaSet
from reports.base import ref, rule

REPORT_TYPE = ReportType.AGENT_BANKING_BALANCES

BANKS = [
    "ABSA BANK TANZANIA LIMITED",
    "ACCESS BANK TANZANIA LIMITED",
    "AKIBA COMMERCIAL BANK PLC",
    "BANK OF AFRICA TANZANIA LIMITED",
    "BANK OF TANZANIA",
    "CRDB BANK PLC",
    "DIAMOND TRUST BANK TANZANIA LIMITED",
    "ECOBANK TANZANIA LIMITED",
    "EQUITY BANK TANZANIA LIMITED",
    "EXIM BANK TANZANIA LIMITED",
    "FIRST NATIONAL BANK TANZANIA LIMITED",
    "HOUSING FINANCE BANK OF TANZANIA LIMITED",
    "I&M BANK TANZANIA LIMITED",
    "KCB BANK TANZANIA LIMITED",
    "MAENDELEO BANK PLC",
    "MKOMBOZI COMMERCIAL BANK PLC",
    "MPAMBA BANK PLC",
    "MWALIMU COMMERCIAL BANK PLC",
    "NBC BANK TANZANIA LIMITED",
    "NMB BANK PLC",
    "PEOPLE'S BANK OF ZANZIBAR",
    "POSTAL BANK LIMITED",
    "STANBIC BANK TANZANIA LIMITED",
    "TANZANIA COMMERCIAL BANK LIMITED",
    "TANZANIA INVESTMENT BANK LIMITED",
    "TANZANIA POSTAL BANK LIMITED",
    "TANZANIA WOMEN BANK LIMITED",
    "TIB CORPORATE BANK LIMITED",
    "TIB DEVELOPMENT BANK LIMITED",
]

TOTAL_ROW = len(BANKS) + 1

BANK_CELLS = [f"C{n}" for n in range(1, TOTAL_ROW)]

ROWS = [(cid, name, None) for cid, name in zip(BANK_CELLS, BANKS)] + [
    (f"C{TOTAL_ROW}", "TOTAL BALANCE", "+".join(BANK_CELLS)),
]

RULES = [
    rule(
        "MSP2_08.V1",
        "Total Balance (C30) = MSP2_01.C5",
        ref(REPORT_TYPE, f"C{TOTAL_ROW}"),
        (ReportType.BALANCE_SHEET, "C5"),
        lhs_label="Total Balance",
        rhs_label="MSP2_01.C5",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
