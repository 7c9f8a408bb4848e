"""Seed inputs for every report.

The figures are consistent across returns: the balance sheet balances at
TZS 336,500,000 and every cross-sheet rule passes.
"""

from typing import Any, Dict

from core.enums import ReportType

BALANCE_SHEET = {
    "C2": 1_500_000,
    "C4": 25_000_000,
    "C5": 5_000_000,
    "C6": 3_000_000,
    "C7": 800_000,
    "C9": 15_000_000,
    "C10": 8_000_000,
    "C11": 5_000_000,
    "C12": 2_000_000,
    "C13": 500_000,
    "C15": 10_000_000,
    "C16": 200_000,
    "C18": 180_000_000,
    "C19": 10_000_000,
    "C20": 5_000_000,
    "C21": 15_000_000,
    "C22": 20_100_000,
    "C24": 80_000_000,
    "C25": 20_000_000,
    "C27": 5_000_000,
    "C28": 2_000_000,
    "C29": 1_000_000,
    "C30": 3_000_000,
    "C31": 1_500_000,
    "C32": 500_000,
    "C34": 0,
    "C37": 100_000_000,
    "C38": 20_000_000,
    "C39": 10_000_000,
    "C40": 0,
    "C41": 5_000_000,
    "C43": 20_000_000,
    "C44": 5_000_000,
    "C45": 0,
    "C46": 25_000_000,
    "C47": 5_000_000,
    "C48": 2_000_000,
    "C49": 8_000_000,
    "C52": 100_000_000,
    "C53": 0,
    "C54": 5_000_000,
    "C55": 2_000_000,
    "C56": 10_000_000,
    "C57": 7_000_000,
    "C58": 4_000_000,
    "C59": 6_000_000,
    "C60": 2_500_000,
}

_INCOME_QUARTER = {
    "C2": 12_000_000,
    "C3": 2_000_000,
    "C4": 800_000,
    "C5": 200_000,
    "C6": 0,
    "C8": 6_000_000,
    "C9": 1_500_000,
    "C10": 400_000,
    "C11": 80_000,
    "C12": 20_000,
    "C14": 500_000,
    "C15": 1_000_000,
    "C17": 800_000,
    "C18": 1_200_000,
    "C19": 400_000,
    "C20": 200_000,
    "C21": 300_000,
    "C22": 100_000,
    "C24": 1_500_000,
    "C25": 2_000_000,
    "C26": 500_000,
    "C27": 200_000,
    "C28": 100_000,
    "C29": 300_000,
    "C30": 400_000,
    "C31": 200_000,
    "C32": 100_000,
    "C33": 200_000,
    "C34": 200_000,
    "C35": 300_000,
    "C36": 100_000,
    "C37": 150_000,
    "C38": 200_000,
    "C39": 50_000,
    "C41": 500_000,
}

# Four identical quarters: year-to-date is four times the quarter
INCOME_STATEMENT = {
    cell_id: {"quarterly": value, "ytd": value * 4}
    for cell_id, value in _INCOME_QUARTER.items()
}

LOAN_PORTFOLIO = {
    # Agriculture
    "C1": 1_000, "E1": 40_000_000, "F1": 5_000_000, "G1": 3_000_000,
    "H1": 2_000_000, "I1": 1_000_000, "J1": 300_000,
    # Trade
    "C12": 2_000, "E12": 90_000_000, "F12": 6_000_000, "G12": 4_000_000,
    "H12": 5_000_000, "I12": 3_000_000, "J12": 600_000,
    # Personal (Private)
    "C22": 1_200, "E22": 40_000_000, "F22": 4_000_000, "G22": 3_000_000,
    "H22": 2_000_000, "I22": 2_000_000, "J22": 300_000,
    "D69": 20_100_000,
}

INTEREST_RATES = {
    # Consumer, Business, Agricultural, Microenterprise
    "C1": 500, "D1": 20_000_000,
    "C2": 1_200, "D2": 70_000_000,
    "C3": 1_000, "D3": 51_000_000,
    "C5": 300, "D5": 15_000_000,
    # Salaried: government and private sector employees
    "C11": 700, "D11": 30_000_000,
    "C12": 500, "D12": 24_000_000,
}

LIQUID_ASSETS = {
    "C2": 1_500_000,
    "C3": 30_000_000,
    "C4": 25_000_000,
    "C5": 5_000_000,
    "C6": 10_000_000,
    "C7": 5_000_000,
    "C8": 0,
    "C9": 2_000_000,
    "C10": 336_500_000,
    "C11": 16_825_000,
}

_COMPLAINTS = {
    1: [15, 2_500_000, 2, 1, 3, 4, 2, 3],
    2: [28, 4_500_000, 5, 3, 6, 7, 4, 3],
    3: [22, 3_800_000, 4, 2, 5, 6, 3, 2],
    4: [3, 500_000, 1, 0, 1, 1, 0, 0],
}

COMPLAINT_REPORT = {
    f"{column}{row}": value
    for row, values in _COMPLAINTS.items()
    for column, value in zip("CDEFGHIJ", values)
}

DEPOSITS_BORROWINGS = {
    # CRDB BANK PLC
    "C8": 15_000_000, "D8": 5_000_000, "F8": 60_000_000,
    # NMB BANK PLC
    "C21": 8_000_000, "D21": 2_000_000, "F21": 40_000_000,
    # CRDB MICROFINANCE BANK LIMITED
    "C35": 2_000_000, "D35": 500_000,
    # NMB MICROFINANCE BANK LIMITED
    "C42": 500_000,
    # VODACOM, AIRTEL
    "C48": 500_000,
    "C49": 300_000,
    # AFRICAN DEVELOPMENT BANK, WORLD BANK
    "F59": 15_000_000, "G59": 5_000_000,
    "G60": 5_000_000,
}

AGENT_BANKING_BALANCES = {
    # CRDB BANK PLC, NBC BANK TANZANIA LIMITED, NMB BANK PLC
    "C6": 2_000_000,
    "C19": 500_000,
    "C20": 2_500_000,
}

LOANS_DISBURSED = {
    # products
    "C1": 50_000_000, "C2": 30_000_000, "C3": 20_000_000, "C4": 15_000_000,
    "C5": 10_000_000, "C6": 8_000_000, "C7": 6_000_000, "C8": 4_000_000,
    "C9": 3_000_000, "C10": 2_000_000,
    # sectors
    "C11": 25_000_000, "C12": 20_000_000, "C13": 30_000_000, "C14": 20_000_000,
    "C15": 12_000_000, "C16": 15_000_000, "C17": 8_000_000, "C18": 12_000_000,
    "C19": 6_000_000,
    # regions
    "C20": 40_000_000, "C21": 25_000_000, "C22": 20_000_000, "C23": 15_000_000,
    "C24": 12_000_000, "C25": 10_000_000, "C26": 8_000_000, "C27": 6_000_000,
    "C28": 5_000_000, "C29": 7_000_000,
}


def _region(row: int, branches, employees, savings, borrowers, loans, outstanding):
    values = {"B": branches, "C": employees, "D": savings}
    values.update(zip("EFGH", borrowers))
    values.update(zip("IJKL", loans))
    values.update(zip("MNOP", outstanding))
    return {f"{column}{row}": value for column, value in values.items()}


GEOGRAPHICAL_DISTRIBUTION = {
    # Arusha
    **_region(2, 2, 18, 6_000_000, (300, 250, 120, 15), (320, 260, 130, 15),
              (15_000_000, 12_000_000, 10_000_000, 8_000_000)),
    # Dar es Salaam
    **_region(3, 3, 40, 12_000_000, (700, 600, 300, 40), (750, 640, 310, 42),
              (30_000_000, 25_000_000, 25_000_000, 20_000_000)),
    # Mwanza
    **_region(17, 1, 12, 4_000_000, (250, 200, 100, 10), (260, 210, 100, 10),
              (10_000_000, 10_000_000, 8_000_000, 7_000_000)),
    # Mjini Magharibi
    **_region(212, 1, 10, 3_000_000, (200, 180, 90, 12), (210, 185, 95, 12),
              (10_000_000, 8_000_000, 7_000_000, 5_000_000)),
}

SAMPLE_INPUTS: Dict[ReportType, Dict[str, Any]] = {
    ReportType.BALANCE_SHEET: BALANCE_SHEET,
    ReportType.INCOME_STATEMENT: INCOME_STATEMENT,
    ReportType.LOAN_PORTFOLIO: LOAN_PORTFOLIO,
    ReportType.INTEREST_RATES: INTEREST_RATES,
    ReportType.LIQUID_ASSETS: LIQUID_ASSETS,
    ReportType.COMPLAINT_REPORT: COMPLAINT_REPORT,
    ReportType.DEPOSITS_BORROWINGS: DEPOSITS_BORROWINGS,
    ReportType.AGENT_BANKING_BALANCES: AGENT_BANKING_BALANCES,
    ReportType.LOANS_DISBURSED: LOANS_DISBURSED,
    ReportType.GEOGRAPHICAL_DISTRIBUTION: GEOGRAPHICAL_DISTRIBUTION,
}
