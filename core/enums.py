"""Core enumerations for Hesabu"""

from enum import Enum


class ReportType(str, Enum):
    """BOT quarterly returns handled by the engine"""
    BALANCE_SHEET = "balance-sheet"
    INCOME_STATEMENT = "income-statement"
    LOAN_PORTFOLIO = "loan-portfolio"
    INTEREST_RATES = "interest-rates"
    LIQUID_ASSETS = "liquid-assets"
    COMPLAINT_REPORT = "complaint-report"
    DEPOSITS_BORROWINGS = "deposits-borrowings"
    AGENT_BANKING_BALANCES = "agent-banking-balances"
    LOANS_DISBURSED = "loans-disbursed"
    GEOGRAPHICAL_DISTRIBUTION = "geographical-distribution"

    @property
    def form_code(self) -> str:
        """BOT form code printed on the return, e.g. MSP2_01"""
        return FORM_CODES[self]


FORM_CODES = {
    ReportType.BALANCE_SHEET: "MSP2_01",
    ReportType.INCOME_STATEMENT: "MSP2_02",
    ReportType.LOAN_PORTFOLIO: "MSP2_03",
    ReportType.INTEREST_RATES: "MSP2_04",
    ReportType.LIQUID_ASSETS: "MSP2_05",
    ReportType.COMPLAINT_REPORT: "MSP2_06",
    ReportType.DEPOSITS_BORROWINGS: "MSP2_07",
    ReportType.AGENT_BANKING_BALANCES: "MSP2_08",
    ReportType.LOANS_DISBURSED: "MSP2_09",
    ReportType.GEOGRAPHICAL_DISTRIBUTION: "MSP2_10",
}


class CellKind(str, Enum):
    """Whether a cell is entered or computed"""
    INPUT = "input"
    DERIVED = "derived"


class Period(str, Enum):
    """Time dimension of dual-column reports"""
    QUARTERLY = "quarterly"
    YTD = "ytd"


class ValidationStatus(str, Enum):
    """Outcome of a cross-sheet validation rule"""
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class ValueUnit(str, Enum):
    """What the compared values of a rule measure"""
    AMOUNT = "amount"  # TZS
    COUNT = "count"  # borrowers, complaints
