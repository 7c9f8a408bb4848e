"""MSP2_02 Income Statement

Every row carries a quarterly and a year-to-date cell (``C1.quarterly``,
``C1.ytd``); each formula applies to both periods.
"""

from core.enums import Period, ReportType
from engine.formula_registry import FormulaSet
from reports.balance_sheet import REPORT_TYPE as BALANCE_SHEET
from reports.base import cell_range, ref, rule

REPORT_TYPE = ReportType.INCOME_STATEMENT

PERIODS = (Period.QUARTERLY, Period.YTD)

ROWS = [
    ("C1", "1. INTEREST INCOME", "+".join(cell_range("C", 2, 6))),
    ("C2", "(a) Interest - Loans to Clients", None),
    ("C3", "(b) Interest - Loans to Microfinance Service Providers", None),
    ("C4", "(c) Interest - Investments in Government Securities", None),
    ("C5", "(d) Interest - Bank Deposits", None),
    ("C6", "(e) Interest - Others", None),
    ("C7", "2. INTEREST EXPENSE", "+".join(cell_range("C", 8, 12))),
    ("C8", "(a) Interest - Borrowings from Banks & Financial Institutions in Tanzania", None),
    ("C9", "(b) Interest - Borrowing from Microfinance Service Providers in Tanzania", None),
    ("C10", "(c) Interest - Borrowings from Abroad", None),
    ("C11", "(d) Interest - Borrowing from Shareholders", None),
    ("C12", "(e) Interest - Others", None),
    ("C13", "3. NET INTEREST INCOME (1 less 2)", "C1-C7"),
    ("C14", "4. BAD DEBTS WRITTEN-OFF NOT PROVIDED FOR", None),
    ("C15", "5. PROVISION FOR BAD AND DOUBTFUL DEBTS", None),
    ("C16", "6. NON-INTEREST INCOME", "+".join(cell_range("C", 17, 22))),
    ("C17", "(a) Commissions", None),
    ("C18", "(b) Fees", None),
    ("C19", "(c) Rental Income on Premises", None),
    ("C20", "(d) Dividends on Equity Investment", None),
    ("C21", "(e) Income from Recovery of Charged-off Assets", None),
    ("C22", "(f) Other Income", None),
    ("C23", "7. NON-INTEREST EXPENSES", "+".join(cell_range("C", 24, 39))),
    ("C24", "(a) Management Salaries and Benefits", None),
    ("C25", "(b) Employees Salaries and Benefits", None),
    ("C26", "(c) Wages", None),
    ("C27", "(d) Pensions Contributions", None),
    ("C28", "(e) Skills and Development Levy", None),
    ("C29", "(f) Rental Expense on Premises and Equipment", None),
    ("C30", "(g) Depreciation - Premises and Equipment", None),
    ("C31", "(h) Amortization - Leasehold Rights and Equipment", None),
    ("C32", "(i) Foreclosure and Litigation Expenses", None),
    ("C33", "(j) Management Fees", None),
    ("C34", "(k) Auditors Fees", None),
    ("C35", "(l) Taxes", None),
    ("C36", "(m) License Fees", None),
    ("C37", "(n) Insurance", None),
    ("C38", "(o) Utilities Expenses", None),
    ("C39", "(p) Other Non-Interest Expenses", None),
    ("C40", "8. NET INCOME / (LOSS) BEFORE INCOME TAX", "C13+C16-C14-C15-C23"),
    ("C41", "9. INCOME TAX PROVISION", None),
    ("C42", "10. NET INCOME / (LOSS) AFTER INCOME TAX", "C40-C41"),
]

RULES = [
    rule(
        "MSP2_02.V1",
        "Net Income After Tax YTD = MSP2_01.C59 (Profit/Loss)",
        ref(REPORT_TYPE, "C42.ytd"),
        (BALANCE_SHEET, "C59"),
        lhs_label="Net Income After Tax YTD",
        rhs_label="MSP2_01.C59",
    ),
    rule(
        "MSP2_02.V2",
        "Interest Income = sum of components",
        ref(REPORT_TYPE, "C1.quarterly"),
        (REPORT_TYPE, "C2.quarterly+C3.quarterly+C4.quarterly+C5.quarterly+C6.quarterly"),
        lhs_label="Interest Income",
        rhs_label="C2 + C3 + C4 + C5 + C6",
    ),
    rule(
        "MSP2_02.V3",
        "Net Interest Income = Interest Income - Interest Expense",
        ref(REPORT_TYPE, "C13.quarterly"),
        (REPORT_TYPE, "C1.quarterly-C7.quarterly"),
        lhs_label="Net Interest Income",
        rhs_label="C1 - C7",
    ),
    rule(
        "MSP2_02.V4",
        "Net Income After Tax = Net Income Before Tax - Tax Expense",
        ref(REPORT_TYPE, "C42.quarterly"),
        (REPORT_TYPE, "C40.quarterly-C41.quarterly"),
        lhs_label="Net Income After Tax",
        rhs_label="C40 - C41",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS, periods=PERIODS)
