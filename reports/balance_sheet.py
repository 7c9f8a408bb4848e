"""MSP2_01 Balance Sheet"""

from core.enums import ReportType
from engine.formula_registry import FormulaSet
from reports.base import ref, rule

REPORT_TYPE = ReportType.BALANCE_SHEET

ROWS = [
    ("C1", "1. CASH AND CASH EQUIVALENTS", "C2+C3+C6+C7"),
    ("C2", "(a) Cash in Hand", None),
    ("C3", "(b) Balances with Banks and Financial Institutions", "C4+C5"),
    ("C4", "(i) Non-Agent Banking Balances", None),
    ("C5", "(ii) Agent-Banking Balances", None),
    ("C6", "(c) Balances with Microfinance Service Providers", None),
    ("C7", "(d) MNOs Float Balances", None),
    ("C8", "2. INVESTMENT IN DEBT SECURITIES - NET", "C9+C10+C11+C12-C13"),
    ("C9", "(a) Treasury Bills", None),
    ("C10", "(b) Other Government Securities", None),
    ("C11", "(c) Private Securities", None),
    ("C12", "(d) Others", None),
    ("C13", "(e) Allowance for Probable Losses (Deduction)", None),
    ("C14", "3. EQUITY INVESTMENTS - NET", "C15-C16"),
    ("C15", "(a) Equity Investment", None),
    ("C16", "(b) Allowance for Probable Losses (Deduction)", None),
    ("C17", "4. LOANS - NET", "C18+C19+C20+C21-C22"),
    ("C18", "(a) Loans to Clients", None),
    ("C19", "(b) Loan to Staff and Related Parties", None),
    ("C20", "(c) Loans to other Microfinance Service Providers", None),
    ("C21", "(d) Accrued Interest on Loans", None),
    ("C22", "(e) Allowances for Probable Losses (Deduction)", None),
    ("C23", "5. PROPERTY, PLANT AND EQUIPMENT - NET", "C24-C25"),
    ("C24", "(a) Property, Plant and Equipment", None),
    ("C25", "(b) Accumulated Depreciation (Deduction)", None),
    ("C26", "6. OTHER ASSETS", "C27+C28+C29+C30+C31-C32"),
    ("C27", "(a) Receivables", None),
    ("C28", "(b) Prepaid Expenses", None),
    ("C29", "(c) Deferred Tax Assets", None),
    ("C30", "(d) Intangible Assets", None),
    ("C31", "(e) Miscellaneous Assets", None),
    ("C32", "(f) Allowance for Probable Losses (Deduction)", None),
    ("C33", "7. TOTAL ASSETS", "C1+C8+C14+C17+C23+C26"),
    ("C34", "8. LIABILITIES", None),
    ("C35", "9. BORROWINGS", "C36+C42"),
    ("C36", "(a) Borrowings in Tanzania", "C37+C38+C39+C40+C41"),
    ("C37", "(i) Borrowings from Banks and Financial Institutions", None),
    ("C38", "(ii) Borrowing from Other Microfinance Service Providers", None),
    ("C39", "(iii) Borrowing from Shareholders", None),
    ("C40", "(iv) Borrowing from Public through Debt Securities", None),
    ("C41", "(v) Other Borrowings", None),
    ("C42", "(b) Borrowings from Abroad", "C43+C44+C45"),
    ("C43", "(i) Borrowings from Banks and Financial Institutions", None),
    ("C44", "(ii) Borrowing from Shareholders", None),
    ("C45", "(iii) Other Borrowings", None),
    ("C46", "10. CASH COLLATERAL / LOAN INSURANCE GUARANTEES / COMPULSORY SAVINGS", None),
    ("C47", "11. TAX PAYABLES", None),
    ("C48", "12. DIVIDEND PAYABLES", None),
    ("C49", "13. OTHER PAYABLES AND ACCRUALS", None),
    ("C50", "14. TOTAL LIABILITIES", "C35+C46+C47+C48+C49"),
    ("C51", "15. TOTAL CAPITAL", "C52+C53+C54+C55+C56+C57+C58+C59+C60"),
    ("C52", "(a) Paid-up Ordinary Share Capital", None),
    ("C53", "(b) Paid-up Preference Shares", None),
    ("C54", "(c) Capital Grants", None),
    ("C55", "(d) Donations", None),
    ("C56", "(e) Share Premium", None),
    ("C57", "(f) General Reserves", None),
    ("C58", "(g) Retained Earnings", None),
    ("C59", "(h) Profit/Loss", None),
    ("C60", "(i) Other Reserves", None),
    ("C61", "16. TOTAL LIABILITIES AND CAPITAL", "C50+C51"),
]

RULES = [
    rule(
        "MSP2_01.V1",
        "Total Assets = Total Liabilities and Capital",
        ref(REPORT_TYPE, "C33"),
        (REPORT_TYPE, "C61"),
        lhs_label="Total Assets",
        rhs_label="Total Liabilities and Capital",
    ),
    rule(
        "MSP2_01.V2",
        "Cash and Cash Equivalents = sum of components",
        ref(REPORT_TYPE, "C1"),
        (REPORT_TYPE, "C2+C3+C6+C7"),
        lhs_label="Cash and Cash Equivalents",
        rhs_label="C2 + C3 + C6 + C7",
    ),
    rule(
        "MSP2_01.V3",
        "Loans Net = Gross Loans - Provisions",
        ref(REPORT_TYPE, "C17"),
        (REPORT_TYPE, "C18+C19+C20+C21-C22"),
        lhs_label="Loans Net",
        rhs_label="C18 + C19 + C20 + C21 - C22",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
