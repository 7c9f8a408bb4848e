from core.enums import CellKind, ReportType
from reports import (
    agent_banking_balances,
    deposits_borrowings,
    geographical_distribution,
    interest_rates,
    loan_portfolio,
    loans_disbursed,
)

BS = ReportType.BALANCE_SHEET


def test_complaint_unresolved_row(evaluator):
    store = evaluator.build_store(ReportType.COMPLAINT_REPORT, {
        "C1": 15, "C2": 28, "C3": 22, "C4": 3,
    })
    assert store.get("C5") == 18


def test_complaint_sample_totals(sample_stores):
    store = sample_stores[ReportType.COMPLAINT_REPORT]
    assert store.get("C5") == 18
    assert store.get("D5") == 2_700_000
    assert store.get("K2") == 28
    assert store.get("K5") == 18


def test_balance_sheet_cash(evaluator):
    store = evaluator.build_store(BS, {
        "C2": 1_500_000, "C4": 25_000_000, "C5": 5_000_000,
        "C6": 3_000_000, "C7": 800_000,
    })
    assert store.get("C3") == 30_000_000
    assert store.get("C1") == 35_300_000


def test_balance_sheet_sample_balances(sample_stores):
    store = sample_stores[BS]
    assert store.get("C33") == store.get("C61") == 336_500_000
    assert store.get("C17") == 189_900_000
    assert store.get("C50") == 200_000_000
    assert store.get("C51") == 136_500_000


def test_income_statement_sample(sample_stores):
    store = sample_stores[ReportType.INCOME_STATEMENT]
    assert store.get("C13.quarterly") == 7_000_000
    assert store.get("C40.quarterly") == 2_000_000
    assert store.get("C42.quarterly") == 1_500_000
    assert store.get("C42.ytd") == 6_000_000


def test_deposits_borrowings_totals(sample_stores):
    store = sample_stores[ReportType.DEPOSITS_BORROWINGS]
    assert store.get("H30") == 100_000_000
    assert store.get("E30") == 30_000_000
    assert store.get("E46") == 3_000_000
    assert store.get("E56") == 800_000
    assert store.get("E57") == 33_800_000
    assert store.get("H66") == 125_000_000


def test_deposits_institution_rows():
    rows = deposits_borrowings.institution_rows()
    assert rows[8] == "CRDB BANK PLC"
    assert rows[48] == "VODACOM TANZANIA LIMITED"
    assert rows[64] == "OTHER INTERNATIONAL LENDERS"
    assert 30 not in rows and 31 not in rows


def test_geographical_totals(sample_stores):
    store = sample_stores[ReportType.GEOGRAPHICAL_DISTRIBUTION]
    assert store.get("Q3") == 100_000_000
    assert store.get("Q210") == 180_000_000
    assert store.get("Q228") == 30_000_000
    assert store.get("Q229") == 210_000_000
    assert store.get("D229") == 25_000_000
    assert store.get("B229") == 7


def test_region_split():
    assert len(geographical_distribution.MAINLAND_REGIONS) == 26
    assert geographical_distribution.ZANZIBAR_REGIONS == [
        "Mjini Magharibi", "Pemba North", "Pemba South",
        "Unguja North", "Unguja South", "Unguja Urban West",
    ]


def test_loans_disbursed_breakdowns_agree(sample_stores):
    store = sample_stores[ReportType.LOANS_DISBURSED]
    assert store.get("C30") == store.get("C31") == store.get("C32") == 148_000_000


def test_loans_disbursed_labels(formula_registry):
    formula_set = formula_registry.formula_set(ReportType.LOANS_DISBURSED)
    assert formula_set.definition("C4").label == "Housing Microfinance Loans"
    assert formula_set.definition("C8").label == "Business Development Loans"
    assert formula_set.definition("C10").label == "Working Capital Loans"
    assert formula_set.definition("C12").label == "Manufacturing Sector"
    assert formula_set.definition("C13").label == "Trade Sector"
    assert formula_set.definition("C17").label == "Mining Sector"
    assert formula_set.definition("C27").label == "Iringa"
    assert len(loans_disbursed.SECTORS) == 9


def test_loan_portfolio_totals_come_from_sector_rows(sample_stores):
    store = sample_stores[ReportType.LOAN_PORTFOLIO]
    assert store.get("D1") == 51_000_000
    assert store.get("D12") == 108_000_000
    assert store.get("C67") == 4_200
    assert store.get("E67") == 170_000_000
    assert store.get("J67") == 1_200_000
    assert store.get("D67") == 210_000_000
    assert store.cell("E67").kind == CellKind.DERIVED
    assert store.cell("D69").kind == CellKind.INPUT


def test_loan_portfolio_sector_rows():
    rows = loan_portfolio.sector_rows()
    assert len(rows) == 22
    assert rows[12] == "Trade"
    assert rows[22] == "Personal (Private)"


def test_interest_rates_salaried_and_total(evaluator):
    store = evaluator.build_store(ReportType.INTEREST_RATES, {
        "C1": 10, "D1": 1_000, "C11": 3, "D11": 300, "C12": 2, "D12": 200,
    })
    assert store.get("C10") == 5
    assert store.get("D10") == 500
    # Sub-rows reach the total only through row 10
    assert store.get("C15") == 15
    assert store.get("D15") == 1_500
    assert interest_rates.TOTAL_PARTS == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 13, 14]


def test_liquid_assets_excess(sample_stores):
    store = sample_stores[ReportType.LIQUID_ASSETS]
    assert store.get("C1") == 78_500_000
    assert store.get("C12") == 61_675_000


def test_agent_banking_total(sample_stores):
    store = sample_stores[ReportType.AGENT_BANKING_BALANCES]
    assert store.get("C30") == 5_000_000
    assert agent_banking_balances.TOTAL_ROW == 30
    assert store.cell("C6").label == "CRDB BANK PLC"
