"""MSP2_09 Loans Disbursed during the quarter

The same disbursements are broken down three ways (product, sector,
region); each breakdown must add up to the same total.
"""

from core.enums import ReportType
from engine.formula_registry import FormulaSet
from reports.base import cell_range, ref, rule

REPORT_TYPE = ReportType.LOANS_DISBURSED

PRODUCTS = [
    "Individual Loans Disbursed",
    "Group Loans Disbursed",
    "SME Loans Disbursed",
    "Housing Microfinance Loans",
    "Agricultural Loans",
    "Emergency Loans",
    "Education Loans",
    "Business Development Loans",
    "Asset Financing Loans",
    "Working Capital Loans",
]

SECTORS = [
    "Agriculture Sector",
    "Manufacturing Sector",
    "Trade Sector",
    "Services Sector",
    "Transport Sector",
    "Construction Sector",
    "Mining Sector",
    "Tourism Sector",
    "Other Sectors",
]

REGIONS = [
    "Dar es Salaam",
    "Arusha",
    "Mwanza",
    "Dodoma",
    "Tanga",
    "Morogoro",
    "Mbeya",
    "Iringa",
    "Kilimanjaro",
    "Other Regions",
]

PRODUCT_CELLS = cell_range("C", 1, 10)
SECTOR_CELLS = cell_range("C", 11, 19)
REGION_CELLS = cell_range("C", 20, 29)

ROWS = (
    [(cid, name, None) for cid, name in zip(PRODUCT_CELLS, PRODUCTS)]
    + [(cid, name, None) for cid, name in zip(SECTOR_CELLS, SECTORS)]
    + [(cid, name, None) for cid, name in zip(REGION_CELLS, REGIONS)]
    + [
        ("C30", "Total Loans Disbursed", "+".join(PRODUCT_CELLS)),
        ("C31", "Total by Sector", "+".join(SECTOR_CELLS)),
        ("C32", "Total by Region", "+".join(REGION_CELLS)),
    ]
)

RULES = [
    rule(
        "MSP2_09.V1",
        "Total by Sector = Total Loans Disbursed",
        ref(REPORT_TYPE, "C31"),
        (REPORT_TYPE, "C30"),
        lhs_label="Total by Sector",
        rhs_label="Total Loans Disbursed",
    ),
    rule(
        "MSP2_09.V2",
        "Total by Region = Total Loans Disbursed",
        ref(REPORT_TYPE, "C32"),
        (REPORT_TYPE, "C30"),
        lhs_label="Total by Region",
        rhs_label="Total Loans Disbursed",
    ),
]


def build_formula_set() -> FormulaSet:
    return FormulaSet.from_rows(REPORT_TYPE, ROWS)
