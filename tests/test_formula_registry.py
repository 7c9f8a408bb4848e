import pytest

from core.enums import CellKind, ReportType
from core.exceptions import (
    InvalidFormulaSet,
    UnknownCellError,
    UnknownReportError,
    UnresolvedReferenceError,
)
from engine.cells import make_formula, normalize_inputs, parse_terms
from engine.formula_registry import FormulaRegistry, FormulaSet

BS = ReportType.BALANCE_SHEET


def test_parse_terms_signed_sum():
    terms = parse_terms("C9+C10 + C11-C13")
    assert [(t.cell_id, t.sign) for t in terms] == [
        ("C9", 1), ("C10", 1), ("C11", 1), ("C13", -1)
    ]


def test_parse_terms_composite_ids():
    terms = parse_terms("C40.ytd-C41.ytd")
    assert [(t.cell_id, t.sign) for t in terms] == [("C40.ytd", 1), ("C41.ytd", -1)]


@pytest.mark.parametrize("expression", ["", "C1*C2", "C1 C2", "C1+"])
def test_parse_terms_rejects_non_sums(expression):
    with pytest.raises(ValueError):
        parse_terms(expression)


def test_formula_expression_round_trips():
    formula = make_formula(BS, "C8", "C9+C10+C11+C12-C13")
    assert formula.expression == "C9+C10+C11+C12-C13"


def test_normalize_inputs_flattens_periods():
    flat = normalize_inputs({"C2": {"quarterly": 5, "ytd": "20"}, "C3": 1, "C4": None})
    assert flat == {"C2.quarterly": 5.0, "C2.ytd": 20.0, "C3": 1.0}


def test_duplicate_target_rejected():
    with pytest.raises(InvalidFormulaSet) as exc:
        FormulaSet(
            BS,
            inputs=["C2", "C3"],
            formulas=[make_formula(BS, "C1", "C2"), make_formula(BS, "C1", "C3")],
        )
    assert exc.value.cells == ["C1"]


def test_target_declared_as_input_rejected():
    with pytest.raises(InvalidFormulaSet):
        FormulaSet(BS, inputs=["C1", "C2"], formulas=[make_formula(BS, "C1", "C2")])


def test_dangling_reference_rejected():
    with pytest.raises(UnresolvedReferenceError) as exc:
        FormulaSet(BS, inputs=["C2"], formulas=[make_formula(BS, "C1", "C2+C99")])
    assert exc.value.cells == ["C99"]
    assert isinstance(exc.value, InvalidFormulaSet)


def test_formula_filed_under_other_report_rejected():
    with pytest.raises(InvalidFormulaSet):
        FormulaSet(
            BS,
            inputs=["C2"],
            formulas=[make_formula(ReportType.INCOME_STATEMENT, "C1", "C2")],
        )


def test_from_rows_keeps_form_order():
    formula_set = FormulaSet.from_rows(BS, [
        ("C1", "Total", "C2+C3"),
        ("C2", "A", None),
        ("C3", "B", None),
    ])
    assert formula_set.cell_ids == ["C1", "C2", "C3"]
    assert formula_set.input_cells == ["C2", "C3"]
    assert formula_set.derived_cells == ["C1"]
    assert formula_set.definition("C1").label == "Total"
    assert formula_set.kind("C2") == CellKind.INPUT


def test_unknown_cell_definition():
    formula_set = FormulaSet(BS, inputs=["C2"])
    with pytest.raises(UnknownCellError):
        formula_set.definition("C404")


def test_registry_rejects_second_set_for_report():
    registry = FormulaRegistry([FormulaSet(BS, inputs=["C2"])])
    with pytest.raises(InvalidFormulaSet):
        registry.register(FormulaSet(BS, inputs=["C3"]))


def test_registry_unknown_report():
    registry = FormulaRegistry()
    with pytest.raises(UnknownReportError):
        registry.formulas_for(BS)


def test_default_registry_covers_every_report(formula_registry):
    assert set(formula_registry.report_types()) == set(ReportType)


def test_balance_sheet_formulas(formula_registry):
    formulas = {f.target_cell: f.expression for f in formula_registry.formulas_for(BS)}
    assert formulas["C1"] == "C2+C3+C6+C7"
    assert formulas["C33"] == "C1+C8+C14+C17+C23+C26"
    assert formulas["C61"] == "C50+C51"
    assert "C34" not in formulas
    assert len(formulas) == 14


def test_income_statement_formulas_apply_to_both_periods(formula_registry):
    formula_set = formula_registry.formula_set(ReportType.INCOME_STATEMENT)
    assert formula_set.definition("C42.quarterly").formula.expression == (
        "C40.quarterly-C41.quarterly"
    )
    assert formula_set.definition("C42.ytd").formula.expression == "C40.ytd-C41.ytd"
    assert len(formula_set) == 84


def test_geographical_distribution_layout(formula_registry):
    formula_set = formula_registry.formula_set(ReportType.GEOGRAPHICAL_DISTRIBUTION)
    assert formula_set.definition("B2").label.startswith("Arusha")
    assert formula_set.definition("B212").label.startswith("Mjini Magharibi")
    assert formula_set.definition("B217").label.startswith("Unguja Urban West")
    assert "B28" not in formula_set
    assert formula_set.definition("Q229").formula.expression == "M229+N229+O229+P229"
    assert formula_set.definition("D229").formula.expression == "D210+D228"
