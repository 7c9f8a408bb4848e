import pytest

from core.enums import ReportType
from core.exceptions import CyclicFormulaError, InvalidValueError
from engine.cells import make_formula
from engine.evaluator import DependencyEvaluator
from engine.formula_registry import FormulaRegistry, FormulaSet
from reports import SAMPLE_INPUTS

BS = ReportType.BALANCE_SHEET


def _registry(inputs, formulas):
    return FormulaRegistry([
        FormulaSet(BS, inputs=inputs, formulas=[make_formula(BS, t, e) for t, e in formulas])
    ])


def test_evaluation_is_idempotent(evaluator):
    for report_type in ReportType:
        first = evaluator.build_store(report_type, SAMPLE_INPUTS[report_type])
        second = evaluator.build_store(report_type, SAMPLE_INPUTS[report_type])
        snapshot = dict(first.snapshot())
        first.recompute()
        assert dict(first.snapshot()) == snapshot
        assert dict(second.snapshot()) == snapshot


def test_every_formula_is_additive(formula_registry, sample_stores):
    for report_type, store in sample_stores.items():
        snapshot = store.snapshot()
        for formula in formula_registry.formulas_for(report_type):
            expected = sum(t.sign * snapshot[t.cell_id] for t in formula.terms)
            assert snapshot[formula.target_cell] == pytest.approx(expected), formula


def test_all_zero_inputs_give_zero_derived(evaluator, formula_registry):
    for report_type in ReportType:
        store = evaluator.build_store(report_type)
        for cell_id in formula_registry.formula_set(report_type).derived_cells:
            assert store.get(cell_id) == 0.0


def test_missing_inputs_count_as_zero(evaluator):
    store = evaluator.build_store(ReportType.COMPLAINT_REPORT, {"C1": 5})
    assert store.get("C2") == 0.0
    assert store.get("C5") == 5.0


def test_later_formula_sees_earlier_derived_values():
    registry = _registry(["X", "Y"], [("C3", "C2+Y"), ("C2", "X")])
    derived = DependencyEvaluator(registry).evaluate(BS, {"X": 2.0, "Y": 3.0})
    assert derived == {"C2": 2.0, "C3": 5.0}


def test_two_cell_cycle_detected():
    registry = _registry([], [("A", "B"), ("B", "A")])
    evaluator = DependencyEvaluator(registry)
    for inputs in ({}, {"A": 1.0}):
        with pytest.raises(CyclicFormulaError) as exc:
            evaluator.evaluate(BS, inputs)
        assert exc.value.cycle_members == ["A", "B"]
        assert exc.value.report_type == BS


def test_cycle_members_exclude_downstream_cells():
    registry = _registry(["X"], [("A", "B"), ("B", "A+X"), ("C", "A")])
    with pytest.raises(CyclicFormulaError) as exc:
        DependencyEvaluator(registry).evaluate(BS, {"X": 1.0})
    assert exc.value.cycle_members == ["A", "B"]


def test_self_reference_is_a_cycle():
    registry = _registry([], [("A", "A")])
    with pytest.raises(CyclicFormulaError):
        DependencyEvaluator(registry).build_store(BS)


def test_execution_order_respects_dependencies(evaluator, formula_registry):
    order = evaluator.execution_order(BS)
    position = {cell_id: i for i, cell_id in enumerate(order)}
    formula_set = formula_registry.formula_set(BS)
    assert set(order) == set(formula_set.derived_cells)
    for formula in formula_set.formulas:
        for term in formula.terms:
            if term.cell_id in position:
                assert position[term.cell_id] < position[formula.target_cell]


def test_no_rounding_in_arithmetic():
    registry = _registry(["X", "Y"], [("T", "X+Y")])
    derived = DependencyEvaluator(registry).evaluate(BS, {"X": 0.1, "Y": 0.2})
    assert derived["T"] == 0.1 + 0.2


def test_overflowing_total_is_rejected(evaluator):
    with pytest.raises(InvalidValueError) as exc:
        evaluator.build_store(BS, {"C2": 1e308, "C4": 1e308})
    assert exc.value.cell_id == "C1"


def test_overflowing_write_leaves_store_unchanged(evaluator):
    store = evaluator.build_store(BS, {"C2": 1e308})
    before = dict(store.snapshot())
    with pytest.raises(InvalidValueError):
        store.set_input("C4", 1e308)
    assert dict(store.snapshot()) == before
    assert "C4" in store.missing_inputs()
