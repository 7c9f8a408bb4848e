import math

import pytest

from core.enums import CellKind, ReportType
from core.exceptions import InvalidCellError, InvalidValueError, UnknownCellError

BS = ReportType.BALANCE_SHEET
IS = ReportType.INCOME_STATEMENT


def test_set_input_recomputes_derived_cells(evaluator):
    store = evaluator.build_store(BS)
    store.set_input("C4", 25_000_000)
    assert store.get("C3") == 25_000_000
    store.set_input("C5", 5_000_000)
    assert store.get("C3") == 30_000_000
    assert store.get("C1") == 30_000_000
    assert store.get("C33") == 30_000_000


def test_setting_derived_cell_is_rejected(evaluator):
    store = evaluator.build_store(BS)
    with pytest.raises(InvalidCellError):
        store.set_input("C3", 1)


def test_unknown_cell(evaluator):
    store = evaluator.build_store(BS)
    with pytest.raises(UnknownCellError):
        store.set_input("C999", 1)
    with pytest.raises(UnknownCellError):
        store.get("C999")


@pytest.mark.parametrize("value", [math.nan, math.inf, "abc", None, True])
def test_non_finite_values_rejected(evaluator, value):
    store = evaluator.build_store(BS)
    with pytest.raises(InvalidValueError):
        store.set_input("C2", value)
    assert store.get("C2") == 0.0


def test_snapshot_is_read_only_copy(evaluator):
    store = evaluator.build_store(BS, {"C2": 10})
    snapshot = store.snapshot()
    with pytest.raises(TypeError):
        snapshot["C2"] = 5
    store.set_input("C2", 20)
    assert snapshot["C2"] == 10
    assert store.snapshot()["C2"] == 20


def test_snapshot_follows_form_order(evaluator):
    keys = list(evaluator.build_store(BS).snapshot())
    assert keys[:3] == ["C1", "C2", "C3"]
    assert keys[-1] == "C61"


def test_bulk_load_accepts_period_mapping(evaluator):
    store = evaluator.build_store(IS, {"C2": {"quarterly": 10, "ytd": 40}})
    assert store.get("C1.quarterly") == 10
    assert store.get("C1.ytd") == 40
    assert store.get("C42.ytd") == 40


def test_bulk_load_is_all_or_nothing(evaluator):
    store = evaluator.build_store(BS, {"C2": 1})
    with pytest.raises(InvalidCellError):
        store.set_inputs({"C4": 5, "C1": 7})
    assert store.get("C4") == 0.0
    assert store.get("C1") == 1.0


def test_cells_carry_kind_and_label(evaluator):
    store = evaluator.build_store(BS, {"C2": 1_500_000})
    cell = store.cell("C1")
    assert cell.kind == CellKind.DERIVED
    assert cell.label == "1. CASH AND CASH EQUIVALENTS"
    assert cell.value == 1_500_000
    assert store.cell("C2").kind == CellKind.INPUT
    assert len(store.cells()) == 61


def test_missing_inputs(evaluator):
    store = evaluator.build_store(ReportType.LOAN_PORTFOLIO, {"E1": 1})
    assert "E1" not in store.missing_inputs()
    assert "F1" in store.missing_inputs()
    assert "D1" not in store.missing_inputs()
    assert "E67" not in store.missing_inputs()
