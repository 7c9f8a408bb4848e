import pytest
from pydantic import ValidationError

from core.enums import ReportType, ValidationStatus
from core.exceptions import InvalidValidationRule, UnknownCellError
from engine.validation_registry import ValidationRegistry
from engine.validator import Validator, summarize
from reports.base import ref, rule

BS = ReportType.BALANCE_SHEET
DB = ReportType.DEPOSITS_BORROWINGS
CR = ReportType.COMPLAINT_REPORT


def _equality_rule(tolerance=0.01):
    return rule(
        "T.V1", "Left = Right", ref(BS, "C1"), (DB, "H30"),
        lhs_label="Left", rhs_label="Right", tolerance=tolerance,
    )


@pytest.mark.parametrize("lhs, passed", [
    (100.009, True),
    (100.02, False),
    (99.98, False),
])
def test_tolerance_boundary(lhs, passed):
    validator = Validator(ValidationRegistry([_equality_rule()]))
    [result] = validator.validate({BS: {"C1": lhs}, DB: {"H30": 100.0}})
    assert result.passed is passed
    assert result.status == (ValidationStatus.PASSED if passed else ValidationStatus.FAILED)
    assert bool(result.message) is not passed


def test_failure_message():
    validator = Validator(ValidationRegistry([_equality_rule()]))
    [result] = validator.validate({BS: {"C1": 100.02}, DB: {"H30": 100.0}})
    assert result.message == "Mismatch: Left (100.02) ≠ Right (100.00)"
    assert result.actual == 100.02
    assert result.expected == 100.0
    assert result.difference == pytest.approx(0.02)


def test_negative_tolerance_rejected():
    with pytest.raises(ValidationError):
        _equality_rule(tolerance=-0.01)


def test_missing_store_gives_skipped():
    validator = Validator(ValidationRegistry([_equality_rule()]))
    [result] = validator.validate(lambda report_type: {"C1": 5.0} if report_type == BS else None)
    assert result.status == ValidationStatus.SKIPPED
    assert result.passed is None
    assert result.expected is None and result.actual is None
    assert result.missing_reports == [DB]
    assert result.message == ""


def test_unknown_cell_in_snapshot_is_structural():
    validator = Validator(ValidationRegistry([_equality_rule()]))
    with pytest.raises(UnknownCellError):
        validator.validate({BS: {"C1": 1.0}, DB: {}})


def test_duplicate_rule_id_rejected():
    with pytest.raises(InvalidValidationRule):
        ValidationRegistry([_equality_rule(), _equality_rule()])


def test_rule_referencing_undeclared_cell_rejected(formula_registry):
    bad = rule("T.V9", "Bad", ref(BS, "C999"), (BS, "C1"))
    with pytest.raises(UnknownCellError):
        ValidationRegistry([bad], formula_registry=formula_registry)


def test_rules_for_uses_left_hand_report(validation_registry):
    ids = [r.id for r in validation_registry.rules_for(DB)]
    assert ids == ["MSP2_07.V1", "MSP2_07.V2", "MSP2_07.V3"]
    assert all(r.lhs.report_type == BS for r in validation_registry.rules_for(BS))


def test_results_follow_registration_order(validation_registry, sample_snapshots):
    results = Validator(validation_registry).validate(sample_snapshots)
    assert [r.rule_id for r in results] == [r.id for r in validation_registry.all_rules()]


def test_all_sample_rules_pass(validation_registry, sample_snapshots):
    results = Validator(validation_registry).validate(sample_snapshots)
    failures = [r.message for r in results if not r.passed]
    assert failures == []
    assert summarize(results).total == 29


def test_complaint_row_two(validation_registry, sample_snapshots):
    [row2] = Validator(validation_registry).validate(
        sample_snapshots, [validation_registry.get("MSP2_06.V2")]
    )
    assert row2.rule_id == "MSP2_06.V2"
    assert row2.expected == 28
    assert row2.actual == 28
    assert row2.passed is True


def test_borrowings_rule_flips_when_balance_sheet_changes(validation_registry, sample_stores):
    validator = Validator(validation_registry)

    def lookup(report_type):
        store = sample_stores.get(report_type)
        return store.snapshot() if store else None

    [result] = validator.validate_report(DB, lookup)[:1]
    assert result.rule_id == "MSP2_07.V1"
    assert result.passed is True

    sample_stores[BS].set_input("C37", 90_000_000)
    [result] = validator.validate_report(DB, lookup)[:1]
    assert result.passed is False
    assert result.message == (
        "Mismatch: Total Borrowings TZ (100,000,000.00) ≠ MSP2_01.C37 (90,000,000.00)"
    )

    sample_stores[BS].set_input("C37", 100_000_000)
    sample_stores[DB].set_input("F8", 70_000_000)
    [result] = validator.validate_report(DB, lookup)[:1]
    assert result.passed is False
    assert result.actual == 110_000_000


def test_cross_sheet_rules_skipped_without_balance_sheet(validation_registry, sample_snapshots):
    del sample_snapshots[BS]
    results = Validator(validation_registry).validate(sample_snapshots)
    by_id = {r.rule_id: r for r in results}
    assert by_id["MSP2_07.V1"].status == ValidationStatus.SKIPPED
    assert by_id["MSP2_10.V1"].missing_reports == [BS]
    assert by_id["MSP2_06.V2"].status == ValidationStatus.PASSED
    assert by_id["MSP2_10.V2"].status == ValidationStatus.PASSED


def test_rhs_description_defaults_to_qualified_cells():
    generated = rule("T.V2", "Sum", ref(DB, "E57"), (BS, "C3+C6-C7"))
    assert generated.rhs_description == "MSP2_01.C3 + MSP2_01.C6 - MSP2_01.C7"
    assert generated.lhs_description == "MSP2_07.E57"
    assert generated.report_types == [DB, BS]


def test_count_rules_print_whole_numbers(validation_registry, sample_snapshots):
    snapshots = dict(sample_snapshots)
    complaints = dict(snapshots[CR])
    complaints["C1"] = 16
    snapshots[CR] = complaints
    [row1, *_] = Validator(validation_registry).validate_report(CR, snapshots)
    assert row1.message == "Mismatch: Row 1 Number (16) ≠ sum of natures (15)"


def test_overflowing_rhs_fails_without_raising():
    rules = [
        rule("T.V1", "Huge", ref(DB, "H30"), (BS, "C1+C2")),
        _equality_rule(),
    ]
    validator = Validator(ValidationRegistry(rules))
    huge, normal = validator.validate({
        BS: {"C1": 1e308, "C2": 1e308},
        DB: {"H30": 1e308},
    })
    assert huge.status == ValidationStatus.FAILED
    assert huge.passed is False
    assert huge.expected is None and huge.actual is None
    assert huge.message.startswith("Overflow:")
    assert normal.status == ValidationStatus.PASSED


def test_borrower_counts_checked_both_ways(validation_registry, sample_stores):
    sample_stores[ReportType.INTEREST_RATES].set_input("C1", 600)
    snapshots = {rt: store.snapshot() for rt, store in sample_stores.items()}
    by_id = {r.rule_id: r for r in Validator(validation_registry).validate(snapshots)}

    assert by_id["MSP2_03.V1"].status == ValidationStatus.FAILED
    assert by_id["MSP2_03.V1"].message == "Mismatch: C67 (4,200) ≠ MSP2_04.C15 (4,300)"
    assert by_id["MSP2_04.V2"].actual == 4_300
    assert by_id["MSP2_04.V2"].passed is False
    assert by_id["MSP2_04.V1"].passed is True


def test_liquid_assets_and_agent_balances_tie_to_balance_sheet(
    validation_registry, sample_stores
):
    sample_stores[BS].set_input("C5", 6_000_000)
    snapshots = {rt: store.snapshot() for rt, store in sample_stores.items()}
    by_id = {r.rule_id: r for r in Validator(validation_registry).validate(snapshots)}

    assert by_id["MSP2_05.V4"].status == ValidationStatus.FAILED
    assert by_id["MSP2_08.V1"].status == ValidationStatus.FAILED
    assert by_id["MSP2_08.V1"].expected == 6_000_000
    # C3 = C4 + C5 on the balance sheet, so the bank balances line moves too
    assert by_id["MSP2_05.V2"].status == ValidationStatus.FAILED
    assert by_id["MSP2_05.V1"].status == ValidationStatus.PASSED
