import pytest

from core.enums import ReportType
from engine.evaluator import DependencyEvaluator
from reports import SAMPLE_INPUTS, default_formula_registry, default_validation_registry


@pytest.fixture
def formula_registry():
    return default_formula_registry()


@pytest.fixture
def validation_registry():
    return default_validation_registry()


@pytest.fixture
def evaluator(formula_registry):
    return DependencyEvaluator(formula_registry)


@pytest.fixture
def sample_stores(evaluator):
    return {
        report_type: evaluator.build_store(report_type, SAMPLE_INPUTS[report_type])
        for report_type in ReportType
    }


@pytest.fixture
def sample_snapshots(sample_stores):
    return {report_type: store.snapshot() for report_type, store in sample_stores.items()}
