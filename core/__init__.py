"""Core abstractions for Hesabu"""

from .models import *
from .enums import *
from .exceptions import *
from .interfaces import *

__all__ = [
    # Models
    "Cell",
    "CellDefinition",
    "CellRef",
    "Formula",
    "FormulaTerm",
    "RuleTerm",
    "ValidationRule",
    "ValidationResult",
    "ValidationSummary",
    "DEFAULT_TOLERANCE",
    # Enums
    "ReportType",
    "CellKind",
    "Period",
    "ValidationStatus",
    "ValueUnit",
    # Exceptions
    "ReportingError",
    "UnknownReportError",
    "UnknownCellError",
    "InvalidCellError",
    "InvalidValueError",
    "InvalidFormulaSet",
    "UnresolvedReferenceError",
    "CyclicFormulaError",
    "InvalidValidationRule",
    "DataSourceError",
    # Interfaces
    "ReportDataSource",
]
