"""Custom exceptions for Hesabu"""

from typing import Iterable, Optional


class ReportingError(Exception):
    """Base exception for all Hesabu errors"""
    pass


class UnknownReportError(ReportingError):
    """Report type has no registered formula set"""
    def __init__(self, report_type):
        super().__init__(f"No formula set registered for report '{_name(report_type)}'")
        self.report_type = report_type


class UnknownCellError(ReportingError, KeyError):
    """Cell is not declared in the report layout"""
    def __init__(self, report_type, cell_id: str):
        super().__init__(f"Unknown cell {cell_id} in report '{_name(report_type)}'")
        self.report_type = report_type
        self.cell_id = cell_id

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]


class InvalidCellError(ReportingError):
    """Attempt to write a derived cell"""
    def __init__(self, report_type, cell_id: str):
        super().__init__(
            f"Cell {cell_id} in report '{_name(report_type)}' is derived and cannot be set"
        )
        self.report_type = report_type
        self.cell_id = cell_id


class InvalidValueError(ReportingError, ValueError):
    """Input value is not a finite real number"""
    def __init__(self, message: str, cell_id: Optional[str] = None):
        super().__init__(message)
        self.cell_id = cell_id


class InvalidFormulaSet(ReportingError):
    """Formula definitions of a report are inconsistent"""
    def __init__(self, report_type, message: str, cells: Iterable[str] = ()):
        super().__init__(f"Invalid formula set for '{_name(report_type)}': {message}")
        self.report_type = report_type
        self.cells = list(cells)


class UnresolvedReferenceError(InvalidFormulaSet):
    """Formula term references a cell that does not exist"""
    pass


class CyclicFormulaError(ReportingError):
    """Formula dependencies of a report contain a cycle"""
    def __init__(self, report_type, cycle_members: Iterable[str]):
        self.report_type = report_type
        self.cycle_members = sorted(cycle_members)
        super().__init__(
            f"Cyclic formulas in '{_name(report_type)}': {', '.join(self.cycle_members)}"
        )


class InvalidValidationRule(ReportingError):
    """Validation rule definition error"""
    def __init__(self, message: str, rule_id: Optional[str] = None):
        super().__init__(message)
        self.rule_id = rule_id


class DataSourceError(ReportingError):
    """Fetching raw report data failed"""
    def __init__(self, message: str, report_type=None):
        super().__init__(message)
        self.report_type = report_type


def _name(report_type) -> str:
    return getattr(report_type, "value", report_type)
