"""Data access layer"""

from .cache import ReportCache
from .connection import DatabaseManager
from .sources import (
    CachedReportSource,
    DatabaseReportSource,
    SampleDataSource,
    create_source,
)

__all__ = [
    "ReportCache",
    "DatabaseManager",
    "CachedReportSource",
    "DatabaseReportSource",
    "SampleDataSource",
    "create_source",
]
