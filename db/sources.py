"""Report data sources"""

from __future__ import annotations

import copy
from datetime import date
from typing import Any, Dict, Mapping, Optional

import structlog

from config import settings
from core.enums import ReportType
from core.exceptions import DataSourceError
from core.interfaces import ReportDataSource
from db.cache import ReportCache
from db.connection import DatabaseManager

logger = structlog.get_logger(__name__)


class SampleDataSource(ReportDataSource):
    """Serve seeded inputs, e.g. for demos and tests"""

    def __init__(self, data: Optional[Mapping[ReportType, Dict[str, Any]]] = None):
        if data is None:
            from reports.samples import SAMPLE_INPUTS
            data = SAMPLE_INPUTS
        self._data = data

    @property
    def name(self) -> str:
        return "sample"

    async def fetch(self, report_type: ReportType) -> Dict[str, Any]:
        if report_type not in self._data:
            raise DataSourceError(
                f"No sample data for report '{report_type.value}'", report_type
            )
        return copy.deepcopy(dict(self._data[report_type]))


class DatabaseReportSource(ReportDataSource):
    """Read report inputs from the ``report_cells`` table.

    One row per cell and period; ``period`` is NULL for single-period
    reports.
    """

    QUERY = """
        SELECT cell_id, period, value
        FROM report_cells
        WHERE report_type = $1 AND quarter_end = $2
        ORDER BY cell_id, period
    """

    def __init__(self, db: DatabaseManager, quarter_end: Optional[date] = None):
        self.db = db
        self.quarter_end = quarter_end or _default_quarter_end()

    @property
    def name(self) -> str:
        return "database"

    async def fetch(self, report_type: ReportType) -> Dict[str, Any]:
        try:
            rows = await self.db.execute(self.QUERY, report_type.value, self.quarter_end)
        except DataSourceError as e:
            raise DataSourceError(
                f"Failed to fetch '{report_type.value}': {e}", report_type
            ) from e

        data: Dict[str, Any] = {}
        for row in rows:
            value = None if row["value"] is None else float(row["value"])
            if row["period"]:
                data.setdefault(row["cell_id"], {})[row["period"]] = value
            else:
                data[row["cell_id"]] = value
        logger.info(
            "report_fetched",
            report_type=report_type.value,
            quarter_end=self.quarter_end.isoformat(),
            rows=len(rows),
        )
        return data


class CachedReportSource(ReportDataSource):
    """Wrap a source with a ``ReportCache``"""

    def __init__(self, source: ReportDataSource, cache: Optional[ReportCache] = None):
        self.source = source
        self.cache = cache or ReportCache(settings.REPORT_CACHE_TTL_SECONDS)

    @property
    def name(self) -> str:
        return f"cached:{self.source.name}"

    async def fetch(
        self, report_type: ReportType, force_refresh: bool = False
    ) -> Dict[str, Any]:
        if not force_refresh:
            cached = self.cache.get(report_type)
            if cached is not None:
                logger.debug("cache_hit", report_type=report_type.value)
                return cached
        data = await self.source.fetch(report_type)
        self.cache.put(report_type, data)
        return data

    def clear_cache(self, report_type: Optional[ReportType] = None) -> None:
        self.cache.clear(report_type)


def create_source(source: Optional[str] = None) -> CachedReportSource:
    """Build the configured source, wrapped in a cache"""
    kind = source or settings.REPORT_SOURCE
    if kind == "sample":
        inner: ReportDataSource = SampleDataSource()
    elif kind == "database":
        quarter_end = (
            date.fromisoformat(settings.QUARTER_END_DATE)
            if settings.QUARTER_END_DATE else None
        )
        inner = DatabaseReportSource(DatabaseManager(), quarter_end)
    else:
        raise ValueError(f"Unknown report source '{kind}'")
    return CachedReportSource(inner, ReportCache(settings.REPORT_CACHE_TTL_SECONDS))


def _default_quarter_end(today: Optional[date] = None) -> date:
    """Last day of the most recently completed quarter."""
    today = today or date.today()
    quarter_start_month = 3 * ((today.month - 1) // 3) + 1
    first_of_quarter = date(today.year, quarter_start_month, 1)
    return date.fromordinal(first_of_quarter.toordinal() - 1)
