"""Time-bounded cache of fetched report data."""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import structlog

from core.enums import ReportType

logger = structlog.get_logger(__name__)


@dataclass
class CacheEntry:
    data: Dict[str, Any]
    stored_at: float


class ReportCache:
    """Per-report cache with a fixed time-to-live.

    Entries are checked for expiry when read. ``clock`` is injectable so
    expiry can be tested without sleeping.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[ReportType, CacheEntry] = {}

    def get(self, report_type: ReportType) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(report_type)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl_seconds:
            del self._entries[report_type]
            logger.debug("cache_expired", report_type=report_type.value)
            return None
        return copy.deepcopy(entry.data)

    def put(self, report_type: ReportType, data: Dict[str, Any]) -> None:
        self._entries[report_type] = CacheEntry(copy.deepcopy(data), self._clock())

    def clear(self, report_type: Optional[ReportType] = None) -> None:
        """Drop one report, or everything when ``report_type`` is None."""
        if report_type is None:
            self._entries.clear()
        else:
            self._entries.pop(report_type, None)
        logger.info(
            "cache_cleared",
            report_type=report_type.value if report_type else "all",
        )

    def __contains__(self, report_type: ReportType) -> bool:
        return self.get(report_type) is not None
