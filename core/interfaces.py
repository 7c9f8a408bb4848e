"""Abstract base classes for Hesabu components"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .enums import ReportType


class ReportDataSource(ABC):
    """Abstract source of raw report inputs"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source name"""
        pass

    @abstractmethod
    async def fetch(self, report_type: ReportType) -> Dict[str, Any]:
        """Fetch raw inputs for a report.

        Returns a mapping of cell id to value. Dual-period reports may map a
        cell id to ``{"quarterly": x, "ytd": y}`` instead.
        """
        pass
