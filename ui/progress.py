"""Progress tracking"""

from abc import ABC, abstractmethod

from core.enums import ReportType


class ProgressTracker(ABC):
    """Abstract progress tracker"""

    @abstractmethod
    def start_report(self, report_type: ReportType):
        """Start loading a report"""
        pass

    @abstractmethod
    def complete_report(self, report_type: ReportType):
        """Report loaded and evaluated"""
        pass

    @abstractmethod
    def fail(self, report_type: ReportType, message: str):
        """Mark report as unavailable"""
        pass

    @abstractmethod
    def complete(self):
        """Mark run as complete"""
        pass


class NullProgress(ProgressTracker):
    """Progress tracker that reports nothing"""

    def start_report(self, report_type: ReportType):
        pass

    def complete_report(self, report_type: ReportType):
        pass

    def fail(self, report_type: ReportType, message: str):
        pass

    def complete(self):
        pass


class ConsoleProgress(ProgressTracker):
    """Console-based progress tracker"""

    def __init__(self):
        self.completed = set()
        self.failed = set()
        self.current = None

    def start_report(self, report_type: ReportType):
        """Start loading a report"""
        self.current = report_type
        print(f"[◉] {report_type.form_code} {report_type.value}...")

    def complete_report(self, report_type: ReportType):
        """Report loaded and evaluated"""
        self.completed.add(report_type)
        self.current = None
        print(f"[✓] {report_type.form_code} {report_type.value} evaluated")

    def fail(self, report_type: ReportType, message: str):
        """Mark report as unavailable"""
        self.failed.add(report_type)
        self.current = None
        print(f"[✗] {report_type.form_code} {report_type.value} unavailable - {message}")

    def complete(self):
        """Mark run as complete"""
        print(f"\n[✓] {len(self.completed)} reports loaded, {len(self.failed)} unavailable")
