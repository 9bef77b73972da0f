"""File removal and report export services."""

from .file_service import FileService
from .report_service import ReportService, ReportWriteError

__all__ = ["FileService", "ReportService", "ReportWriteError"]
