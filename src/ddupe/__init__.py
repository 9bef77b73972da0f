"""
ddupe: duplicate file cleaner based on content hashes.

Core features:
- Streaming SHA-256 hashing with optional thread pool and quick pre-filter
- Deterministic keep selection (lexicographically smallest path per group)
- Batch-confirm, per-group interactive, dry-run and JSON report workflows
- Permanent deletion or move to system trash (via send2trash)
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("ddupe")
except PackageNotFoundError:
    __version__ = "unknown"

# Public API: only what users should import directly
from ddupe.commands import DeduplicationCommand
from ddupe.core import (
    ScanParams, ResolutionMode, DuplicateGroup, DuplicateAnalysis, DeletionResult,
    HasherImpl, DuplicateAnalyzer, analyze_duplicates, DeletionResolver, FileScannerImpl)
from ddupe.utils.convert_utils import ConvertUtils
from ddupe.services import FileService, ReportService

__all__ = [
    "DeduplicationCommand",
    "ScanParams",
    "ResolutionMode",
    "DuplicateGroup",
    "DuplicateAnalysis",
    "DeletionResult",
    "HasherImpl",
    "DuplicateAnalyzer",
    "analyze_duplicates",
    "DeletionResolver",
    "FileScannerImpl",
    "ConvertUtils",
    "FileService",
    "ReportService",
    "__version__",
]
