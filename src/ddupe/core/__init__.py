"""
Core duplicate detection engine: scanner, hasher, analyzer and deletion resolver.

This package contains the content-addressed foundation of ddupe:
- FileScannerImpl: recursive directory traversal producing regular file paths
- HasherImpl + Sha256AlgorithmImpl: chunked SHA-256 hashing and digest buckets
- CandidateFilter: optional size + xxHash front-chunk narrowing before hashing
- DuplicateAnalyzer: deterministic keep/dupe selection and savings accounting
- DeletionResolver: dry-run, batch-confirm and interactive deletion workflows
- Models: DuplicateGroup, DuplicateAnalysis, DeletionResult and parameters
"""

from .models import (
    Digest, FileEntry, DuplicateGroup, DuplicateAnalysis, HashMapResult,
    DeletionStatus, DeletionOutcome, DeletionResult, ResolutionMode, ScanParams)
from .hasher import HasherImpl, Sha256AlgorithmImpl
from .prefilter import CandidateFilter
from .scanner import FileScannerImpl, ScanSetupError
from .analyzer import DuplicateAnalyzer, analyze_duplicates
from .resolver import DeletionResolver, GroupDecision, GroupState

__all__ = [
    "Digest",
    "FileEntry",
    "DuplicateGroup",
    "DuplicateAnalysis",
    "HashMapResult",
    "DeletionStatus",
    "DeletionOutcome",
    "DeletionResult",
    "ResolutionMode",
    "ScanParams",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "CandidateFilter",
    "FileScannerImpl",
    "ScanSetupError",
    "DuplicateAnalyzer",
    "analyze_duplicates",
    "DeletionResolver",
    "GroupDecision",
    "GroupState",
]
