"""
Unified command orchestrator for duplicate detection.
Single source of truth for the scan pipeline; the CLI only adds I/O around it.
"""
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ddupe.core.analyzer import DuplicateAnalyzer
from ddupe.core.hasher import HasherImpl
from ddupe.core.models import DuplicateAnalysis, ScanParams
from ddupe.core.prefilter import CandidateFilter
from ddupe.core.scanner import FileScannerImpl

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the detection workflow:
    1. Collect regular files under the root directory
    2. Optionally narrow candidates by size and front-chunk hash
    3. Hash candidates into digest buckets
    4. Analyze buckets into groups and savings

    Usage:
        params = ScanParams(root_dir="/data")
        command = DeduplicationCommand()
        analysis = command.execute(params, progress_callback=cli_progress_printer)
        unreadable = command.get_errors()
    """

    def __init__(self):
        self._files: List[Path] = []
        self._errors: List[Tuple[Path, str]] = []

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> DuplicateAnalysis:
        """
        Run the pipeline with the given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            DuplicateAnalysis (empty when the tree holds no files)

        Raises:
            ScanSetupError: If the root path does not exist
        """
        self._errors = []

        # Step 1: Scan files
        scanner = FileScannerImpl(root_dir=params.root_dir)
        self._files = scanner.scan(progress_callback=progress_callback)

        if not self._files:
            logger.debug("No files found")
            return DuplicateAnalysis()

        # Step 2: Optional quick pre-filter
        candidates = self._files
        if params.quick:
            candidate_filter = CandidateFilter(front_chunk_size=params.chunk_size)
            candidates = candidate_filter.filter(self._files)
            self._errors.extend(candidate_filter.errors)

        # Step 3: Hash
        hasher = HasherImpl(chunk_size=params.chunk_size)
        hash_map = hasher.build_hash_map(
            candidates,
            jobs=params.jobs,
            progress_callback=progress_callback
        )
        self._errors.extend(hash_map.errors)

        # Step 4: Analyze
        return DuplicateAnalyzer.analyze(hash_map.buckets)

    def get_files(self) -> List[Path]:
        """Get scanned files after execution."""
        return self._files.copy()

    def get_errors(self) -> List[Tuple[Path, str]]:
        """Files that could not be read, with the reason."""
        return self._errors.copy()
