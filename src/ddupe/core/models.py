"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for content-hash duplicate detection and resolution.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ddupe.utils.convert_utils import ConvertUtils

# Hex-encoded SHA-256 of file content (64 characters)
Digest = str

DEFAULT_CHUNK_SIZE = 8192


# =============================
# Enums
# =============================

class ResolutionMode(Enum):
    """
    How a finished analysis is turned into (or kept away from) deletions.
    """
    REPORT = "report"
    DRY_RUN = "dry-run"
    BATCH = "batch"
    INTERACTIVE = "interactive"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            ResolutionMode.REPORT: "Report only",
            ResolutionMode.DRY_RUN: "Dry run",
            ResolutionMode.BATCH: "Batch confirm",
            ResolutionMode.INTERACTIVE: "Interactive",
        }
        return mapping.get(self, self.value)

    @property
    def deletes(self) -> bool:
        """True for the modes allowed to touch the filesystem."""
        return self in (ResolutionMode.BATCH, ResolutionMode.INTERACTIVE)


class DeletionStatus(str, Enum):
    DELETED = "DELETED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


# ======================
#  Core Data Models
# ======================

@dataclass
class FileEntry:
    """
    A path with its size queried on first access.
    Size stays None when the file cannot be stat'd.
    """
    path: Path
    _size: Optional[int] = field(default=None, init=False, repr=False)
    _size_loaded: bool = field(default=False, init=False, repr=False)

    @property
    def size(self) -> Optional[int]:
        if not self._size_loaded:
            try:
                self._size = os.stat(self.path).st_size
            except OSError:
                self._size = None
            self._size_loaded = True
        return self._size

    def __repr__(self):
        return f"<FileEntry path={self.path}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing one digest: the one we keep and the ones we may remove.
    """
    digest: Digest
    keep: Path
    dupes: List[Path]

    @property
    def candidates(self) -> List[Path]:
        """Keep first, then dupes; the order shown in interactive prompts."""
        return [self.keep] + list(self.dupes)

    @property
    def file_count(self) -> int:
        return 1 + len(self.dupes)

    def __repr__(self):
        return f"<DuplicateGroup keep={self.keep}, dupes={len(self.dupes)}>"


@dataclass
class DuplicateAnalysis:
    """
    Full result of one scan. Built once, then handed to a single workflow.
    """
    groups: List[DuplicateGroup] = field(default_factory=list)
    removable_files: List[Path] = field(default_factory=list)
    total_saving_bytes: int = 0
    size_errors: List[Path] = field(default_factory=list)

    @property
    def total_dupes(self) -> int:
        """Total number of duplicate files (i.e. potential deletions)."""
        return len(self.removable_files)

    def is_empty(self) -> bool:
        return not self.groups


@dataclass
class HashMapResult:
    """Digest buckets for a path list plus the files that could not be hashed."""
    buckets: Dict[Digest, List[Path]] = field(default_factory=dict)
    errors: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def hashed_count(self) -> int:
        return sum(len(paths) for paths in self.buckets.values())


@dataclass
class DeletionOutcome:
    path: Path
    status: DeletionStatus
    size_bytes: int = 0
    error: Optional[str] = None


@dataclass
class DeletionResult:
    """
    Outcome of every deletion attempt in one run.
    Counts and bytes cover successful deletions only.
    """
    outcomes: List[DeletionOutcome] = field(default_factory=list)

    def add(self, outcome: DeletionOutcome) -> None:
        self.outcomes.append(outcome)

    def extend(self, other: "DeletionResult") -> None:
        self.outcomes.extend(other.outcomes)

    def _with_status(self, status: DeletionStatus) -> List[DeletionOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def deleted_count(self) -> int:
        return len(self._with_status(DeletionStatus.DELETED))

    @property
    def deleted_bytes(self) -> int:
        return sum(o.size_bytes for o in self._with_status(DeletionStatus.DELETED))

    @property
    def skipped_count(self) -> int:
        return len(self._with_status(DeletionStatus.SKIPPED))

    @property
    def failed_count(self) -> int:
        return len(self._with_status(DeletionStatus.FAILED))


# =============================
# Parameters
# =============================

@dataclass
class ScanParams:
    """Parameters for one scan with built-in validation."""
    root_dir: str
    chunk_size: int = DEFAULT_CHUNK_SIZE
    jobs: int = 1
    quick: bool = False
    use_trash: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if self.jobs < 1:
            raise ValueError("Number of jobs must be at least 1")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            chunk_size_str: str = str(DEFAULT_CHUNK_SIZE),
            jobs: int = 1,
            quick: bool = False,
            use_trash: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs
        such as the CLI's '--chunk-size 64K'.
        """
        return ScanParams(
            root_dir=root_dir,
            chunk_size=ConvertUtils.human_to_bytes(chunk_size_str),
            jobs=jobs,
            quick=quick,
            use_trash=use_trash,
        )
