"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/prefilter.py
Cheap candidate narrowing before full hashing: size grouping, then an xxHash64
of the first chunk. Only paths that still share both with another path reach
the SHA-256 hasher, which stays the sole duplicate criterion.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Tuple

import xxhash

from ddupe.core.models import DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


class CandidateFilter:
    """Drops paths that cannot possibly have a byte-identical twin."""

    def __init__(self, front_chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.front_chunk_size = front_chunk_size
        self.errors: List[Tuple[Path, str]] = []

    def filter(self, paths: Iterable[Path]) -> List[Path]:
        """
        Returns the paths worth hashing in full.
        Files that cannot be stat'd or read are recorded in `errors`.
        """
        self.errors = []
        paths = list(paths)

        by_size = self._group_by(paths, lambda p: p.stat().st_size)
        logger.debug(f"Size stage: {len(paths)} files -> {len(by_size)} size groups")

        survivors: List[Path] = []
        for same_size in by_size.values():
            by_front = self._group_by(same_size, self._front_hash)
            for group in by_front.values():
                survivors.extend(group)

        logger.debug(f"Front hash stage: {len(survivors)} candidate files remain")
        return survivors

    def _front_hash(self, path: Path) -> bytes:
        """Hash of the first N bytes of a file."""
        with open(path, 'rb') as f:
            return xxhash.xxh64(f.read(self.front_chunk_size)).digest()

    def _group_by(self, paths: List[Path], key_func: Callable[[Path], Any]) -> Dict[Any, List[Path]]:
        """
        Groups paths by any computed key and keeps only groups with two or more members.
        """
        groups = defaultdict(list)
        for path in paths:
            try:
                groups[key_func(path)].append(path)
            except OSError as e:
                logger.warning(f"Cannot read {path}: {e}")
                self.errors.append((path, str(e)))

        return {key: group for key, group in groups.items() if len(group) >= 2}
