"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content hashing and the digest -> paths bucket map.

HasherImpl reads files in fixed-size chunks so memory use does not depend on
file size. Digests are never cached: every call re-reads the file.
"""

import hashlib
import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from ddupe.core.interfaces import HashAccumulator, HashAlgorithm
from ddupe.core.models import DEFAULT_CHUNK_SIZE, Digest, HashMapResult

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashAccumulator:
        return hashlib.sha256()


class HasherImpl:
    """
    Computes full-content digests with a pluggable algorithm (SHA-256 by default)
    and groups paths by digest.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_digest(self, path: Path) -> Digest:
        """
        Hash a single file and return the hex-encoded digest.
        Raises OSError if the file cannot be opened or read mid-stream.
        """
        accumulator = self.algorithm.new()
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(self.chunk_size), b''):
                accumulator.update(chunk)
        return accumulator.hexdigest()

    def build_hash_map(
            self,
            paths: Iterable[Path],
            jobs: int = 1,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> HashMapResult:
        """
        Build a mapping digest -> list of paths with that digest.

        Files that fail to hash are left out of every bucket and recorded in
        `errors`; the scan carries on with the rest.

        Args:
            paths: Files to hash (order is irrelevant)
            jobs: Worker threads; 1 hashes sequentially in the calling thread
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
        """
        paths = list(paths)
        if jobs < 1:
            raise ValueError("Number of jobs must be at least 1")

        logger.debug(f"Hashing {len(paths)} files with {jobs} job(s)")
        if jobs == 1 or len(paths) < 2:
            result = self._hash_sequential(paths, progress_callback)
        else:
            result = self._hash_parallel(paths, jobs, progress_callback)

        logger.debug(
            f"Hashing finished: {result.hashed_count} files in {len(result.buckets)} distinct digests, "
            f"{len(result.errors)} errors"
        )
        return result

    def _hash_sequential(
            self,
            paths: List[Path],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]]
    ) -> HashMapResult:
        buckets: Dict[Digest, List[Path]] = defaultdict(list)
        result = HashMapResult()
        total = len(paths)

        for processed, path in enumerate(paths, 1):
            try:
                buckets[self.compute_digest(path)].append(path)
            except OSError as e:
                self._record_error(result, path, e)
            if progress_callback:
                progress_callback('hashing', processed, total)

        result.buckets = dict(buckets)
        return result

    def _hash_parallel(
            self,
            paths: List[Path],
            jobs: int,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]]
    ) -> HashMapResult:
        # Workers only compute digests; buckets are filled by this thread alone.
        buckets: Dict[Digest, List[Path]] = defaultdict(list)
        result = HashMapResult()
        total = len(paths)
        processed = 0

        with ThreadPoolExecutor(max_workers=jobs) as executor:
            future_to_path = {executor.submit(self.compute_digest, path): path for path in paths}
            for future in as_completed(future_to_path):
                path = future_to_path[future]
                try:
                    buckets[future.result()].append(path)
                except OSError as e:
                    self._record_error(result, path, e)
                processed += 1
                if progress_callback:
                    progress_callback('hashing', processed, total)

        result.buckets = dict(buckets)
        return result

    @staticmethod
    def _record_error(result: HashMapResult, path: Path, error: OSError) -> None:
        logger.warning(f"Cannot hash {path}: {error}")
        result.errors.append((path, str(error)))
