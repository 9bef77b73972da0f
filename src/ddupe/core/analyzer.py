"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/analyzer.py
Turns a digest -> paths mapping into duplicate groups, the removable set and
the number of bytes that deleting it would free.
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Union

from ddupe.core.models import Digest, DuplicateAnalysis, DuplicateGroup, FileEntry

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DuplicateAnalyzer:
    """
    Pure function of its input apart from size lookups on dupes.

    Bucket iteration order is never trusted: members are sorted by path and
    groups are emitted in order of their keep path, so the same file set always
    yields the same analysis.
    """

    @staticmethod
    def analyze(bucket_map: Mapping[Digest, Iterable[PathLike]]) -> DuplicateAnalysis:
        """
        Build a DuplicateAnalysis. Any digest with a single file is ignored.

        A dupe whose size cannot be read (e.g. deleted since hashing) is still
        removable but adds nothing to the savings total.
        """
        analysis = DuplicateAnalysis()
        groups = []

        for digest, members in bucket_map.items():
            files = sorted(Path(p) for p in members)
            if len(files) < 2:
                continue

            groups.append(DuplicateGroup(digest=digest, keep=files[0], dupes=files[1:]))

        groups.sort(key=lambda g: g.keep)

        for group in groups:
            for dupe in group.dupes:
                size = FileEntry(dupe).size
                if size is None:
                    logger.warning(f"Cannot read size of {dupe}; excluded from savings")
                    analysis.size_errors.append(dupe)
                else:
                    analysis.total_saving_bytes += size

            analysis.removable_files.extend(group.dupes)
            analysis.groups.append(group)

        logger.debug(
            f"Analysis: {len(analysis.groups)} groups, {analysis.total_dupes} removable, "
            f"{analysis.total_saving_bytes} bytes"
        )
        return analysis


def analyze_duplicates(bucket_map: Mapping[Digest, Iterable[PathLike]]) -> DuplicateAnalysis:
    """Shortcut for DuplicateAnalyzer.analyze."""
    return DuplicateAnalyzer.analyze(bucket_map)
