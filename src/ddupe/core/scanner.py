"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Collects every regular file under a root path.
Features:
- Uses pathlib.Path for robust, cross-platform path handling
- Recursively scans directories with os.walk
- Skips symbolic links and special files
- A root that is itself a regular file yields just that file
- Returns a flat list of paths (order carries no meaning)
"""

import os
import stat
import logging
from pathlib import Path
from typing import Callable, List, Optional

from ddupe.core.interfaces import FileScanner

logger = logging.getLogger(__name__)


class ScanSetupError(RuntimeError):
    """The scan cannot start (missing root)."""


class FileScannerImpl(FileScanner):
    """
    Scans a directory tree recursively and returns regular files.

    Attributes:
        root_dir: Root path to scan
    """

    # Update progress every N files to reduce output overhead
    PROGRESS_INTERVAL = 5000

    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    def validate_root(self) -> Path:
        """Fails fast before any traversal or hashing happens."""
        root_path = Path(self.root_dir)
        if not root_path.exists():
            raise ScanSetupError(f"'{self.root_dir}' does not exist.")
        return root_path

    def scan(
            self,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[Path]:
        """
        Single-pass scanner. Unreadable subdirectories are skipped, not fatal.
        """
        root_path = self.validate_root()
        logger.debug(f"Scanning: {root_path}")

        if not root_path.is_dir():
            found_files = [root_path] if self._is_regular_file(root_path) else []
            if progress_callback:
                progress_callback('scanning', len(found_files), None)
            return found_files

        found_files: List[Path] = []
        progress_counter = 0

        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            # Prune subdirectories before os.walk enters them
            dirs[:] = [d for d in dirs if self._prefilter_dirs(Path(root) / d)]

            for filename in files:
                path = Path(root) / filename
                if self._is_regular_file(path):
                    found_files.append(path)
                progress_counter += 1

                if progress_callback and progress_counter >= self.PROGRESS_INTERVAL:
                    progress_callback('scanning', len(found_files), None)
                    progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', len(found_files), None)

        logger.debug(f"Scan completed. Found {len(found_files)} files.")
        return found_files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Permission denied during scan: {error}")

    @staticmethod
    def _is_regular_file(path: Path) -> bool:
        """True for plain files; symlinks, sockets, FIFOs and devices are left out."""
        try:
            mode = os.lstat(path).st_mode
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return False
        if stat.S_ISLNK(mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return False
        return stat.S_ISREG(mode)

    @staticmethod
    def _prefilter_dirs(path: Path) -> bool:
        """Skip symlinked and inaccessible directories."""
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symlinked directory: {path}")
                return False
            return path.is_dir() and os.access(path, os.R_OK | os.X_OK)
        except OSError:
            logger.debug(f"Skipping inaccessible directory: {path}")
            return False
