"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` so that
hashing, traversal and terminal I/O can be swapped out (e.g. by test doubles).

Key Components:
---------------
- HashAccumulator / HashAlgorithm: streaming hash functions (SHA-256, xxHash).
- FileScanner: Interface for scanning directories and returning file paths.
- Terminal: Line-based "ask a question, read one line" console abstraction.
"""

from pathlib import Path
from typing import Protocol, List, Optional, Callable


# ===== Interfaces =====

class HashAccumulator(Protocol):
    """Running hash state, fed one chunk at a time."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the rest of the duplicate detection logic.
    """

    @staticmethod
    def new() -> HashAccumulator:
        """Returns a fresh accumulator."""
        ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting regular file paths.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[Path]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Flat list of regular files; order carries no meaning.
        """
        ...


class Terminal(Protocol):
    """
    Synchronous console used by the confirmation and interactive workflows.
    """
    def ask(self, prompt: str) -> str:
        """
        Shows the prompt and blocks until one line is read.
        Returns the line without its trailing newline; raises EOFError at end of input.
        """
        ...

    def show(self, message: str = "", error: bool = False) -> None:
        """Displays one line (to the error stream when error=True)."""
        ...
