"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files and a
scripted terminal that replays canned operator input.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List


class ScriptedTerminal:
    """Terminal test double: answers come from a list, output is recorded."""

    def __init__(self, answers: List[str] = None):
        self.answers = list(answers or [])
        self.prompts: List[str] = []
        self.lines: List[str] = []
        self.errors: List[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("No more scripted answers")
        return self.answers.pop(0)

    def show(self, message: str = "", error: bool = False) -> None:
        (self.errors if error else self.lines).append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    @property
    def error_output(self) -> str:
        return "\n".join(self.errors)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def terminal():
    return ScriptedTerminal()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - 3 identical files (1KB of 'A'), one of them in a subdirectory
    - 2 identical files (2KB of 'B')
    - 2 unique files
    - 2 empty files (empty content is still duplicate content)
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty1"] = temp_dir / "empty1.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"] = temp_dir / "empty2.txt"
    files["empty2"].write_bytes(b"")

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
