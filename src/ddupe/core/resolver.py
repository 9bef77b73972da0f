"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Deletion decision workflows over one DuplicateAnalysis:
- dry run: list groups and savings, never delete
- batch: one yes/no question for the whole scan
- interactive: one blocking choice per group
Every deletion goes through delete_path(), which never raises for a single file.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ddupe.core.decisions import (
    Accept,
    Invalid,
    KeepAll,
    KeepIndex,
    parse_confirmation,
    parse_selection,
)
from ddupe.core.interfaces import Terminal
from ddupe.core.models import (
    DeletionOutcome,
    DeletionResult,
    DeletionStatus,
    DuplicateAnalysis,
    DuplicateGroup,
    ResolutionMode,
)
from ddupe.services.file_service import FileService
from ddupe.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Delete the [DUPE] files and keep the [KEEP] ones? [y/N]:"


class GroupState(Enum):
    PRESENTING = "presenting"
    AWAITING_CHOICE = "awaiting-choice"
    RESOLVED = "resolved"
    KEPT_ALL = "kept-all"


@dataclass
class GroupDecision:
    """Terminal state of one interactive group; keep_index is 1-based."""
    state: GroupState
    keep_index: Optional[int] = None


class DeletionResolver:
    """
    Drives one resolution workflow. The terminal is injected so that tests can
    replay canned answers instead of reading a real console.
    """

    def __init__(self, terminal: Terminal, file_service: Optional[FileService] = None):
        self.terminal = terminal
        self.file_service = file_service or FileService()

    # ---------------------------------------------------------------
    # Presentation
    # ---------------------------------------------------------------

    def show_analysis(self, analysis: DuplicateAnalysis) -> None:
        """Prints every group with [KEEP]/[DUPE] markers and the savings summary."""
        if analysis.is_empty():
            self.terminal.show("No duplicates found.")
            return

        for number, group in enumerate(analysis.groups, 1):
            self.terminal.show()
            self.terminal.show(f"--- Duplicate Group {number}")
            self.terminal.show(f"[KEEP] {group.keep}")
            for dupe in group.dupes:
                self.terminal.show(f"[DUPE] {dupe}")

        self.terminal.show()
        self.terminal.show(
            f"Summary: {analysis.total_dupes} duplicate file(s) can be removed, "
            f"freeing approximately {ConvertUtils.bytes_to_human(analysis.total_saving_bytes)}."
        )

    def show_result(self, result: DeletionResult) -> None:
        """Aggregate line; reflects successful deletions only."""
        self.terminal.show()
        self.terminal.show(
            f"Done: Deleted {result.deleted_count} file(s), "
            f"freeing approximately {ConvertUtils.bytes_to_human(result.deleted_bytes)}."
        )
        if result.skipped_count or result.failed_count:
            self.terminal.show(
                f"{result.skipped_count} file(s) skipped, {result.failed_count} file(s) failed.",
                error=True,
            )

    # ---------------------------------------------------------------
    # Workflows
    # ---------------------------------------------------------------

    def resolve(self, mode: ResolutionMode, analysis: DuplicateAnalysis) -> DeletionResult:
        """Dispatches to the workflow for the given mode."""
        if not mode.deletes:
            return self.dry_run(analysis)
        if mode == ResolutionMode.BATCH:
            return self.resolve_batch(analysis)
        return self.resolve_interactive(analysis)

    def dry_run(self, analysis: DuplicateAnalysis) -> DeletionResult:
        """Never touches the filesystem."""
        if analysis.removable_files:
            self.terminal.show()
            self.terminal.show(
                "Dry run: no files were deleted. Use without --dry-run to delete duplicates."
            )
        return DeletionResult()

    def resolve_batch(self, analysis: DuplicateAnalysis) -> DeletionResult:
        """One decision for the whole scan: delete every removable file, or nothing."""
        if not analysis.removable_files:
            return DeletionResult()

        try:
            answer = self.terminal.ask(CONFIRM_PROMPT)
        except EOFError:
            answer = ""

        if not isinstance(parse_confirmation(answer), Accept):
            logger.debug("Batch deletion declined")
            self.terminal.show("Aborted. No files were deleted.")
            return DeletionResult()

        self.terminal.show("Deleting duplicate files...")
        return self.delete_files(analysis.removable_files)

    def resolve_interactive(self, analysis: DuplicateAnalysis) -> DeletionResult:
        """
        Asks, group by group and in analysis order, which candidate survives.
        Each group is resolved exactly once before the next one is shown.
        """
        result = DeletionResult()
        if analysis.is_empty():
            return result

        self.terminal.show("Interactive mode: decide for each duplicate individually.")

        for number, group in enumerate(analysis.groups, 1):
            decision = self.choose_survivor(number, group)
            if decision.state == GroupState.KEPT_ALL:
                self.terminal.show("[KEEPING ALL] Chose to keep every file in this group.")
                continue

            candidates = group.candidates
            survivor = candidates[decision.keep_index - 1]
            self.terminal.show(f"[KEEPING] {survivor}")

            doomed = [p for i, p in enumerate(candidates, 1) if i != decision.keep_index]
            result.extend(self.delete_files(doomed))

        return result

    def choose_survivor(self, number: int, group: DuplicateGroup) -> GroupDecision:
        """
        Per-group state machine:
        PRESENTING -> AWAITING_CHOICE -> RESOLVED(n) | KEPT_ALL.
        Invalid input stays in AWAITING_CHOICE; end of input keeps all copies.
        """
        candidates = group.candidates
        state = GroupState.PRESENTING

        while True:
            if state == GroupState.PRESENTING:
                self._present_group(number, candidates)
                state = GroupState.AWAITING_CHOICE
                continue

            try:
                line = self.terminal.ask(
                    "Enter a number to keep that file or 'a' to keep all copies.\n"
                    f"Which file should be kept? Enter 1-{group.file_count} (default 1):"
                )
            except EOFError:
                logger.warning(f"No input for duplicate group {number}; keeping all copies")
                return GroupDecision(GroupState.KEPT_ALL)

            selection = parse_selection(line, group.file_count)
            if isinstance(selection, KeepIndex):
                return GroupDecision(GroupState.RESOLVED, selection.index)
            if isinstance(selection, KeepAll):
                return GroupDecision(GroupState.KEPT_ALL)
            if isinstance(selection, Invalid):
                self.terminal.show(
                    f"Please enter a number between 1 and {group.file_count}.", error=True
                )

    def _present_group(self, number: int, candidates: List[Path]) -> None:
        self.terminal.show()
        self.terminal.show(f"--- Duplicate Group {number}")
        for i, path in enumerate(candidates, 1):
            default_hint = " (default)" if i == 1 else ""
            self.terminal.show(f"  [{i}] {path}{default_hint}")
        self.terminal.show("  [A] Keep all copies (skip deletion)")

    # ---------------------------------------------------------------
    # Per-file deletion
    # ---------------------------------------------------------------

    def delete_files(self, paths: List[Path]) -> DeletionResult:
        """Attempts every path; one failure never stops the rest."""
        result = DeletionResult()
        for path in paths:
            result.add(self.delete_path(path))
        return result

    def delete_path(self, path: Path) -> DeletionOutcome:
        """
        Deletes a single file and classifies the outcome:
        SKIPPED when it is already gone, FAILED when removal raises,
        DELETED (with the size seen just before removal) otherwise.
        """
        try:
            size = os.stat(path).st_size
        except OSError:
            # Deleted or made inaccessible between scan and now
            logger.warning(f"Skipping {path}: no longer accessible")
            self.terminal.show(f"[SKIPPED] {path}", error=True)
            return DeletionOutcome(path=path, status=DeletionStatus.SKIPPED)

        try:
            self.file_service.remove(path)
        except OSError as e:
            logger.warning(f"Failed to delete {path}: {e}")
            self.terminal.show(f"[FAILED] {path}: {e}", error=True)
            return DeletionOutcome(path=path, status=DeletionStatus.FAILED, error=str(e))

        logger.debug(f"Deleted {path} ({size} bytes)")
        self.terminal.show(f"[DELETED] {path}")
        return DeletionOutcome(path=path, status=DeletionStatus.DELETED, size_bytes=size)
