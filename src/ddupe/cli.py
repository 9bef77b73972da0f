#!/usr/bin/env python3
"""
ddupe CLI: find duplicate files by content hash and optionally delete them.
Keeps one file per group; asks before deleting, and never deletes in
--dry-run or --json-output mode.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from ddupe.commands import DeduplicationCommand
from ddupe.core.models import DuplicateAnalysis, ResolutionMode, ScanParams, DEFAULT_CHUNK_SIZE
from ddupe.core.resolver import DeletionResolver
from ddupe.core.scanner import ScanSetupError
from ddupe.services.file_service import FileService
from ddupe.services.report_service import ReportService, ReportWriteError
from ddupe.terminal import ConsoleTerminal

EPILOG_TEXT = """
Examples:
  Find duplicates and confirm deletion once for all of them
  %(prog)s ~/Downloads

  Show what would be removed without deleting anything
  %(prog)s ~/Downloads --dry-run

  Decide for each duplicate group which copy to keep
  %(prog)s ~/Downloads -i

  Write the analysis to a JSON file (never deletes)
  %(prog)s ~/Downloads --json-output report.json

  Hash with 4 threads, skip files with no size/front-chunk twin, move dupes to trash
  %(prog)s ~/Downloads --jobs 4 --quick --trash
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="ddupe",
            description="ddupe: find and optionally delete duplicate files based on content hashes",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "path",
            type=str,
            help="Directory to scan recursively for duplicate files"
        )

        # Resolution modes
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Do not delete files, only show what would be removed"
        )
        parser.add_argument(
            "--interactive", "-i",
            action="store_true",
            help="Review each duplicate group and choose which file to keep"
        )
        parser.add_argument(
            "--json-output",
            metavar="FILE",
            type=str,
            default=None,
            help="Write the analysis to a JSON file (implies dry run; never deletes)"
        )

        # Scan options
        parser.add_argument(
            "--jobs", "-j",
            type=int,
            default=1,
            metavar='N',
            help="Number of threads used for hashing. Default: 1"
        )
        parser.add_argument(
            "--chunk-size",
            type=str,
            default=str(DEFAULT_CHUNK_SIZE),
            metavar='SIZE',
            help=f"Read size used while hashing (e.g., 8192, 64K, 1MB). Default: {DEFAULT_CHUNK_SIZE}"
        )
        parser.add_argument(
            "--quick",
            action="store_true",
            help="Only hash files that share a size and first chunk with another file"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move deleted duplicates to the system trash instead of removing them"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any hashing happens."""
        if args.quiet and args.interactive:
            self.error_exit("--quiet cannot be combined with --interactive")

        if args.jobs < 1:
            self.error_exit("--jobs must be at least 1")

        root_path = Path(args.path)
        if not root_path.exists():
            self.error_exit(f"'{args.path}' does not exist.")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=args.path,
                chunk_size_str=args.chunk_size,
                jobs=args.jobs,
                quick=args.quick,
                use_trash=args.trash,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def determine_mode(args: argparse.Namespace) -> ResolutionMode:
        """The JSON report wins over dry run, dry run over interactive."""
        if args.json_output:
            return ResolutionMode.REPORT
        if args.dry_run:
            return ResolutionMode.DRY_RUN
        if args.interactive:
            return ResolutionMode.INTERACTIVE
        return ResolutionMode.BATCH

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files found...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams, terminal: ConsoleTerminal) -> Optional[DuplicateAnalysis]:
        """Execute the scan pipeline; None when the tree holds no files."""
        command = DeduplicationCommand()
        try:
            analysis = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except ScanSetupError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")

        errors = command.get_errors()
        for path, reason in errors:
            terminal.show(f"[UNREADABLE] {path}: {reason}", error=True)
        if errors:
            terminal.show(f"Skipped {len(errors)} unreadable file(s).", error=True)

        for path in analysis.size_errors:
            terminal.show(f"[NO SIZE] {path}", error=True)
        if analysis.size_errors:
            terminal.show(
                f"Could not read the size of {len(analysis.size_errors)} duplicate file(s); "
                f"they are not counted in the savings.",
                error=True
            )

        if not command.get_files():
            return None
        return analysis

    def write_report(self, args: argparse.Namespace, analysis: DuplicateAnalysis, terminal: ConsoleTerminal) -> None:
        try:
            output_path = ReportService.write_json_report(
                args.json_output,
                analysis,
                roots=[args.path],
                interactive=args.interactive
            )
        except ReportWriteError as e:
            self.error_exit(str(e))
        terminal.show(f"JSON report written to: {output_path}")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)
        mode = self.determine_mode(args)
        terminal = ConsoleTerminal(quiet=self.quiet)
        if self.verbose:
            terminal.show(f"Mode: {mode.display_name}")

        terminal.show(f"Scanning directory: {params.root_dir}")
        analysis = self.run_scan(params, terminal)

        if mode == ResolutionMode.REPORT:
            self.write_report(args, analysis or DuplicateAnalysis(), terminal)
            return

        if analysis is None:
            terminal.show("No files found.")
            return

        resolver = DeletionResolver(terminal, FileService(use_trash=params.use_trash))
        resolver.show_analysis(analysis)
        if analysis.is_empty():
            return

        result = resolver.resolve(mode, analysis)
        if mode == ResolutionMode.INTERACTIVE or result.outcomes:
            resolver.show_result(result)

        if self.verbose:
            elapsed = time.time() - self.start_time
            terminal.show(f"\nCompleted in {elapsed:.2f} seconds")


def main(argv: Optional[List[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
