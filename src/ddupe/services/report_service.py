"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Structured (JSON) export of a DuplicateAnalysis. Report generation never
deletes anything.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ddupe.core.models import DuplicateAnalysis

logger = logging.getLogger(__name__)


class ReportWriteError(RuntimeError):
    """The requested report could not be written."""


class ReportService:
    @staticmethod
    def build_report(
            analysis: DuplicateAnalysis,
            roots: List[Union[str, Path]],
            interactive: bool = False
    ) -> Dict[str, Any]:
        """
        Builds the report document. Each group lists its files keep-first.

        Args:
            analysis: Result of one scan
            roots: Scanned root directories
            interactive: Whether interactive mode was also requested

        Returns:
            JSON-serializable dict
        """
        return {
            "roots": [str(root) for root in roots],
            "duplicate_groups": [
                {"files": [str(path) for path in group.candidates]}
                for group in analysis.groups
            ],
            "removable_count": analysis.total_dupes,
            "savings_bytes": analysis.total_saving_bytes,
            "dry_run": True,
            "interactive": interactive,
            "mode": "json",
        }

    @classmethod
    def write_json_report(
            cls,
            output_path: Union[str, Path],
            analysis: DuplicateAnalysis,
            roots: List[Union[str, Path]],
            interactive: bool = False
    ) -> Path:
        """
        Writes the report as pretty-printed JSON, creating parent directories.
        Raises ReportWriteError on any filesystem error.
        """
        output_path = Path(output_path)
        report = cls.build_report(analysis, roots, interactive=interactive)

        try:
            if str(output_path.parent) not in ("", "."):
                output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(report, f, indent=2)
        except OSError as e:
            raise ReportWriteError(f"Failed to write JSON report: {e}") from e

        logger.debug(f"JSON report written to {output_path}")
        return output_path
