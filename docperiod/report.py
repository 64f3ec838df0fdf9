"""Render check results as text, JSON or YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml  # type: ignore[import-untyped]
from attrs import define, field

from docperiod.engine import Violation
from docperiod.json_utils import json_dumps
from docperiod.source import LineIndex

Record = Dict[str, Any]
RecordList = List[Record]


@define(slots=True)
class FileReport:
    """Violations reported for one file.

    Attributes:
        path: Checked file.
        violations: Violations still present after the run.
        index: Line index of the file content the offsets refer to.
        fixed: Number of violations fixed in place.
        errors: Messages for comments skipped as malformed.
    """

    path: Path
    violations: list[Violation]
    index: LineIndex
    fixed: int = 0
    errors: list[str] = field(factory=list)

    def records(self) -> RecordList:
        """Return one plain record per violation."""

        records: RecordList = []
        for violation in self.violations:
            line, column = self.index.line_col(violation.report_span.start)
            records.append(
                {
                    "path": str(self.path),
                    "line": line,
                    "column": column,
                    "offset": violation.location,
                    "message": violation.message_key,
                    "fixable": violation.fixable,
                }
            )
        return records


def render(reports: list[FileReport], output_format: str) -> str:
    """Render reports in ``text``, ``json`` or ``yaml`` format.

    Args:
        reports: Reports to render.
        output_format: Name of the output format.

    Returns:
        Rendered output without a trailing newline.
    """

    records = [r for report in reports for r in report.records()]

    if output_format == "json":
        return json_dumps(records, indent=True)
    if output_format == "yaml":
        return yaml.safe_dump(
            records, allow_unicode=True, sort_keys=False
        ).rstrip("\n")

    lines = []
    for record in records:
        line = (
            f"{record['path']}:{record['line']}:{record['column']}: "
            f"{record['message']}"
        )
        if not record["fixable"]:
            line += " (no fix available)"
        lines.append(line)
    return "\n".join(lines)
