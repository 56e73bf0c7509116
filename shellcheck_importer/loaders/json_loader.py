from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final

from shellcheck_importer.config import REPOSITORY_SUFFIX
from shellcheck_importer.models.issue import LineSelection, NormalizedIssue, TextRange

logger = logging.getLogger(__name__)

ISSUE_TYPE: Final[str] = "CODE_SMELL"


class JsonIssueSink:
    """Collect issues and persist them in the generic external-issue format.

    The output JSON schema is a single object with one key:

    Example:
    {
      "issues": [
        {
          "engineId": "shellcheck",
          "ruleId": "bash-shellcheck:SC2086",
          "severity": "MAJOR",
          "type": "CODE_SMELL",
          "primaryLocation": {
            "message": "Double quote to prevent globbing and word splitting.",
            "filePath": "scripts/build.sh",
            "textRange": {"startLine": 5, "startColumn": 9, "endLine": 5, "endColumn": 11}
          }
        }
      ]
    }

    Whole-line issues carry only ``startLine`` and ``endLine``; file-level
    issues have no ``textRange``.
    """

    def __init__(self, output_path: str | Path, indent: int = 2) -> None:
        """Create a JSON issue sink.

        Args:
            output_path: Target file path to write the issues into.
            indent: Indentation level for pretty-printing JSON.
        """
        self.output_path: Path = Path(output_path)
        self.indent: int = indent
        self.issues: list[NormalizedIssue] = []

    def submit(self, issue: NormalizedIssue) -> None:
        self.issues.append(issue)

    def save(self) -> None:
        """Write every submitted issue to the configured JSON file."""
        if self.output_path.parent and not self.output_path.parent.exists():
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

        payload: dict[str, list[dict[str, object]]] = {
            "issues": [self._issue_row(issue) for issue in self.issues]
        }

        # Lone surrogates cannot be encoded as UTF-8; escape them instead.
        try:
            data = json.dumps(payload, ensure_ascii=False, indent=self.indent).encode(
                "utf-8"
            )
        except UnicodeEncodeError:
            data = json.dumps(payload, ensure_ascii=True, indent=self.indent).encode(
                "ascii"
            )

        try:
            self.output_path.write_bytes(data)
        except OSError:
            logger.exception("Failed to write issues JSON to %s", self.output_path)
            raise

    @staticmethod
    def _issue_row(issue: NormalizedIssue) -> dict[str, object]:
        location: dict[str, object] = {
            "message": issue.message,
            "filePath": issue.file.relative_path,
        }
        text_range = issue.location
        if isinstance(text_range, TextRange):
            location["textRange"] = {
                "startLine": text_range.start_line,
                "startColumn": text_range.start_column,
                "endLine": text_range.end_line,
                "endColumn": text_range.end_column,
            }
        elif isinstance(text_range, LineSelection):
            location["textRange"] = {
                "startLine": text_range.line,
                "endLine": text_range.line,
            }

        return {
            "engineId": REPOSITORY_SUFFIX,
            "ruleId": str(issue.rule_key),
            "severity": str(issue.severity),
            "type": ISSUE_TYPE,
            "primaryLocation": location,
        }
