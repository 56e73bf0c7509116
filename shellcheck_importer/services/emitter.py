from __future__ import annotations

from pathlib import Path

from shellcheck_importer.config import REPOSITORY_SUFFIX, ImporterConfig
from shellcheck_importer.errors import (
    UnresolvedDiagnostic,
    UnresolvedFile,
    UnresolvedLanguage,
)
from shellcheck_importer.models.diagnostic import Diagnostic
from shellcheck_importer.models.files import FileType
from shellcheck_importer.models.issue import (
    EmissionOutcome,
    NormalizedIssue,
    RuleKey,
    SkippedDiagnostic,
)
from shellcheck_importer.repositories.files import FileRegistry
from shellcheck_importer.repositories.issues import IssueSink
from shellcheck_importer.services.location import resolve_location
from shellcheck_importer.services.report_parser import parse_report
from shellcheck_importer.services.report_source import select_report_source
from shellcheck_importer.services.severity import map_severity


def repository_key_for_language(language_key: str) -> str:
    return f"{language_key.lower()}-{REPOSITORY_SUFFIX}"


def rule_key_for(language_key: str, code: int) -> RuleKey:
    """Build the rule key, e.g. ``bash-shellcheck:SC2086``."""
    return RuleKey(repository=repository_key_for_language(language_key), rule=f"SC{code}")


class IssueEmitter:
    """Turn a ShellCheck report into issues submitted to a sink.

    The report is fetched and parsed in full before anything is submitted, so
    an unreadable or malformed report leaves the sink untouched. Diagnostics
    that cannot be attached to an analyzed file are skipped and reported in
    the returned outcome.
    """

    def __init__(self, registry: FileRegistry, sink: IssueSink) -> None:
        self.registry = registry
        self.sink = sink

    def run(
        self, config: ImporterConfig, project_root: Path | None = None
    ) -> EmissionOutcome:
        """Import the report selected by ``config``.

        Args:
            config: Importer settings; a report path selects offline mode.
            project_root: Directory ShellCheck runs from in live mode, and the
                base of a relative report path.

        Returns:
            Submitted issues and skipped diagnostics, in report order.

        Raises:
            ReportUnavailable: When the report cannot be obtained.
            MalformedReport: When the report cannot be decoded.
        """
        source = select_report_source(config, self.registry, project_root)
        with source.fetch() as stream:
            diagnostics = parse_report(stream)

        outcome = EmissionOutcome()
        for diagnostic in diagnostics:
            try:
                issue = self._normalize(diagnostic)
            except UnresolvedDiagnostic as e:
                outcome.skipped.append(
                    SkippedDiagnostic(
                        diagnostic=diagnostic,
                        reason=e.reason,
                        detail=str(e),
                    )
                )
                continue
            self.sink.submit(issue)
            outcome.submitted.append(issue)
        return outcome

    def _normalize(self, diagnostic: Diagnostic) -> NormalizedIssue:
        input_file = self.registry.find_file(diagnostic.file, FileType.MAIN)
        if input_file is None:
            raise UnresolvedFile(
                diagnostic, f"Not able to find an analyzed file with {diagnostic.file}"
            )

        language_key = self.registry.language_of(input_file)
        if language_key is None:
            raise UnresolvedLanguage(
                diagnostic, f"No language assigned to {input_file.relative_path}"
            )

        return NormalizedIssue(
            file=input_file,
            rule_key=rule_key_for(language_key, diagnostic.code),
            location=resolve_location(
                diagnostic.line,
                diagnostic.column,
                diagnostic.end_line,
                diagnostic.end_column,
            ),
            severity=map_severity(diagnostic.level),
            message=diagnostic.message,
        )
