from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from shellcheck_importer.models.issue import SkipReason

if TYPE_CHECKING:
    from shellcheck_importer.models.diagnostic import Diagnostic


class ShellcheckImporterError(Exception):
    """Base class for every error raised by the importer."""


class ConfigError(ShellcheckImporterError):
    """Configuration file could not be loaded or validated."""


class AnalysisError(ShellcheckImporterError):
    """Fatal failure that aborts a whole analysis run."""


class ReportUnavailable(AnalysisError):
    """The ShellCheck report stream could not be obtained."""


class MalformedReport(AnalysisError):
    """The ShellCheck report could not be deserialized."""


class UnresolvedDiagnostic(ShellcheckImporterError):
    """A diagnostic could not be attached to an analyzed file.

    Non-fatal: the emitter records the diagnostic as skipped and moves on.
    """

    reason: ClassVar[SkipReason]

    def __init__(self, diagnostic: Diagnostic, detail: str) -> None:
        super().__init__(detail)
        self.diagnostic = diagnostic


class UnresolvedFile(UnresolvedDiagnostic):
    """No analyzed file matches the diagnostic's relative path."""

    reason: ClassVar[SkipReason] = SkipReason.UNRESOLVED_FILE


class UnresolvedLanguage(UnresolvedDiagnostic):
    """The matched file has no assigned language."""

    reason: ClassVar[SkipReason] = SkipReason.UNRESOLVED_LANGUAGE
