from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from shellcheck_importer.config import ImporterConfig
from shellcheck_importer.errors import AnalysisError
from shellcheck_importer.models.files import FileType
from shellcheck_importer.models.issue import EmissionOutcome
from shellcheck_importer.repositories.files import FileRegistry
from shellcheck_importer.repositories.issues import IssueSink
from shellcheck_importer.services.emitter import IssueEmitter
from shellcheck_importer.services.reporting import log_outcome

logger = logging.getLogger(__name__)


class SensorDescriptor(BaseModel):
    """Host-facing description of when the sensor applies."""

    model_config = ConfigDict(frozen=True)

    name: str
    languages: tuple[str, ...]
    file_type: FileType


class ShellcheckIssuesSensor(BaseModel):
    """Import ShellCheck findings as issues of the analyzed bash files."""

    config: ImporterConfig = Field(default_factory=ImporterConfig)
    project_root: Path | None = None

    def describe(self) -> SensorDescriptor:
        return SensorDescriptor(
            name="Shellcheck report importer",
            languages=(self.config.language_key,),
            file_type=FileType.MAIN,
        )

    def should_execute(self, registry: FileRegistry) -> bool:
        """Return True when at least one main file has the sensor language."""
        return bool(registry.files(self.config.language_key, FileType.MAIN))

    def execute(
        self, registry: FileRegistry, sink: IssueSink
    ) -> EmissionOutcome | None:
        """Run one import and log its outcome.

        Args:
            registry: Files under analysis.
            sink: Receiver of the normalized issues.

        Returns:
            The emission outcome, or None when the report could not be
            obtained or decoded. Nothing is submitted in that case.
        """
        logger.info("Parsing 'Shellcheck' Analysis Results")
        emitter = IssueEmitter(registry, sink)
        try:
            outcome = emitter.run(self.config, self.project_root)
        except AnalysisError:
            logger.exception("An error occurred while analysing your script files")
            return None

        log_outcome(outcome)
        return outcome

    def __str__(self) -> str:
        return "ShellcheckIssuesSensor"
