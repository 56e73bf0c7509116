from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict

from shellcheck_importer.clients.shellcheck import ShellcheckClient
from shellcheck_importer.config import ImporterConfig
from shellcheck_importer.errors import ReportUnavailable
from shellcheck_importer.models.files import FileType
from shellcheck_importer.repositories.files import FileRegistry

EMPTY_REPORT = b"[]"


class OfflineSource(BaseModel):
    """Report produced beforehand and stored on disk."""

    model_config = ConfigDict(frozen=True)

    path: Path

    def fetch(self) -> BinaryIO:
        try:
            return self.path.open("rb")
        except OSError as e:
            raise ReportUnavailable(f"Cannot read report {self.path}: {e}") from e


class LiveSource(BaseModel):
    """Report produced by running ShellCheck on the target files."""

    model_config = ConfigDict(frozen=True)

    client: ShellcheckClient
    target_files: list[str]

    def fetch(self) -> BinaryIO:
        if not self.target_files:
            return io.BytesIO(EMPTY_REPORT)
        return io.BytesIO(self.client.run(self.target_files))


ReportSource = OfflineSource | LiveSource


def select_report_source(
    config: ImporterConfig, registry: FileRegistry, project_root: Path | None = None
) -> ReportSource:
    """Pick how the report is obtained for this run.

    A configured report path selects offline mode; a relative path is taken
    from ``project_root`` when one is given. Otherwise ShellCheck runs
    from ``project_root`` (default: current directory) over every main file
    assigned the configured language.
    """
    if config.report_path is not None:
        report_path = config.report_path
        if project_root is not None and not report_path.is_absolute():
            report_path = project_root / report_path
        return OfflineSource(path=report_path)

    target_files = [
        f.relative_path for f in registry.files(config.language_key, FileType.MAIN)
    ]
    client = ShellcheckClient(
        src=project_root or Path.cwd(),
        executable=config.executable,
        timeout=config.timeout,
    )
    return LiveSource(client=client, target_files=target_files)
