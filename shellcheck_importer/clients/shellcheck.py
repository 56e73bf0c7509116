from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Final

from pydantic import BaseModel

from shellcheck_importer.errors import ReportUnavailable

# 0: no findings, 1: findings reported. Anything else is a ShellCheck failure.
SUCCESS_EXIT_CODES: Final[frozenset[int]] = frozenset({0, 1})


class ShellcheckClient(BaseModel):
    """Run ShellCheck and capture its JSON report.

    This invokes ``shellcheck --format=json <files...>`` from the project
    root, so reported ``file`` values are the relative paths passed in.
    """

    src: Path
    executable: str = "shellcheck"
    timeout: float | None = None

    def command(self, files: list[str]) -> list[str]:
        return [self.executable, "--format=json", *files]

    def run(self, files: list[str]) -> bytes:
        """Analyze ``files`` and return ShellCheck's standard output.

        Args:
            files: Script paths relative to ``src``.

        Returns:
            Raw JSON report bytes.

        Raises:
            ReportUnavailable: When ShellCheck cannot be started, times out,
                or exits with an unexpected status.
        """
        try:
            result = subprocess.run(
                self.command(files),
                cwd=self.src,
                check=False,
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ReportUnavailable(
                f"{self.executable} did not finish within {self.timeout}s"
            ) from e
        except OSError as e:
            raise ReportUnavailable(f"Cannot run {self.executable}: {e}") from e

        if result.returncode not in SUCCESS_EXIT_CODES:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ReportUnavailable(
                f"{self.executable} exited with status {result.returncode}: {stderr}"
            )
        return result.stdout
