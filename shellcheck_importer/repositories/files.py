from __future__ import annotations

import os
import re
from fnmatch import fnmatch
from functools import cached_property
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from shellcheck_importer.config import ImporterConfig
from shellcheck_importer.models.files import FileType, InputFile

SHEBANG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^#!\s*(?:\S*/)?(?:env\s+)?(?:ba|k|da)?sh\b"
)


@runtime_checkable
class FileRegistry(Protocol):
    """Host view of the files under analysis."""

    def find_file(
        self, relative_path: str, file_type: FileType = FileType.MAIN
    ) -> InputFile | None: ...

    def language_of(self, file: InputFile) -> str | None: ...

    def files(
        self, language: str, file_type: FileType = FileType.MAIN
    ) -> list[InputFile]: ...


class InMemoryFileRegistry(BaseModel):
    """File registry backed by an explicit list of files."""

    input_files: list[InputFile] = Field(default_factory=list)

    @cached_property
    def by_path(self) -> dict[tuple[str, FileType], InputFile]:
        return {(f.relative_path, f.type): f for f in self.input_files}

    def find_file(
        self, relative_path: str, file_type: FileType = FileType.MAIN
    ) -> InputFile | None:
        return self.by_path.get((relative_path, file_type))

    def language_of(self, file: InputFile) -> str | None:
        return file.language

    def files(
        self, language: str, file_type: FileType = FileType.MAIN
    ) -> list[InputFile]:
        return sorted(
            (
                f
                for f in self.input_files
                if f.type == file_type and f.language == language
            ),
            key=lambda f: f.relative_path,
        )


class ProjectFileRegistry(InMemoryFileRegistry):
    """File registry built by scanning a project directory."""

    root: Path

    @classmethod
    def scan(cls, root: Path, config: ImporterConfig) -> ProjectFileRegistry:
        """Index every regular file below ``root``.

        Hidden directories are skipped. Files with one of the configured
        suffixes, or without a suffix but with a shell shebang, get the
        configured language. Paths matching a test pattern are TEST files.

        Args:
            root: Project root directory.
            config: Importer settings providing suffixes, language and test patterns.

        Returns:
            Registry holding POSIX paths relative to ``root``.
        """
        root = root.resolve()
        input_files: list[InputFile] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                relative_path = path.relative_to(root).as_posix()
                file_type = (
                    FileType.TEST
                    if any(fnmatch(relative_path, p) for p in config.test_patterns)
                    else FileType.MAIN
                )
                input_files.append(
                    InputFile(
                        relative_path=relative_path,
                        language=_detect_language(path, config),
                        type=file_type,
                    )
                )
        return cls(root=root, input_files=input_files)


def _detect_language(path: Path, config: ImporterConfig) -> str | None:
    if path.suffix:
        return config.language_key if path.suffix in config.file_suffixes else None
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            first_line = f.readline()
    except OSError:
        return None
    return config.language_key if SHEBANG_PATTERN.match(first_line) else None
