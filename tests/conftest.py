from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from shellcheck_importer.models.files import FileType, InputFile
from shellcheck_importer.repositories.files import InMemoryFileRegistry
from shellcheck_importer.repositories.issues import InMemoryIssueSink


@pytest.fixture
def registry() -> InMemoryFileRegistry:
    """Registry with one bash script, one untyped file and one test script."""

    return InMemoryFileRegistry(
        input_files=[
            InputFile(relative_path="a.sh", language="bash"),
            InputFile(relative_path="notes.txt", language=None),
            InputFile(relative_path="t/a_test.sh", language="bash", type=FileType.TEST),
        ]
    )


@pytest.fixture
def sink() -> InMemoryIssueSink:
    return InMemoryIssueSink()


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a helper writing a report payload into a temporary file."""

    def _write(payload: Any, name: str = "shellcheck.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, bytes):
            path.write_bytes(payload)
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
