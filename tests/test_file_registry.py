"""Tests for the file registries."""

from __future__ import annotations

from pathlib import Path

from shellcheck_importer.config import ImporterConfig
from shellcheck_importer.models.files import FileType, InputFile
from shellcheck_importer.repositories.files import (
    FileRegistry,
    InMemoryFileRegistry,
    ProjectFileRegistry,
)
from tests.consts import SAMPLE_PROJECT_ROOT


def test_in_memory_registry_matches_exact_path_and_type(
    registry: InMemoryFileRegistry,
) -> None:
    assert registry.find_file("a.sh") == InputFile(relative_path="a.sh", language="bash")
    assert registry.find_file("./a.sh") is None
    assert registry.find_file("A.sh") is None
    assert registry.find_file("t/a_test.sh") is None
    assert registry.find_file("t/a_test.sh", FileType.TEST) is not None


def test_in_memory_registry_lists_files_per_language(
    registry: InMemoryFileRegistry,
) -> None:
    assert [f.relative_path for f in registry.files("bash")] == ["a.sh"]
    assert [f.relative_path for f in registry.files("bash", FileType.TEST)] == [
        "t/a_test.sh"
    ]
    assert registry.files("python") == []


def test_registries_satisfy_protocol(registry: InMemoryFileRegistry) -> None:
    assert isinstance(registry, FileRegistry)


def test_project_scan_classifies_files() -> None:
    project: ProjectFileRegistry = ProjectFileRegistry.scan(
        SAMPLE_PROJECT_ROOT, ImporterConfig()
    )

    assert project.root == SAMPLE_PROJECT_ROOT.resolve()
    assert [f.relative_path for f in project.files("bash")] == [
        "scripts/check",
        "scripts/deploy.sh",
    ]
    assert [f.relative_path for f in project.files("bash", FileType.TEST)] == [
        "tests/run_tests.sh"
    ]
    readme = project.find_file("README.txt")
    assert readme is not None
    assert project.language_of(readme) is None


def test_project_scan_honours_config(tmp_path: Path) -> None:
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "util.zsh").write_text("echo hi\n", encoding="utf-8")
    (tmp_path / "lib" / "util.sh").write_text("echo hi\n", encoding="utf-8")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "hook.sh").write_text("echo hi\n", encoding="utf-8")
    config = ImporterConfig(
        language_key="shell", file_suffixes=[".zsh"], test_patterns=["spec/*"]
    )

    project = ProjectFileRegistry.scan(tmp_path, config)

    assert [f.relative_path for f in project.files("shell")] == ["lib/util.zsh"]
    assert project.find_file(".git/hook.sh") is None
    util = project.find_file("lib/util.sh")
    assert util is not None and util.language is None
