from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from shellcheck_importer.entrypoints.cli import app
from tests.consts import SAMPLE_PROJECT_ROOT, SAMPLE_REPORT

runner = CliRunner()


def _copy_project(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    shutil.copytree(SAMPLE_PROJECT_ROOT, project)
    return project


def test_import_offline_report(tmp_path: Path) -> None:
    project = _copy_project(tmp_path)
    output = tmp_path / "issues.json"

    result = runner.invoke(
        app, ["import", str(project), "--report", str(SAMPLE_REPORT), "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    issues = json.loads(output.read_text(encoding="utf-8"))["issues"]
    assert [issue["ruleId"] for issue in issues] == [
        "bash-shellcheck:SC2086",
        "bash-shellcheck:SC1073",
        "bash-shellcheck:SC2148",
    ]
    assert issues[1]["primaryLocation"]["textRange"] == {
        "startLine": 12,
        "startColumn": 2,
        "endLine": 14,
        "endColumn": 3,
    }
    assert issues[2]["primaryLocation"]["textRange"] == {"startLine": 1, "endLine": 1}


def test_import_with_yaml_config(tmp_path: Path) -> None:
    project = _copy_project(tmp_path)
    config = tmp_path / "importer.yaml"
    config.write_text(f"reportPath: {SAMPLE_REPORT}\n", encoding="utf-8")

    result = runner.invoke(app, ["import", str(project), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert (project / "shellcheck-issues.json").exists()


def test_import_missing_report_fails(tmp_path: Path) -> None:
    project = _copy_project(tmp_path)

    result = runner.invoke(
        app, ["import", str(project), "--report", str(tmp_path / "absent.json")]
    )

    assert result.exit_code == 1
    assert not (project / "shellcheck-issues.json").exists()


def test_import_invalid_config_fails(tmp_path: Path) -> None:
    project = _copy_project(tmp_path)
    config = tmp_path / "importer.yaml"
    config.write_text("unknownKey: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["import", str(project), "--config", str(config)])

    assert result.exit_code == 1


def test_import_without_bash_files_writes_empty_issues(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SHELLCHECK_REPORT_PATH", raising=False)
    project = tmp_path / "empty"
    project.mkdir()
    (project / "notes.txt").write_text("nothing to lint\n", encoding="utf-8")

    result = runner.invoke(app, ["import", str(project)])

    assert result.exit_code == 0, result.output
    output = project / "shellcheck-issues.json"
    assert json.loads(output.read_text(encoding="utf-8")) == {"issues": []}
