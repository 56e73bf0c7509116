from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shellcheck_importer.errors import ConfigError

REPORT_PATH_KEY: Final[str] = "sonar.shellcheck.reportPath"
REPOSITORY_SUFFIX: Final[str] = "shellcheck"
LANGUAGE_KEY: Final[str] = "bash"


def _report_path_from_env() -> Path | None:
    value = os.getenv("SHELLCHECK_REPORT_PATH")
    return Path(value) if value else None


class ImporterConfig(BaseModel):
    """Settings for one import run.

    A ``report_path`` switches the importer to offline mode: the report is
    read from that file instead of running ShellCheck.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    report_path: Path | None = Field(
        default_factory=_report_path_from_env, alias="reportPath"
    )
    executable: str = Field(
        default_factory=lambda: os.getenv("SHELLCHECK_EXECUTABLE", "shellcheck")
    )
    timeout: float | None = Field(default=None, gt=0)
    language_key: str = Field(default=LANGUAGE_KEY, alias="languageKey")
    file_suffixes: list[str] = Field(
        default_factory=lambda: [".sh", ".bash", ".ksh"], alias="fileSuffixes"
    )
    test_patterns: list[str] = Field(
        default_factory=lambda: ["test/**", "tests/**"], alias="testPatterns"
    )


def load_config(path: str | Path) -> ImporterConfig:
    """Load importer settings from a YAML file.

    Both ``reportPath`` and the host property name ``sonar.shellcheck.reportPath``
    are accepted for the report location.

    Args:
        path: YAML file holding a mapping of settings.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: When the file is missing, is not valid YAML, or holds
            unknown or invalid settings.
    """
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw: Any = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    if REPORT_PATH_KEY in raw:
        raw["reportPath"] = raw.pop(REPORT_PATH_KEY)

    try:
        return ImporterConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e
