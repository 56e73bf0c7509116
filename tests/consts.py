"""Shared test path constants."""

from pathlib import Path
from typing import Final

TESTS_DIR: Final[Path] = Path(__file__).resolve().parent
PROJECT_ROOT: Final[Path] = TESTS_DIR.parent
TEST_DATA_DIR: Final[Path] = TESTS_DIR / "data"
SAMPLE_REPORT: Final[Path] = TEST_DATA_DIR / "report.json"
SAMPLE_JSON1_REPORT: Final[Path] = TEST_DATA_DIR / "report_json1.json"
SAMPLE_PROJECT_ROOT: Final[Path] = TEST_DATA_DIR / "project"
