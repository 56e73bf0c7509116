from __future__ import annotations

import pytest

from shellcheck_importer.models.issue import Severity
from shellcheck_importer.services.severity import map_severity


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("info", Severity.INFO),
        ("style", Severity.MINOR),
        ("warning", Severity.MAJOR),
        ("error", Severity.CRITICAL),
    ],
)
def test_known_levels(level: str, expected: Severity) -> None:
    assert map_severity(level) is expected


@pytest.mark.parametrize("level", ["", "Warning", "ERROR", "fatal", " info"])
def test_unknown_levels_default_to_minor(level: str) -> None:
    assert map_severity(level) is Severity.MINOR
    assert map_severity(level) is map_severity(level)


def test_severity_scale_is_ordered() -> None:
    ranks: list[int] = [s.rank for s in Severity]

    assert ranks == sorted(ranks)
    assert Severity.INFO.rank < Severity.MINOR.rank < Severity.MAJOR.rank
    assert Severity.CRITICAL.rank < Severity.BLOCKER.rank
