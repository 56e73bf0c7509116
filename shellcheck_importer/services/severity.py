from typing import Final

from shellcheck_importer.models.issue import Severity

LEVEL_SEVERITIES: Final[dict[str, Severity]] = {
    "info": Severity.INFO,
    "style": Severity.MINOR,
    "warning": Severity.MAJOR,
    "error": Severity.CRITICAL,
}
DEFAULT_SEVERITY: Final[Severity] = Severity.MINOR


def map_severity(level: str) -> Severity:
    """Map a ShellCheck level to the host scale; unknown levels are MINOR."""
    return LEVEL_SEVERITIES.get(level, DEFAULT_SEVERITY)
