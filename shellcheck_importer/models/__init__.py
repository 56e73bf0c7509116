from .diagnostic import Diagnostic
from .files import FileType, InputFile
from .issue import (
    EmissionOutcome,
    LineSelection,
    Location,
    NormalizedIssue,
    RuleKey,
    Severity,
    SkippedDiagnostic,
    SkipReason,
    TextRange,
)

__all__ = [
    "Diagnostic",
    "EmissionOutcome",
    "FileType",
    "InputFile",
    "LineSelection",
    "Location",
    "NormalizedIssue",
    "RuleKey",
    "Severity",
    "SkippedDiagnostic",
    "SkipReason",
    "TextRange",
]
