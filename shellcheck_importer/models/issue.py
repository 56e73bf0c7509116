from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shellcheck_importer.models.diagnostic import Diagnostic
from shellcheck_importer.models.files import InputFile


class Severity(StrEnum):
    """Host severity scale, from least to most severe."""

    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"

    @property
    def rank(self) -> int:
        return list(Severity).index(self)


class RuleKey(BaseModel):
    """Rule identifier made of a repository and a rule inside it."""

    model_config = ConfigDict(frozen=True)

    repository: str
    rule: str

    def __str__(self) -> str:
        return f"{self.repository}:{self.rule}"


class TextRange(BaseModel):
    """Non-empty span in host addressing.

    Lines are 1-based, columns 0-based and the end column is exclusive.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(..., ge=1)
    start_column: int = Field(..., ge=0)
    end_line: int = Field(..., ge=1)
    end_column: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_non_empty(self) -> Self:
        """Reject reversed and zero-width ranges."""

        if self.end_line < self.start_line:
            raise ValueError("end_line must be greater than or equal to start_line")
        if self.end_line == self.start_line and self.end_column <= self.start_column:
            raise ValueError("single-line range must end after its start column")
        return self


class LineSelection(BaseModel):
    """Selection of a whole source line."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1)


Location = TextRange | LineSelection | None


class NormalizedIssue(BaseModel):
    """Issue ready to be handed to the host.

    A ``None`` location means the issue is attached to the file as a whole.
    """

    model_config = ConfigDict(frozen=True)

    file: InputFile
    rule_key: RuleKey
    location: TextRange | LineSelection | None = None
    severity: Severity
    message: str


class SkipReason(StrEnum):
    UNRESOLVED_FILE = "unresolved_file"
    UNRESOLVED_LANGUAGE = "unresolved_language"


class SkippedDiagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    diagnostic: Diagnostic
    reason: SkipReason
    detail: str


class EmissionOutcome(BaseModel):
    """What a single emitter run did with the report."""

    submitted: list[NormalizedIssue] = Field(default_factory=list)
    skipped: list[SkippedDiagnostic] = Field(default_factory=list)

    @property
    def diagnostics_count(self) -> int:
        return len(self.submitted) + len(self.skipped)
