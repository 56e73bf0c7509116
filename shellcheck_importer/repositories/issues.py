from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from shellcheck_importer.models.issue import NormalizedIssue


@runtime_checkable
class IssueSink(Protocol):
    """Receiver of normalized issues."""

    def submit(self, issue: NormalizedIssue) -> None: ...


class InMemoryIssueSink(BaseModel):
    """Keeps submitted issues in submission order."""

    issues: list[NormalizedIssue] = Field(default_factory=list)

    def submit(self, issue: NormalizedIssue) -> None:
        self.issues.append(issue)
