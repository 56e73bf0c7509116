from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class FileType(StrEnum):
    """Role of a file in the analyzed project."""

    MAIN = "main"
    TEST = "test"


class InputFile(BaseModel):
    """Handle of a project file known to the host registry."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="POSIX path relative to the project root")
    language: str | None = Field(default=None, description="Assigned language key")
    type: FileType = Field(default=FileType.MAIN, description="Main or test file")
