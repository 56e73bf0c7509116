from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Diagnostic(BaseModel):
    """Single ShellCheck finding as it appears in the JSON report.

    Attributes:
        file: Path of the checked script, relative to the project root.
        line: Start line (1-based, 0 when absent).
        end_line: End line (1-based, 0 when absent).
        column: Start column (1-based, 0 when absent).
        end_column: End column (1-based, exclusive, 0 when absent).
        level: ShellCheck level (``error``, ``warning``, ``info``, ``style``).
        code: Numeric ShellCheck code, e.g. ``2086`` for SC2086.
        message: Human-readable description of the finding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    file: str = Field(..., description="Reported script path")
    line: int = Field(default=0, description="Start line")
    end_line: int = Field(default=0, alias="endLine", description="End line")
    column: int = Field(default=0, description="Start column")
    end_column: int = Field(default=0, alias="endColumn", description="End column")
    level: str = Field(default="", description="ShellCheck severity level")
    code: int = Field(default=0, description="ShellCheck rule number")
    message: str = Field(default="", description="Finding description")

    @field_validator("line", "end_line", "column", "end_column", "code", mode="before")
    @classmethod
    def _null_number_as_zero(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("boolean is not a valid position or code")
        return 0 if value is None else value

    @field_validator("level", "message", mode="before")
    @classmethod
    def _null_text_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
