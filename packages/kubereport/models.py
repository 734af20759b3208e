"""Data models for kubereport."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, field_validator


class MessageType(Enum):
    """Message types with associated display styles."""

    ERROR = ("red", "Error")
    SUCCESS = ("green", "Success")
    INFO = ("blue", "Info")
    WARNING = ("yellow", "Warning")


class OutputFormat(Enum):
    """Supported report output formats."""

    STDOUT = "stdout"
    JSON = "json"
    TAP = "tap"


def valid_outputs() -> list[str]:
    """Names of the supported output formats."""
    return [fmt.value for fmt in OutputFormat]


class ReportConfig(BaseModel):
    """Reporter configuration, fixed for the lifetime of an output manager."""

    output: str = OutputFormat.STDOUT.value
    failures_only: bool = False

    @field_validator("output")
    @classmethod
    def _check_output(cls, value: str) -> str:
        """Reject output formats outside the supported set.

        Args:
            value: Requested output format name

        Returns:
            The format name, unchanged

        Raises:
            ValueError: If the format is not supported
        """
        if value not in valid_outputs():
            msg = f"unsupported output format '{value}', expected one of: {', '.join(valid_outputs())}"
            raise ValueError(msg)
        return value
