"""Base types and protocols for validation output managers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, TextIO

from pydantic import BaseModel, ConfigDict

from kubereport.results import ValidationResult, ValidationStatus, get_status


class ReportError(Exception):
    """Base exception for reporting failures."""

    pass


class SerializationError(ReportError):
    """Buffered results could not be serialized."""

    pass


class OutputWriteError(ReportError):
    """Report output could not be written."""

    pass


class OutputManager(Protocol):
    """Protocol for validation output managers.

    ``put`` is called once per validated document, in processing order.
    ``flush`` is called once after the last document.
    """

    def put(self, result: ValidationResult) -> None:
        """Record a validation result.

        Args:
            result: Validation result of one document.
        """
        ...

    def flush(self) -> None:
        """Emit any buffered output."""
        ...


class LineSink(Protocol):
    """Destination for report lines."""

    def write_line(self, line: str) -> None:
        """Write one line of output.

        Args:
            line: Text to write, without trailing newline.
        """
        ...


class StreamSink:
    """Line sink writing to a text stream, stdout by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize stream sink.

        Args:
            stream: Text stream to write to. Uses the current sys.stdout if None.
        """
        self._stream = stream

    def write_line(self, line: str) -> None:
        """Write a line followed by a newline.

        Args:
            line: Text to write.

        Raises:
            OutputWriteError: If the underlying stream fails.
        """
        stream = self._stream or sys.stdout
        try:
            stream.write(f"{line}\n")
            stream.flush()
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"failed to write report output: {e}") from e


class EvalRecord(BaseModel):
    """Serialization-ready projection of a validation result."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    filename: str
    kind: str
    status: ValidationStatus
    errors: list[str]

    @classmethod
    def from_result(cls, result: ValidationResult) -> EvalRecord:
        """Build a record from a validation result.

        Args:
            result: Validation result to project

        Returns:
            Record with stringified errors (empty list when there are none)
        """
        return cls(
            filename=result.filename, kind=result.kind, status=get_status(result), errors=result.error_messages
        )


class BufferedOutputManager(ABC):
    """Output manager that collects records and emits them on flush."""

    def __init__(self, sink: LineSink | None = None, failures_only: bool = False) -> None:
        """Initialize buffered output manager.

        Args:
            sink: Destination for output lines. Writes to stdout if None.
            failures_only: Suppress valid and skipped results.
        """
        self.sink = sink or StreamSink()
        self.failures_only = failures_only
        self.records: list[EvalRecord] = []

    def put(self, result: ValidationResult) -> None:
        """Buffer a validation result.

        Only valid results are buffered, and only outside failures-only mode.

        Args:
            result: Validation result of one document.
        """
        record = EvalRecord.from_result(result)
        if record.status == ValidationStatus.VALID and not self.failures_only:
            self.records.append(record)

    def flush(self) -> None:
        """Write the formatted buffer to the sink."""
        for line in self.render():
            self.sink.write_line(line)

    @abstractmethod
    def render(self) -> list[str]:
        """Format the buffered records.

        Returns:
            Output lines, in write order.
        """
