"""Pytest configuration for kubereport."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from kubereport.results import SchemaError, ValidationResult


class CapturingSink:
    """Line sink that keeps written lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


@pytest.fixture
def sink() -> CapturingSink:
    """Provide a line sink that captures output.

    Returns:
        Empty capturing sink
    """
    return CapturingSink()


@pytest.fixture
def console_buffer() -> StringIO:
    """Provide the buffer backing the test console.

    Returns:
        Empty text buffer
    """
    return StringIO()


@pytest.fixture
def plain_console(console_buffer: StringIO) -> Console:
    """Provide a Rich console writing plain text to a buffer.

    Args:
        console_buffer: Buffer the console writes to

    Returns:
        Console without colors or wrapping surprises
    """
    return Console(file=console_buffer, width=200, color_system=None, force_terminal=False)


@pytest.fixture
def valid_pod() -> ValidationResult:
    """Valid Pod validated against its schema."""
    return ValidationResult(
        filename="a.yaml", kind="Pod", resource_name="web", resource_namespace="prod", validated_against_schema=True
    )


@pytest.fixture
def invalid_deployment() -> ValidationResult:
    """Deployment with two schema errors."""
    return ValidationResult(
        filename="c.yaml",
        kind="Deployment",
        resource_name="api",
        validated_against_schema=True,
        errors=(SchemaError(field="spec.replicas", description="Invalid type"), "err2"),
    )


@pytest.fixture
def empty_document() -> ValidationResult:
    """Empty YAML document."""
    return ValidationResult(filename="b.yaml")


@pytest.fixture
def unvalidated_service() -> ValidationResult:
    """Service for which no schema was found."""
    return ValidationResult(filename="svc.yaml", kind="Service", resource_name="front", validated_against_schema=False)
