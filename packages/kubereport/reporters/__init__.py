"""Validation output managers for kubereport."""

from __future__ import annotations

from rich.console import Console

from kubereport.models import OutputFormat, ReportConfig
from kubereport.reporters.base import (
    BufferedOutputManager,
    EvalRecord,
    LineSink,
    OutputManager,
    OutputWriteError,
    ReportError,
    SerializationError,
    StreamSink,
)
from kubereport.reporters.console import ConsoleReporter
from kubereport.reporters.json_output import JSONReporter
from kubereport.reporters.tap import TAPReporter

__all__ = [
    "BufferedOutputManager",
    "ConsoleReporter",
    "EvalRecord",
    "JSONReporter",
    "LineSink",
    "OutputManager",
    "OutputWriteError",
    "ReportError",
    "SerializationError",
    "StreamSink",
    "TAPReporter",
    "get_output_manager",
    "get_output_manager_for",
]


def get_output_manager(
    output: str, failures_only: bool, *, sink: LineSink | None = None, console: Console | None = None
) -> OutputManager:
    """Create the output manager for a format name.

    Unknown format names fall back to the console reporter.

    Args:
        output: Output format name ("stdout", "json" or "tap")
        failures_only: Suppress valid and skipped results
        sink: Line sink for the JSON and TAP reporters
        console: Rich console for the console reporter

    Returns:
        Output manager for the requested format
    """
    match output:
        case OutputFormat.JSON.value:
            return JSONReporter(sink, failures_only)
        case OutputFormat.TAP.value:
            return TAPReporter(sink, failures_only)
        case OutputFormat.STDOUT.value:
            return ConsoleReporter(console, failures_only)
        case _:
            return ConsoleReporter(console, failures_only)


def get_output_manager_for(
    config: ReportConfig, *, sink: LineSink | None = None, console: Console | None = None
) -> OutputManager:
    """Create the output manager described by a report configuration.

    Args:
        config: Report configuration
        sink: Line sink for the JSON and TAP reporters
        console: Rich console for the console reporter

    Returns:
        Output manager for the configured format
    """
    return get_output_manager(config.output, config.failures_only, sink=sink, console=console)
