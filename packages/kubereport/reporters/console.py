"""Rich console reporter for validation results."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from kubereport.reporters.base import OutputWriteError
from kubereport.results import ValidationResult


class ConsoleReporter:
    """Reports each validation result to the console as it arrives."""

    def __init__(self, console: Console | None = None, failures_only: bool = False) -> None:
        """Initialize console reporter.

        Args:
            console: Rich Console instance. Creates new one if None.
            failures_only: Suppress notices for valid and empty documents.
        """
        self.console = console or Console()
        self.failures_only = failures_only

    def put(self, result: ValidationResult) -> None:
        """Print the notices for a validation result.

        Args:
            result: Validation result of one document.
        """
        resource = f"{result.kind} ({result.qualified_name})"
        if result.errors:
            for error in result.error_messages:
                self._warn(f"{result.filename} contains an invalid {resource} - {error}")
        elif result.kind == "" and not self.failures_only:
            self._success(f"{result.filename} contains an empty YAML document")
        elif not result.validated_against_schema:
            self._warn(f"{result.filename} containing a {resource} was not validated against a schema")
        elif not self.failures_only:
            self._success(f"{result.filename} contains a valid {resource}")

    def flush(self) -> None:
        """Nothing to flush, output is written as results arrive."""

    def _success(self, message: str) -> None:
        self._print("PASS", "green", message)

    def _warn(self, message: str) -> None:
        self._print("WARN", "yellow", message)

    def _print(self, label: str, style: str, message: str) -> None:
        """Print a labelled line without interpreting the message as markup.

        Args:
            label: Line prefix
            style: Rich style for the prefix
            message: Message text

        Raises:
            OutputWriteError: If the console cannot be written to.
        """
        try:
            self.console.print(Text.assemble((label, style), " - ", message), soft_wrap=True, highlight=False)
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"failed to write report output: {e}") from e
