"""CLI interface for kubereport.

Renders Kubernetes manifest validation results as console text, JSON or TAP.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from kubereport.models import MessageType, ReportConfig, valid_outputs
from kubereport.report import load_results, render_results
from kubereport.reporters import ReportError, get_output_manager_for

# Diagnostics go to stderr so stdout carries only the report
console = Console(stderr=True)

app = typer.Typer(
    name="kubereport",
    help="Render Kubernetes manifest validation results as console text, JSON or TAP",
    add_completion=False,
    rich_markup_mode="rich",
)


def display_message(message: str, message_type: MessageType = MessageType.INFO, title: str | None = None) -> None:
    """Display a formatted message panel.

    Args:
        message: The message text to display
        message_type: Type of message (affects styling)
        title: Optional panel title (defaults to message type)
    """
    color, default_title = message_type.value
    panel_title = title or default_title

    console.print(
        Panel(message, title=f"[bold {color}]{panel_title}[/bold {color}]", border_style=color, padding=(1, 2))
    )


def handle_error(error: Exception, user_message: str | None = None) -> None:
    """Handle and display errors in a user-friendly way.

    Args:
        error: The exception that occurred
        user_message: Optional user-friendly explanation
    """
    error_msg = user_message or str(error)
    display_message(error_msg, MessageType.ERROR)
    raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    version_str = metadata.version("kubereport")
    display_message(
        f"[bold cyan]kubereport[/bold cyan] version [bold green]{version_str}[/bold green]",
        MessageType.INFO,
        title="Version Information",
    )


@app.command()
def formats() -> None:
    """List the supported output formats."""
    for name in valid_outputs():
        typer.echo(name)


@app.command()
def render(
    results_file: Annotated[
        Path,
        typer.Argument(
            help="YAML or JSON file with validation results",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            envvar="KUBEREPORT_OUTPUT",
            help=f"Output format: {', '.join(valid_outputs())}",
            rich_help_panel="Output",
        ),
    ] = "stdout",
    failures_only: Annotated[
        bool,
        typer.Option(
            "--failures-only",
            "-f",
            envvar="KUBEREPORT_FAILURES_ONLY",
            help="Only report documents that failed validation",
            rich_help_panel="Output",
        ),
    ] = False,
    exit_on_failure: Annotated[
        bool,
        typer.Option(
            "--exit-on-failure/--no-exit-on-failure",
            help="Exit with status 1 when any document is invalid",
        ),
    ] = True,
) -> None:
    """Render validation results in the selected output format.

    Args:
        results_file: Path to the results file
        output: Output format name
        failures_only: Only report failed documents
        exit_on_failure: Exit non-zero when any document is invalid
    """
    try:
        config = ReportConfig(output=output, failures_only=failures_only)
    except ValidationError as e:
        handle_error(e, f"Invalid output format '{output}'. Must be one of: {', '.join(valid_outputs())}.")

    try:
        results = load_results(results_file)
        success = render_results(results, get_output_manager_for(config))
    except ReportError as e:
        handle_error(e)

    if not success and exit_on_failure:
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """kubereport - render Kubernetes manifest validation results"""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


if __name__ == "__main__":
    app()
