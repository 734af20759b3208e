"""Loading validation results and rendering them through an output manager."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from kubereport.reporters.base import OutputManager, ReportError
from kubereport.results import ValidationResult, ValidationStatus, get_status

_results_adapter: TypeAdapter[list[ValidationResult]] = TypeAdapter(list[ValidationResult])


class ResultsFileError(ReportError):
    """Results file could not be read or has an unexpected shape."""

    pass


def load_results(path: Path) -> list[ValidationResult]:
    """Load validation results from a YAML or JSON file.

    The file holds either a list of result mappings or a mapping with a
    ``results`` list.

    Args:
        path: Path to the results file

    Returns:
        Validation results in file order (empty for an empty file)

    Raises:
        ResultsFileError: If the file cannot be read, parsed or validated
    """
    yaml = YAML(typ="safe")
    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.load(content)
    except OSError as e:
        raise ResultsFileError(f"Cannot read results file {path}: {e}") from e
    except YAMLError as e:
        raise ResultsFileError(f"Invalid YAML in results file {path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        if "results" not in data:
            raise ResultsFileError(f"Results mapping must have a 'results' list: {path}")
        data = data["results"]
    if not isinstance(data, list):
        raise ResultsFileError(f"Results file must contain a list of validation results: {path}")

    try:
        return _results_adapter.validate_python(data)
    except ValidationError as e:
        raise ResultsFileError(f"Invalid validation result in {path}: {e}") from e


def render_results(results: Iterable[ValidationResult], manager: OutputManager) -> bool:
    """Feed results to an output manager and flush it.

    Args:
        results: Validation results in processing order
        manager: Output manager to report through

    Returns:
        True if no result was invalid, False otherwise
    """
    success = True
    for result in results:
        manager.put(result)
        if get_status(result) == ValidationStatus.INVALID:
            success = False
    manager.flush()
    return success
