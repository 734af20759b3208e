"""Tests for results loading and render orchestration."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import CapturingSink
from pytest_mock import MockerFixture

from kubereport.report import ResultsFileError, load_results, render_results
from kubereport.reporters import TAPReporter
from kubereport.results import SchemaError, ValidationResult

RESULTS_YAML = """\
- filename: a.yaml
  kind: Pod
  resource_name: web
  resource_namespace: prod
  validated_against_schema: true
- filename: c.yaml
  kind: Deployment
  validated_against_schema: true
  errors:
    - field: spec.replicas
      description: Invalid type
    - plain error
"""


class TestLoadResults:
    """Test suite for load_results()."""

    def test_loads_list(self, tmp_path: Path) -> None:
        """Test loading a YAML list of results."""
        path = tmp_path / "results.yaml"
        path.write_text(RESULTS_YAML)

        results = load_results(path)

        assert [r.filename for r in results] == ["a.yaml", "c.yaml"]
        assert results[0].qualified_name == "prod.web"
        assert results[1].errors == (SchemaError(field="spec.replicas", description="Invalid type"), "plain error")

    def test_loads_results_mapping(self, tmp_path: Path) -> None:
        """Test loading a JSON document with a results key."""
        path = tmp_path / "results.json"
        path.write_text('{"results": [{"filename": "a.yaml", "kind": "Pod", "validated_against_schema": true}]}')

        results = load_results(path)

        assert results == [ValidationResult(filename="a.yaml", kind="Pod", validated_against_schema=True)]

    def test_mapping_without_results_key(self, tmp_path: Path) -> None:
        """Test that a lone result mapping is rejected instead of read as empty.

        Tests: load_results() mapping shape check
        How: Single invalid result written as a top-level mapping
        """
        path = tmp_path / "results.yaml"
        path.write_text("filename: a.yaml\nkind: Pod\nvalidated_against_schema: true\nerrors: [boom]\n")

        with pytest.raises(ResultsFileError, match="must have a 'results' list"):
            load_results(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file holds no results."""
        path = tmp_path / "results.yaml"
        path.write_text("")

        assert load_results(path) == []

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that YAML syntax errors raise ResultsFileError."""
        path = tmp_path / "results.yaml"
        path.write_text("- filename: [unclosed\n")

        with pytest.raises(ResultsFileError, match="Invalid YAML"):
            load_results(path)

    def test_wrong_shape(self, tmp_path: Path) -> None:
        """Test that a scalar document is rejected."""
        path = tmp_path / "results.yaml"
        path.write_text("just a string\n")

        with pytest.raises(ResultsFileError, match="must contain a list"):
            load_results(path)

    def test_missing_filename(self, tmp_path: Path) -> None:
        """Test that entries without a filename are rejected."""
        path = tmp_path / "results.yaml"
        path.write_text("- kind: Pod\n")

        with pytest.raises(ResultsFileError, match="Invalid validation result"):
            load_results(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that unreadable files raise ResultsFileError."""
        with pytest.raises(ResultsFileError, match="Cannot read"):
            load_results(tmp_path / "missing.yaml")


class TestRenderResults:
    """Test suite for render_results()."""

    def test_puts_in_order_then_flushes_once(
        self, mocker: MockerFixture, valid_pod: ValidationResult, empty_document: ValidationResult
    ) -> None:
        """Test the put/flush call sequence.

        Tests: render_results() drives the manager
        How: Mock manager and inspect recorded calls
        """
        manager = mocker.MagicMock()

        success = render_results([valid_pod, empty_document], manager)

        assert success is True
        assert manager.method_calls == [
            mocker.call.put(valid_pod),
            mocker.call.put(empty_document),
            mocker.call.flush(),
        ]

    def test_invalid_result_fails(
        self, sink: CapturingSink, valid_pod: ValidationResult, invalid_deployment: ValidationResult
    ) -> None:
        """Test that an invalid result makes the run unsuccessful."""
        success = render_results([valid_pod, invalid_deployment], TAPReporter(sink))

        assert success is False
        assert sink.lines == ["1..1", "ok 1 - a.yaml (Pod)"]

    def test_skipped_results_do_not_fail(
        self, sink: CapturingSink, empty_document: ValidationResult, unvalidated_service: ValidationResult
    ) -> None:
        """Test that skipped results count as success."""
        assert render_results([empty_document, unvalidated_service], TAPReporter(sink)) is True
