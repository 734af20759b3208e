"""Validation result types and status classification."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class ValidationStatus(Enum):
    """Outcome of validating a single document."""

    VALID = "valid"
    INVALID = "invalid"
    SKIPPED = "skipped"


class SchemaError(BaseModel):
    """A single schema violation reported by the validation engine."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    field: str = ""
    description: str

    def __str__(self) -> str:
        if not self.field:
            return self.description
        return f"{self.field}: {self.description}"


class ValidationResult(BaseModel):
    """Result of validating one document against its schema.

    Attributes:
        filename: Source document the result belongs to
        kind: Resource kind, empty when the document has no recognizable type
        api_version: Resource apiVersion
        resource_name: metadata.name of the resource
        resource_namespace: metadata.namespace of the resource
        validated_against_schema: Whether a schema was found and applied
        errors: Validation errors, in the order the engine reported them
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    filename: str
    kind: str = ""
    api_version: str = ""
    resource_name: str = ""
    resource_namespace: str = ""
    validated_against_schema: bool = False
    errors: tuple[SchemaError | str, ...] = ()

    @property
    def qualified_name(self) -> str:
        """Resource name, prefixed with its namespace when one is set."""
        if not self.resource_name:
            return "unknown"
        if not self.resource_namespace:
            return self.resource_name
        return f"{self.resource_namespace}.{self.resource_name}"

    @property
    def error_messages(self) -> list[str]:
        """Errors rendered as display strings."""
        return [str(error) for error in self.errors]


def get_status(result: ValidationResult) -> ValidationStatus:
    """Classify a validation result.

    Empty documents and documents without a schema are skipped even when
    errors were recorded for them.

    Args:
        result: Validation result to classify

    Returns:
        The status of the result
    """
    if result.kind == "":
        return ValidationStatus.SKIPPED
    if not result.validated_against_schema:
        return ValidationStatus.SKIPPED
    if len(result.errors) > 0:
        return ValidationStatus.INVALID
    return ValidationStatus.VALID
