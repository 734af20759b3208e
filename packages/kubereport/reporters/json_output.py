"""JSON reporter for validation results."""

from __future__ import annotations

import json

from pydantic_core import PydanticSerializationError

from kubereport.reporters.base import BufferedOutputManager, SerializationError


class JSONReporter(BufferedOutputManager):
    """Buffers results and prints them as one tab-indented JSON array."""

    def render(self) -> list[str]:
        """Serialize the buffered records.

        Returns:
            A single-element list holding the JSON document.

        Raises:
            SerializationError: If the records cannot be serialized.
        """
        try:
            payload = [record.model_dump(mode="json") for record in self.records]
            document = json.dumps(payload, indent="\t", ensure_ascii=False)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"failed to serialize validation results: {e}") from e
        return [document]
