"""TAP (Test Anything Protocol) reporter for validation results."""

from __future__ import annotations

from kubereport.reporters.base import BufferedOutputManager
from kubereport.results import ValidationStatus


class TAPReporter(BufferedOutputManager):
    """Buffers results and prints them as a TAP stream.

    Every error of an invalid record is its own test line; valid and
    skipped records take one line each.
    """

    def render(self) -> list[str]:
        """Format the buffered records as TAP lines.

        Returns:
            Plan line followed by one line per test, or no lines at all
            when nothing was buffered.
        """
        if not self.records:
            return []

        total = sum(len(record.errors) or 1 for record in self.records)
        lines = [f"1..{total}"]

        count = 0
        for record in self.records:
            count += 1
            kind_marker = f" ({record.kind})" if record.kind else ""
            match record.status:
                case ValidationStatus.VALID:
                    lines.append(f"ok {count} - {record.filename}{kind_marker}")
                case ValidationStatus.SKIPPED:
                    lines.append(f"ok {count} - {record.filename}{kind_marker} # SKIP")
                case ValidationStatus.INVALID:
                    for i, error in enumerate(record.errors):
                        lines.append(f"not ok {count} - {record.filename}{kind_marker} - {error}")
                        # the next record's increment covers the last error
                        if i + 1 != len(record.errors):
                            count += 1
        return lines
