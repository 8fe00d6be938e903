from __future__ import annotations

from dataclasses import dataclass

"""FormattedDocument model: one generated task-submission TSV."""

__all__ = [
    "FormattedDocument",
]


@dataclass(frozen=True)
class FormattedDocument:
    """Text of one generated TSV and the identifiers it consumed.

    emitted_rows counts data rows only (the 3-line preamble never consumes an id).
    """
    series_code: str
    text: str
    start_id: int
    emitted_rows: int

    @property
    def next_id(self) -> int:
        return self.start_id + self.emitted_rows
