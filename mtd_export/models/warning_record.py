from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

"""Warning records for the persisted warning log.

MissingLookupWarning is the non-fatal outcome of a lookup miss (brand / category).
WarningRecord is one timestamped line of logs/warning.log:

    [2025-09-17T03:04:05.123Z] Warning: Brand code not found for series: S1 (Region: mtd)
"""

__all__ = [
    "MissingLookupWarning",
    "WarningRecord",
]


@dataclass(frozen=True)
class MissingLookupWarning:
    """A series code with no entry in a lookup table.

    Attributes:
        series_code: Series code that was looked up
        field: Human readable lookup name ("Brand code" / "Category code")
        region: Region label of the run (output directory name)
    """
    series_code: str
    field: str
    region: str

    @property
    def message(self) -> str:
        return f"Warning: {self.field} not found for series: {self.series_code} (Region: {self.region})"


@dataclass(frozen=True)
class WarningRecord:
    timestamp: str  # ISO8601 UTC
    message: str

    @staticmethod
    def create(message: str) -> WarningRecord:
        """Create a new WarningRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return WarningRecord(timestamp=ts, message=message)

    def to_log_line(self) -> str:
        return f"[{self.timestamp}] {self.message}"
