from __future__ import annotations

import logging
from pathlib import Path

from ..models.warning_record import WarningRecord

"""Persisted warning log (logs/warning.log).

- 1 行 1 警告: `[ISO8601 UTC] message`
- 追記のみ (実行をまたいで truncate しない)
- コンソール (stderr) にも WARN ラベルでミラー出力
- ディレクトリは初回書き込み時に作成
"""

__all__ = [
    "DEFAULT_WARNING_LOG",
    "WarningLog",
]

DEFAULT_WARNING_LOG = Path("logs") / "warning.log"

logger = logging.getLogger("mtd_export")


class WarningLog:
    """Append-only warning sink shared by the loaders and the extractor.

    Records are written immediately, so a fatal error later in the run keeps
    every warning emitted before it.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else DEFAULT_WARNING_LOG
        self._records: list[WarningRecord] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def records(self) -> list[WarningRecord]:
        return list(self._records)

    def warn(self, message: str) -> WarningRecord:
        record = WarningRecord.create(message)
        logger.warning(message)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as f:
            f.write(record.to_log_line() + "\n")
        self._records.append(record)
        return record

    def __len__(self) -> int:
        return len(self._records)
