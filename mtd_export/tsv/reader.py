from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

"""TSV reader for master-data dumps.

- 1行目をヘッダ行、2行目以降をデータ行として扱う。
- 列数の検証は行わない (短い行の欠落フィールドは空文字として参照される)。
- 列名 -> 位置の解決は ColumnSchema で 1 回だけ行い、必須列の欠落は SchemaError。

pandas は inspect 用のプレビュー (to_frame) のみで利用する。
"""

__all__ = [
    "ABSENT",
    "ColumnSchema",
    "EmptyInputError",
    "ExportError",
    "MissingInputError",
    "SchemaError",
    "TsvTable",
    "read_tsv",
    "read_tsv_file",
    "to_frame",
]


class ExportError(Exception):
    """Base class for fatal input errors."""


class MissingInputError(ExportError):
    """Raised when a required input file does not exist."""


class EmptyInputError(ExportError):
    """Raised when an input file exists but holds no usable entries."""


class SchemaError(ExportError):
    """Raised when required columns are missing from a header row."""


# 列が存在しないことを示すマーカー (空文字の列とは区別する)
ABSENT = None


@dataclass(frozen=True)
class TsvTable:
    source: str
    header: list[str]
    rows: list[list[str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


def read_tsv(text: str, source: str = "<memory>") -> TsvTable:
    """Parse raw TSV text into a header and data rows.

    A single trailing blank line (left by a trailing newline) is discarded.
    Only a trailing CR is removed from each line; cell values (including a
    trailing full-width space) are kept as-is.
    """
    lines = text.split("\n")
    if lines and lines[-1].strip() == "":
        lines = lines[:-1]
    parsed = [line.removesuffix("\r").split("\t") for line in lines]
    if not parsed:
        return TsvTable(source=source, header=[], rows=[])
    return TsvTable(source=source, header=parsed[0], rows=parsed[1:])


def read_tsv_file(path: Path) -> TsvTable:
    if not path.exists():
        raise MissingInputError(f"input file not found: {path}")
    return read_tsv(path.read_text(encoding="utf-8"), source=path.name)


@dataclass(frozen=True)
class ColumnSchema:
    """Column name -> position mapping resolved once from a header row.

    Required columns always resolve to an index. Optional columns that are not
    in the header resolve to ``ABSENT`` and read as ``""`` for every row.
    """
    source: str
    positions: dict[str, int | None]

    @classmethod
    def resolve(
        cls,
        header: Sequence[str],
        required: Iterable[str],
        optional: Iterable[str] = (),
        source: str = "<memory>",
    ) -> ColumnSchema:
        required = list(required)
        index = {}
        for pos, name in enumerate(header):
            # 重複列名は先頭優先
            index.setdefault(name.strip(), pos)
        missing = [c for c in required if c not in index]
        if missing:
            raise SchemaError(
                f"Required columns ({', '.join(required)}) not found in {source}: missing {missing}"
            )
        positions: dict[str, int | None] = {c: index[c] for c in required}
        for c in optional:
            positions[c] = index.get(c, ABSENT)
        return cls(source=source, positions=positions)

    def has(self, name: str) -> bool:
        return self.positions.get(name, ABSENT) is not ABSENT

    def get(self, row: Sequence[str], name: str) -> str:
        if name not in self.positions:
            raise KeyError(f"column '{name}' was not resolved for {self.source}")
        pos = self.positions[name]
        if pos is ABSENT or pos >= len(row):
            return ""
        return row[pos]


def to_frame(table: TsvTable) -> pd.DataFrame:
    """Build an all-string DataFrame for previewing a table.

    Rows are padded / truncated to the header width.
    """
    width = len(table.header)
    data = [(row + [""] * width)[:width] for row in table.rows]
    return pd.DataFrame(data, columns=table.header, dtype=str)
