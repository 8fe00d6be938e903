from __future__ import annotations

import logging
from pathlib import Path

from ..logging.warning_log import WarningLog
from ..models.lookup import LookupTable
from ..tsv.reader import ColumnSchema, read_tsv_file

"""Lookup loaders for the auxiliary master tables.

- m_series.tsv           : series_code -> brand_code
- m_category_series.tsv  : series_code -> category_code (delete_flag=1 の行は無視)

File missing  -> warning + empty table (every series falls back to the default)
Column missing -> SchemaError (present but malformed, cannot be defaulted)
"""

__all__ = [
    "load_brand_codes",
    "load_category_codes",
]

logger = logging.getLogger(__name__)

DELETED = "1"


def _load_lookup(
    path: Path,
    value_column: str,
    label: str,
    kind: str,
    warning_log: WarningLog | None,
    honour_delete_flag: bool = False,
) -> LookupTable:
    table = LookupTable(name=value_column)
    if not path.exists():
        message = f"Warning: {label} file not found: {path}. Proceeding with empty {kind}."
        if warning_log is not None:
            warning_log.warn(message)
        else:
            logger.warning(message)
        return table

    tsv = read_tsv_file(path)
    optional = ["delete_flag"] if honour_delete_flag else []
    schema = ColumnSchema.resolve(
        tsv.header, ["series_code", value_column], optional, source=f"{label} file ({path})"
    )
    for row in tsv.rows:
        # delete_flag 列が無い場合は全行 "0" (有効) 扱い
        if honour_delete_flag and schema.get(row, "delete_flag") == DELETED:
            continue
        table.put(schema.get(row, "series_code"), schema.get(row, value_column))
    logger.debug("loaded %s entries=%d from %s", value_column, len(table), path)
    return table


def load_brand_codes(path: Path, warning_log: WarningLog | None = None) -> LookupTable:
    """Load series_code -> brand_code from an m_series dump."""
    return _load_lookup(path, "brand_code", "m_series", "brand codes", warning_log)


def load_category_codes(path: Path, warning_log: WarningLog | None = None) -> LookupTable:
    """Load series_code -> category_code from an m_category_series dump.

    Rows flagged delete_flag == "1" are never inserted, so an active row for
    the same key wins regardless of row order.
    """
    return _load_lookup(
        path,
        "category_code",
        "m_category_series",
        "category codes",
        warning_log,
        honour_delete_flag=True,
    )
