from __future__ import annotations

import logging
import time
from pathlib import Path

from ..models.run_result import ScanResult
from ..tsv.reader import EmptyInputError, MissingInputError

"""Filter scanner: copy whitelisted series rows out of a large TSV.

The input is streamed line by line and matches are written as they are found,
so the whole dump never sits in memory. Line 1 (header) is always copied.
"""

__all__ = [
    "extract_series",
    "load_series_codes",
]

logger = logging.getLogger(__name__)


def load_series_codes(path: Path) -> list[str]:
    """Read the series-code whitelist (one code per line).

    Lines are trimmed and blank lines dropped; order is preserved.

    Raises:
        MissingInputError: file does not exist
        EmptyInputError: no code left after trimming
    """
    if not path.exists():
        raise MissingInputError(f"Series codes file not found: {path}")
    content = path.read_text(encoding="utf-8")
    codes = [line.strip() for line in content.split("\n")]
    codes = [c for c in codes if c]
    if not codes:
        raise EmptyInputError(f"No series codes found in file: {path}")
    return codes


def extract_series(input_path: Path, output_path: Path, codes_path: Path) -> ScanResult:
    """Copy the header and every row whose first column is a whitelisted code.

    Rows keep their original order; nothing is reordered or deduplicated.
    """
    start = time.perf_counter()
    codes = load_series_codes(codes_path)
    logger.info("Loading %d series codes from %s...", len(codes), codes_path)
    if not input_path.exists():
        raise MissingInputError(f"input file not found: {input_path}")

    targets = set(codes)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    lines_read = 0
    matched = 0
    with input_path.open("r", encoding="utf-8") as src, output_path.open("w", encoding="utf-8") as dst:
        for raw in src:
            line = raw.rstrip("\r\n")
            lines_read += 1
            if lines_read == 1:
                dst.write(line + "\n")
                continue
            series_code = line.split("\t", 1)[0]
            if series_code in targets:
                dst.write(line + "\n")
                matched += 1
                logger.debug("Found: %s", series_code)

    logger.info("Total matches: %d", matched)
    logger.info("Output written to: %s", output_path)
    return ScanResult(
        input_path=input_path,
        output_path=output_path,
        codes=len(codes),
        lines_read=lines_read,
        matched_rows=matched,
        elapsed_seconds=time.perf_counter() - start,
    )
