from __future__ import annotations

from ..models.run_result import GenerationResult, ScanResult

"""SUMMARY line rendering for the extract / generate commands.

generate:
    SUMMARY series={n} documents={n} rows={n} warnings={n} next_id={n} elapsed_sec={s}
extract:
    SUMMARY codes={n} lines={n} matched={n} output={path} elapsed_sec={s}
"""


def _format_seconds(value: float) -> str:
    # 整数値は小数点なし、極小値は指数表記を避ける
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_generation_summary(result: GenerationResult) -> str:
    """Render the SUMMARY line of a `generate` run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2025, 1, 1, tzinfo=timezone.utc)
        >>> r = GenerationResult(
        ...     series_count=2, documents_written=2, total_rows=9, warnings=1,
        ...     next_task_detail_id=109, start_time=t, end_time=t, elapsed_seconds=2.0,
        ... )
        >>> render_generation_summary(r)
        'SUMMARY series=2 documents=2 rows=9 warnings=1 next_id=109 elapsed_sec=2'
    """
    return (
        f"SUMMARY series={result.series_count} "
        f"documents={result.documents_written} "
        f"rows={result.total_rows} "
        f"warnings={result.warnings} "
        f"next_id={result.next_task_detail_id} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )


def render_scan_summary(result: ScanResult) -> str:
    """Render the SUMMARY line of an `extract` run."""
    return (
        f"SUMMARY codes={result.codes} "
        f"lines={result.lines_read} "
        f"matched={result.matched_rows} "
        f"output={result.output_path} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
