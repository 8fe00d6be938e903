from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

from mtd_export.models.run_result import GenerationResult, ScanResult
from mtd_export.services.summary import render_generation_summary, render_scan_summary

GENERATION_PATTERN = re.compile(
    r"^SUMMARY series=(\d+) documents=(\d+) rows=(\d+) warnings=(\d+) next_id=(\d+) elapsed_sec=([0-9.]+)$"
)


def _result(elapsed: float) -> GenerationResult:
    t = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return GenerationResult(
        series_count=3,
        documents_written=3,
        total_rows=12,
        warnings=2,
        next_task_detail_id=112,
        start_time=t,
        end_time=t,
        elapsed_seconds=elapsed,
    )


def test_generation_summary_integer_elapsed():
    line = render_generation_summary(_result(2.0))
    m = GENERATION_PATTERN.match(line)
    assert m, line
    assert m.groups() == ("3", "3", "12", "2", "112", "2")


def test_generation_summary_small_elapsed_no_scientific_notation():
    line = render_generation_summary(_result(0.000123))
    assert "e-" not in line
    assert line.endswith("elapsed_sec=0.000123")


def test_generation_summary_zero_elapsed():
    assert render_generation_summary(_result(0)).endswith("elapsed_sec=0")


def test_scan_summary():
    r = ScanResult(
        input_path=Path("in.tsv"),
        output_path=Path("out.tsv"),
        codes=2,
        lines_read=5,
        matched_rows=2,
        elapsed_seconds=1.5,
    )
    assert render_scan_summary(r) == "SUMMARY codes=2 lines=5 matched=2 output=out.tsv elapsed_sec=1.5"
