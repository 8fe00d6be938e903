from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Run result models for the extract / generate commands.

GenerationResult feeds the SUMMARY line of `generate`, ScanResult the one of
`extract`.
"""


@dataclass(frozen=True)
class DocumentStat:
    """Per-document statistics (one generated TSV)."""
    file_name: str
    series_code: str
    start_id: int
    emitted_rows: int
    html_rows: int


@dataclass(frozen=True)
class GenerationResult:
    """Aggregated result of one `generate` run."""
    series_count: int  # 抽出された SeriesData 件数
    documents_written: int
    total_rows: int  # 全ドキュメントの出力データ行数
    warnings: int  # lookup 欠落 + lookup ファイル欠落
    next_task_detail_id: int  # 次回実行で使える task_detail_id
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    document_stats: list[DocumentStat] | None = None


@dataclass(frozen=True)
class ScanResult:
    """Result of one `extract` (filter scanner) run."""
    input_path: Path
    output_path: Path
    codes: int  # whitelist 件数
    lines_read: int  # ヘッダ含む
    matched_rows: int
    elapsed_seconds: float = 0.0
