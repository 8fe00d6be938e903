from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ExportConfig
from ..logging.warning_log import WarningLog
from ..models.output_document import FormattedDocument
from ..models.run_result import DocumentStat, GenerationResult
from ..models.series_data import SeriesData
from ..models.warning_record import MissingLookupWarning
from ..tsv.reader import MissingInputError, read_tsv_file
from .extractor import extract_series_data
from .formatter import generate_output
from .lookups import load_brand_codes, load_category_codes
from .progress import ProgressTracker

"""Service orchestration for the `generate` command.

1. Check the required sources (language / wysiwyg) exist
2. Load brand / category lookups (missing file -> warning + empty table)
3. Extract SeriesData records (schema errors abort before anything is written)
4. Format and write one TSV per record, threading the running task_detail_id
5. Return GenerationResult for the SUMMARY line
"""

logger = logging.getLogger(__name__)


def output_file_name(prefix: str, series_code: str) -> str:
    return f"{prefix}_{series_code}.tsv"


def format_documents(
    records: list[SeriesData],
    base_task_detail_id: int,
    config: ExportConfig | None = None,
) -> list[FormattedDocument]:
    """Format records in order, each starting where the previous one stopped."""
    if config is None:
        config = ExportConfig()
    documents: list[FormattedDocument] = []
    next_id = base_task_detail_id
    for series in records:
        doc = generate_output(series, next_id, config.output)
        documents.append(doc)
        next_id = doc.next_id
    return documents


def generate_all(
    language_path: Path,
    html_path: Path,
    brand_path: Path,
    category_path: Path,
    output_dir: Path,
    config: ExportConfig | None = None,
    warning_log: WarningLog | None = None,
) -> GenerationResult:
    """Run the whole join-and-format pipeline and write the documents.

    Raises:
        MissingInputError: language or wysiwyg file missing
        SchemaError: required columns missing in any source
    """
    if config is None:
        config = ExportConfig()
    if warning_log is None:
        warning_log = WarningLog(Path(config.warning_log))
    start_time = datetime.now(UTC)

    if not language_path.exists():
        raise MissingInputError(f"Language file not found: {language_path}")
    if not html_path.exists():
        raise MissingInputError(f"WYSIWYG file not found: {html_path}")
    # m_series / m_category_series は存在しなくても続行 (loader 内で警告)

    output_dir.mkdir(parents=True, exist_ok=True)
    # 出力ディレクトリ名 ("." はそのまま)
    region = output_dir.name or str(output_dir)

    logger.info(
        "Reading data from: %s, %s, %s, and %s", language_path, html_path, brand_path, category_path
    )
    brand_lookup = load_brand_codes(brand_path, warning_log)
    category_lookup = load_category_codes(category_path, warning_log)

    def _on_missing(warning: MissingLookupWarning) -> None:
        warning_log.warn(warning.message)

    records = extract_series_data(
        read_tsv_file(language_path),
        read_tsv_file(html_path),
        brand_lookup,
        category_lookup,
        region=region,
        on_missing=_on_missing,
        default_brand_code=config.default_brand_code,
        default_category_code=config.default_category_code,
    )
    logger.info("Found %d series", len(records))

    documents = format_documents(records, config.base_task_detail_id, config)

    stats: list[DocumentStat] = []
    total_rows = 0
    with ProgressTracker(len(documents)) as progress:
        for series, doc in zip(records, documents):
            progress.start(series.series_code)
            file_name = output_file_name(config.file_prefix, series.series_code)
            out_path = output_dir / file_name
            out_path.write_text(doc.text, encoding="utf-8")
            logger.info("Generated: %s (with %d HTML entries)", out_path, len(series.html_list))
            total_rows += doc.emitted_rows
            stats.append(
                DocumentStat(
                    file_name=file_name,
                    series_code=series.series_code,
                    start_id=doc.start_id,
                    emitted_rows=doc.emitted_rows,
                    html_rows=len(series.html_list),
                )
            )
            progress.set_postfix(rows=total_rows)
            progress.finish()

    next_id = documents[-1].next_id if documents else config.base_task_detail_id
    end_time = datetime.now(UTC)
    return GenerationResult(
        series_count=len(records),
        documents_written=len(stats),
        total_rows=total_rows,
        warnings=len(warning_log),
        next_task_detail_id=next_id,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        document_stats=stats,
    )
