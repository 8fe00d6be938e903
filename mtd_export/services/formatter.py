from __future__ import annotations

from ..config.loader import OutputSettings
from ..models.output_document import FormattedDocument
from ..models.series_data import SeriesData

"""Task-submission TSV formatter.

Document layout (tab separated, "\\n" joined, no trailing newline):

    1: control header        (CONTROL_HEADER)
    2: metadata row          (anken_id ... translate_status)
    3: task detail header    (DETAIL_HEADER)
    4+: one task detail row per non-empty field, then one per html fragment

Only emitted rows consume a task_detail_id / record_seq.
"""

__all__ = [
    "CONTROL_HEADER",
    "DETAIL_HEADER",
    "ADDITIONAL_ITEM",
    "generate_output",
]

CONTROL_HEADER = (
    "anken_id",
    "duplication_manage_id",
    "department_code",
    "category_code",
    "brand_code",
    "from_subsidiary_code",
    "from_language_code",
    "to_subsidiary_code",
    "to_language_code",
    "translate_status",
)

DETAIL_HEADER = (
    "task_detail_id",
    "record_seq",
    "series_code",
    "additional_item",
    "reference_url",
    "item_name",
    "from_value",
    "to_value",
)

ADDITIONAL_ITEM = "種類"
SERIES_NAME_LABEL = "シリーズ名称"
CATCHCOPY_LABEL = "キャッチコピー"
NOTICE_LABELS = tuple(f"商品注意案内文{i}" for i in range(1, 6))
HTML_LABEL = "HTML"


def _candidate_rows(series: SeriesData) -> list[tuple[str, str]]:
    # (item_name, from_value) 候補。空値は出力しない (html は空チェックなし)
    fields = [(SERIES_NAME_LABEL, series.series_name), (CATCHCOPY_LABEL, series.catchcopy)]
    fields += list(zip(NOTICE_LABELS, series.notices))
    rows = [(label, value) for label, value in fields if value]
    rows += [(HTML_LABEL, html) for html in series.html_list]
    return rows


def generate_output(
    series: SeriesData,
    start_id: int,
    settings: OutputSettings | None = None,
) -> FormattedDocument:
    """Render one SeriesData into a task-submission TSV document.

    Args:
        series: record to render
        start_id: task_detail_id of the first emitted data row
        settings: metadata constants / reference URL template

    Returns:
        FormattedDocument; callers advance their running id by ``emitted_rows``
        (equivalently continue from ``next_id``).
    """
    if settings is None:
        settings = OutputSettings()

    meta = (
        settings.anken_id,
        settings.duplication_manage_id,
        settings.department_code,
        series.category_code,
        series.brand_code,
        settings.from_subsidiary_code,
        settings.from_language_code,
        settings.to_subsidiary_code,
        settings.to_language_code,
        settings.translate_status,
    )
    lines = ["\t".join(CONTROL_HEADER), "\t".join(meta), "\t".join(DETAIL_HEADER)]

    reference_url = settings.reference_url(series.series_code)
    rows = _candidate_rows(series)
    for seq, (item_name, value) in enumerate(rows, start=1):
        task_detail_id = start_id + seq - 1
        lines.append(
            "\t".join(
                [
                    str(task_detail_id),
                    str(seq),
                    series.series_code,
                    ADDITIONAL_ITEM,
                    reference_url,
                    item_name,
                    value,
                    "",
                ]
            )
        )

    return FormattedDocument(
        series_code=series.series_code,
        text="\n".join(lines),
        start_id=start_id,
        emitted_rows=len(rows),
    )
