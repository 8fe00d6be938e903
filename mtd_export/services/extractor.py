from __future__ import annotations

import logging
from collections.abc import Callable

from ..models.lookup import Found, LookupResult, LookupTable
from ..models.series_data import DEFAULT_BRAND_CODE, DEFAULT_CATEGORY_CODE, SeriesData
from ..models.warning_record import MissingLookupWarning
from ..tsv.reader import ColumnSchema, TsvTable

"""Series data extractor.

Joins the language table (one row per series) with the WYSIWYG html table
(0..n rows per series) and the brand / category lookups into SeriesData
records, in language-table row order.
"""

__all__ = [
    "LANGUAGE_REQUIRED",
    "NOTICE_COLUMNS",
    "HTML_REQUIRED",
    "build_html_map",
    "extract_series_data",
    "resolve_with_default",
]

logger = logging.getLogger(__name__)

LANGUAGE_REQUIRED = ("series_code", "series_name", "catchcopy")
NOTICE_COLUMNS = tuple(f"series_notice_top_{i}" for i in range(1, 6))
HTML_REQUIRED = ("series_code", "html")

OnMissing = Callable[[MissingLookupWarning], None]


def _log_missing(warning: MissingLookupWarning) -> None:
    logger.warning(warning.message)


def resolve_with_default(
    result: LookupResult,
    default: str,
    warning: MissingLookupWarning,
    on_missing: OnMissing,
) -> str:
    """Apply the default-value policy to a lookup result.

    Found -> its value. Missing -> on_missing(warning) once, then the default.
    """
    if isinstance(result, Found):
        return result.value
    on_missing(warning)
    return default


def build_html_map(html: TsvTable) -> dict[str, list[str]]:
    """series_code -> html fragments in source order (duplicates kept).

    Rows with an empty series_code or html cell are skipped.
    """
    schema = ColumnSchema.resolve(html.header, HTML_REQUIRED, source=f"wysiwyg file ({html.source})")
    html_map: dict[str, list[str]] = {}
    for row in html.rows:
        code = schema.get(row, "series_code")
        fragment = schema.get(row, "html")
        if code and fragment:
            html_map.setdefault(code, []).append(fragment)
    return html_map


def extract_series_data(
    language: TsvTable,
    html: TsvTable,
    brand_lookup: LookupTable,
    category_lookup: LookupTable | None = None,
    region: str = "",
    on_missing: OnMissing | None = None,
    default_brand_code: str = DEFAULT_BRAND_CODE,
    default_category_code: str = DEFAULT_CATEGORY_CODE,
) -> list[SeriesData]:
    """Join language + html + lookups into SeriesData records.

    Args:
        language: language/content table (series_code, series_name, catchcopy,
            optional series_notice_top_1..5)
        html: WYSIWYG table (series_code, html)
        brand_lookup: series_code -> brand_code
        category_lookup: series_code -> category_code (None behaves as empty)
        region: label used in missing-lookup warnings
        on_missing: receives one MissingLookupWarning per miss (default: log it)

    Returns:
        One SeriesData per language row with non-empty series_code and
        series_name. Series codes are not deduplicated.

    Raises:
        SchemaError: required columns missing in either table
    """
    schema = ColumnSchema.resolve(
        language.header,
        LANGUAGE_REQUIRED,
        NOTICE_COLUMNS,
        source=f"language file ({language.source})",
    )
    html_map = build_html_map(html)
    if category_lookup is None:
        category_lookup = LookupTable(name="category_code")
    if on_missing is None:
        on_missing = _log_missing

    records: list[SeriesData] = []
    for row in language.rows:
        code = schema.get(row, "series_code")
        name = schema.get(row, "series_name")
        if not (code and name):
            continue

        brand_code = resolve_with_default(
            brand_lookup.lookup(code),
            default_brand_code,
            MissingLookupWarning(code, "Brand code", region),
            on_missing,
        )
        category_code = resolve_with_default(
            category_lookup.lookup(code),
            default_category_code,
            MissingLookupWarning(code, "Category code", region),
            on_missing,
        )
        notices = [schema.get(row, c) for c in NOTICE_COLUMNS]
        records.append(
            SeriesData(
                series_code=code,
                series_name=name,
                catchcopy=schema.get(row, "catchcopy"),
                series_notice_top_1=notices[0],
                series_notice_top_2=notices[1],
                series_notice_top_3=notices[2],
                series_notice_top_4=notices[3],
                series_notice_top_5=notices[4],
                html_list=tuple(html_map.get(code, ())),
                brand_code=brand_code,
                category_code=category_code,
            )
        )
    logger.debug("extracted series=%d html_keys=%d", len(records), len(html_map))
    return records
