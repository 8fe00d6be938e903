from __future__ import annotations

from dataclasses import dataclass, field

"""SeriesData model for the task-submission TSV generator.

One SeriesData is built per qualifying row of the language table by joining it
with the WYSIWYG (html) table and the brand / category lookup tables.
"""

__all__ = [
    "DEFAULT_BRAND_CODE",
    "DEFAULT_CATEGORY_CODE",
    "SeriesData",
]

DEFAULT_BRAND_CODE = "MSM1"
DEFAULT_CATEGORY_CODE = "M1803060000"


@dataclass(frozen=True)
class SeriesData:
    """Aggregated record for one series code.

    series_code / series_name are always non-empty. Other text fields are ""
    when the source column is absent or the cell is empty.
    """
    series_code: str
    series_name: str
    catchcopy: str = ""
    series_notice_top_1: str = ""
    series_notice_top_2: str = ""
    series_notice_top_3: str = ""
    series_notice_top_4: str = ""
    series_notice_top_5: str = ""
    html_list: tuple[str, ...] = field(default_factory=tuple)  # wysiwyg 行順, 重複保持
    brand_code: str = DEFAULT_BRAND_CODE
    category_code: str = DEFAULT_CATEGORY_CODE

    @property
    def notices(self) -> tuple[str, str, str, str, str]:
        return (
            self.series_notice_top_1,
            self.series_notice_top_2,
            self.series_notice_top_3,
            self.series_notice_top_4,
            self.series_notice_top_5,
        )
