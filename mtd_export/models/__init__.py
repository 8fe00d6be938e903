"""Domain models for the series TSV filter / task-submission generator."""

from .lookup import MISSING, Found, LookupResult, LookupTable, Missing
from .output_document import FormattedDocument
from .run_result import DocumentStat, GenerationResult, ScanResult
from .series_data import DEFAULT_BRAND_CODE, DEFAULT_CATEGORY_CODE, SeriesData
from .warning_record import MissingLookupWarning, WarningRecord

__all__ = [
    # Core entities
    "SeriesData",
    "DEFAULT_BRAND_CODE",
    "DEFAULT_CATEGORY_CODE",
    "FormattedDocument",
    # Lookups
    "LookupTable",
    "LookupResult",
    "Found",
    "Missing",
    "MISSING",
    # Results / warnings
    "DocumentStat",
    "GenerationResult",
    "ScanResult",
    "MissingLookupWarning",
    "WarningRecord",
]
