"""Export helpers for retrieval results."""

from .weather_export import (
    CSV_FILENAME,
    EXPORT_COLUMNS,
    JSON_FILENAME,
    records_to_frame,
    to_csv,
    to_json,
)

__all__ = [
    "CSV_FILENAME",
    "EXPORT_COLUMNS",
    "JSON_FILENAME",
    "records_to_frame",
    "to_csv",
    "to_json",
]
