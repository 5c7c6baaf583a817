"""
CSV / JSON export of daily records.

The CSV mirrors the public JSON keys (date, temperature, precipitation,
windSpeed). Missing values are written as empty cells; sentinels are
kept so the file matches what NASA POWER delivered.
"""

import json
from typing import Any

import pandas as pd
from loguru import logger

from climatrack.core.retrieval.observations import DailyRecord

EXPORT_COLUMNS = ["date", "temperature", "precipitation", "windSpeed"]

CSV_FILENAME = "weather_data.csv"
JSON_FILENAME = "weather_data.json"


def records_to_frame(records: list[DailyRecord]) -> pd.DataFrame:
    """DataFrame with one row per day, in record order."""
    rows = [record.model_dump(by_alias=True) for record in records]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    df["date"] = df["date"].astype(str)
    return df


def to_csv(records: list[DailyRecord]) -> str:
    df = records_to_frame(records)
    logger.info(f"Exporting {len(df)} rows as CSV")
    return df.to_csv(index=False, na_rep="", lineterminator="\n")


def to_json(payload: dict[str, Any]) -> str:
    """Pretty-printed copy of an API response body."""
    return json.dumps(payload, indent=2, ensure_ascii=False)
