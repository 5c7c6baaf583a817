"""
Validity-checked NASA POWER retrieval with day-stepping fallback.

Pipeline:
    WeatherRetrievalService.retrieve
        -> FallbackResolver.resolve (single day) / fetch_range (range)
        -> is_usable
        -> normalize
"""

from .date_stamp import format_date_stamp, parse_date_stamp, previous_day
from .errors import InvalidParameter, MissingParameter, RetrievalError
from .fallback_resolver import DEFAULT_MAX_STEPS, FallbackResolver
from .normalizer import normalize
from .observations import (
    SENTINEL_VALUE,
    Coordinate,
    DailyRecord,
    RawObservationSet,
    RetrievalResult,
)
from .outcomes import (
    FetchOk,
    NoUsableData,
    Resolved,
    UpstreamFormatError,
    UpstreamUnavailable,
)
from .retrieval_service import RetrievalQuery, WeatherRetrievalService
from .validity import is_usable, usable_dates

__all__ = [
    "DEFAULT_MAX_STEPS",
    "SENTINEL_VALUE",
    "Coordinate",
    "DailyRecord",
    "FallbackResolver",
    "FetchOk",
    "InvalidParameter",
    "MissingParameter",
    "NoUsableData",
    "RawObservationSet",
    "Resolved",
    "RetrievalError",
    "RetrievalQuery",
    "RetrievalResult",
    "UpstreamFormatError",
    "UpstreamUnavailable",
    "WeatherRetrievalService",
    "format_date_stamp",
    "is_usable",
    "normalize",
    "parse_date_stamp",
    "previous_day",
    "usable_dates",
]
