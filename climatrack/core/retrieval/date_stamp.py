"""
DateStamp helpers.

NASA POWER identifies days with 8-digit ``YYYYMMDD`` strings, both in the
``start``/``end`` query parameters and as keys of every parameter series.
Lexicographic order of valid stamps matches calendar order.
"""

from datetime import date, datetime, timedelta

from loguru import logger

DATE_STAMP_FORMAT = "%Y%m%d"


def parse_date_stamp(value: str) -> date:
    """
    Convert ``YYYYMMDD`` into a ``date``.

    Raises:
        ValueError: If the value is not 8 digits or not a real calendar day
    """
    if not isinstance(value, str) or len(value) != 8 or not value.isdigit():
        raise ValueError(f"Invalid date '{value}': use YYYYMMDD")
    try:
        return datetime.strptime(value, DATE_STAMP_FORMAT).date()
    except ValueError as e:
        logger.bind(date_stamp=value).debug(f"Unparseable date stamp: {e}")
        raise ValueError(f"Invalid date '{value}': use YYYYMMDD") from e


def format_date_stamp(day: date) -> str:
    """Convert a ``date`` into ``YYYYMMDD``."""
    return day.strftime(DATE_STAMP_FORMAT)


def previous_day(value: str) -> str:
    """
    Return the stamp of the calendar day before ``value``.

    Month, year and leap-day boundaries are handled by ``date`` arithmetic:
        20240301 -> 20240229
        20230301 -> 20230228
        20240101 -> 20231231
    """
    return format_date_stamp(parse_date_stamp(value) - timedelta(days=1))
