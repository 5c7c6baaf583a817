"""Reshape per-parameter series into per-day records."""

from loguru import logger

from .observations import DailyRecord, RawObservationSet


def normalize(observations: RawObservationSet) -> list[DailyRecord]:
    """
    Build one DailyRecord per date of the temperature series.

    Precipitation and wind speed missing for a date become None. Values
    are not converted, so sentinels reach the caller unchanged. Records
    are sorted by date instead of trusting the payload key order.
    """
    temperature = observations.temperature or {}
    precipitation = observations.precipitation or {}
    wind_speed = observations.wind_speed or {}

    records = [
        DailyRecord(
            date=day,
            temperature=temperature[day],
            precipitation=precipitation.get(day),
            wind_speed=wind_speed.get(day),
        )
        for day in sorted(temperature)
    ]

    logger.debug(f"Normalized {len(records)} daily records")
    return records
