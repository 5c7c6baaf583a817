"""
Usability check for NASA POWER payloads.

NASA POWER answers 200 with ``-999`` placeholders when it has nothing for
a day/location, so success is judged on the temperature series content.
"""

from .observations import SENTINEL_VALUE, RawObservationSet


def _is_observed(value: float | None, sentinel: float) -> bool:
    return value is not None and value != sentinel


def usable_dates(
    observations: RawObservationSet, sentinel: float = SENTINEL_VALUE
) -> list[str]:
    """Dates whose temperature value is neither missing nor the sentinel."""
    series = observations.temperature or {}
    return [day for day, value in series.items() if _is_observed(value, sentinel)]


def is_usable(
    observations: RawObservationSet, sentinel: float = SENTINEL_VALUE
) -> bool:
    """
    True if the temperature series exists, is non-empty and holds at
    least one real observation.
    """
    series = observations.temperature
    if not series:
        return False
    return any(_is_observed(value, sentinel) for value in series.values())
