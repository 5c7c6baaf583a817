"""
Retrieval service: input validation plus orchestration.

Single-day queries go through the FallbackResolver. Range queries are
fetched once and normalized; there is no fallback for ranges, so a range
without any usable temperature is reported as NoUsableData after one
attempt.
"""

from typing import Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .date_stamp import parse_date_stamp
from .errors import InvalidParameter, MissingParameter
from .fallback_resolver import DEFAULT_MAX_STEPS, FallbackResolver, RangeFetcher
from .normalizer import normalize
from .observations import SENTINEL_VALUE, Coordinate, RetrievalResult
from .outcomes import (
    FetchOk,
    NoUsableData,
    Resolved,
    UpstreamFormatError,
    UpstreamUnavailable,
)
from .validity import is_usable, usable_dates

RetrievalOutcome = Union[
    RetrievalResult, NoUsableData, UpstreamUnavailable, UpstreamFormatError
]


class RetrievalQuery(BaseModel):
    """Raw caller input, exactly as received."""

    model_config = ConfigDict(populate_by_name=True)

    latitude: str | None = None
    longitude: str | None = None
    date: str | None = None
    start_date: str | None = Field(None, alias="startDate")
    end_date: str | None = Field(None, alias="endDate")

    @property
    def is_single_day(self) -> bool:
        return _present(self.date)

    def echo(self) -> dict[str, str]:
        """Supplied parameters under their public names."""
        return self.model_dump(by_alias=True, exclude_none=True)


def _present(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def _checked_stamp(name: str, value: str) -> str:
    try:
        parse_date_stamp(value)
    except ValueError as e:
        raise InvalidParameter(f"Invalid '{name}': use YYYYMMDD") from e
    return value


class WeatherRetrievalService:
    """Validate a query and run it against NASA POWER."""

    def __init__(
        self,
        fetcher: RangeFetcher,
        max_steps: int = DEFAULT_MAX_STEPS,
        sentinel: float = SENTINEL_VALUE,
    ):
        self.fetcher = fetcher
        self.max_steps = max_steps
        self.sentinel = sentinel
        self.resolver = FallbackResolver(fetcher, sentinel=sentinel)

    def validate(self, query: RetrievalQuery) -> tuple[Coordinate, str, str]:
        """
        Check the query before any network access.

        Returns:
            (coordinate, start_date, end_date); start == end for the
            single-day form

        Raises:
            MissingParameter: Coordinate or both date forms absent
            InvalidParameter: Malformed dates, both forms, or start > end
        """
        has_single = _present(query.date)
        has_range = _present(query.start_date) and _present(query.end_date)

        if (
            not _present(query.latitude)
            or not _present(query.longitude)
            or not (has_single or has_range)
        ):
            raise MissingParameter(
                "Missing latitude, longitude, or date/date range parameters"
            )
        if has_single and (
            _present(query.start_date) or _present(query.end_date)
        ):
            raise InvalidParameter(
                "Invalid date parameters. Provide either 'date' or "
                "'startDate' and 'endDate'."
            )

        coordinate = Coordinate(
            latitude=query.latitude, longitude=query.longitude
        )
        if has_single:
            day = _checked_stamp("date", query.date)
            return coordinate, day, day

        start = _checked_stamp("startDate", query.start_date)
        end = _checked_stamp("endDate", query.end_date)
        if start > end:
            raise InvalidParameter("'startDate' must not be after 'endDate'")
        return coordinate, start, end

    async def retrieve(self, query: RetrievalQuery) -> RetrievalOutcome:
        coordinate, start, end = self.validate(query)

        if query.is_single_day:
            resolved = await self.resolver.resolve(
                coordinate, start, max_steps=self.max_steps
            )
            if not isinstance(resolved, Resolved):
                return resolved
            return RetrievalResult(
                coordinate=coordinate,
                used_date=resolved.used_date,
                records=normalize(resolved.observations),
                fallback_steps=resolved.fallback_steps,
            )

        fetched = await self.fetcher.fetch_range(coordinate, start, end)
        if not isinstance(fetched, FetchOk):
            return fetched
        if not is_usable(fetched.observations, self.sentinel):
            logger.info(f"No usable T2M between {start} and {end}")
            return NoUsableData(
                requested_start=start,
                requested_end=end,
                last_attempted_date=start,
                attempts=1,
            )
        logger.info(
            f"Range {start}-{end}: "
            f"{len(usable_dates(fetched.observations, self.sentinel))} "
            "usable day(s)"
        )
        return RetrievalResult(
            coordinate=coordinate,
            records=normalize(fetched.observations),
        )
