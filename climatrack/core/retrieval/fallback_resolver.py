"""
Day-stepping fallback search.

Starting at the target day, one single-day query is issued at a time.
A usable answer ends the search; a placeholder-only answer moves the
candidate one day back while the budget allows. Transport and format
failures end the search at once and are handed back unchanged.

Budget: ``max_steps`` is the number of days inspected, target included.
With the default of 3, the target and the two days before it are
fetched; the third day back is never requested.
"""

from typing import Protocol

from loguru import logger

from .date_stamp import previous_day
from .observations import SENTINEL_VALUE, Coordinate
from .outcomes import (
    FetchOk,
    FetchResult,
    NoUsableData,
    Resolved,
    ResolveResult,
)
from .validity import is_usable

DEFAULT_MAX_STEPS = 3


class RangeFetcher(Protocol):
    async def fetch_range(
        self, coordinate: Coordinate, start_date: str, end_date: str
    ) -> FetchResult: ...


class FallbackResolver:
    """Find the most recent usable day at or before a target date."""

    def __init__(
        self,
        fetcher: RangeFetcher,
        sentinel: float = SENTINEL_VALUE,
    ):
        self.fetcher = fetcher
        self.sentinel = sentinel

    async def resolve(
        self,
        coordinate: Coordinate,
        target_date: str,
        max_steps: int = DEFAULT_MAX_STEPS,
    ) -> ResolveResult:
        """
        Args:
            coordinate: Point to query
            target_date: Requested day (YYYYMMDD)
            max_steps: Days to inspect; values below 1 still fetch the
                target once

        Returns:
            Resolved, NoUsableData, or the failing fetch variant
        """
        budget = max(max_steps, 1)
        candidate = target_date
        steps = 0

        while True:
            result = await self.fetcher.fetch_range(
                coordinate, candidate, candidate
            )
            if not isinstance(result, FetchOk):
                logger.warning(
                    f"Fallback search aborted at {candidate}: "
                    f"{type(result).__name__}"
                )
                return result

            if is_usable(result.observations, self.sentinel):
                if steps:
                    logger.info(
                        f"Using {candidate} instead of {target_date} "
                        f"({steps} day(s) back)"
                    )
                return Resolved(
                    observations=result.observations,
                    used_date=candidate,
                    fallback_steps=steps,
                )

            logger.info(f"No usable T2M for {candidate} (attempt {steps + 1})")
            if steps + 1 >= budget:
                break
            candidate = previous_day(candidate)
            steps += 1

        logger.warning(
            f"Fallback budget exhausted: {budget} day(s) from {target_date}"
        )
        return NoUsableData(
            requested_start=target_date,
            requested_end=target_date,
            last_attempted_date=candidate,
            attempts=steps + 1,
        )
