"""
Result variants for upstream fetches and fallback resolution.

The client never raises for transport or payload problems; it returns
one of the variants below and every caller branches on the type:

    FetchResult   = FetchOk | UpstreamUnavailable | UpstreamFormatError
    ResolveResult = Resolved | NoUsableData
                    | UpstreamUnavailable | UpstreamFormatError
"""

from typing import Any, Union

from pydantic import BaseModel, Field

from .observations import RawObservationSet


class FetchOk(BaseModel):
    """Upstream answered 2xx with a well-formed envelope."""

    observations: RawObservationSet


class UpstreamUnavailable(BaseModel):
    """Transport failure or non-success HTTP status."""

    status_code: int | None = Field(
        None, description="Upstream HTTP status (None if no response)"
    )
    message: str
    details: str | None = None


class UpstreamFormatError(BaseModel):
    """Body is not the expected properties/parameter/T2M envelope."""

    message: str = "Unexpected NASA POWER response format"
    raw_payload: Any = None


class Resolved(BaseModel):
    """A usable day was found by the fallback search."""

    observations: RawObservationSet
    used_date: str
    fallback_steps: int = Field(0, ge=0)


class NoUsableData(BaseModel):
    """Valid responses, but only placeholder data within the budget."""

    requested_start: str
    requested_end: str
    last_attempted_date: str
    attempts: int = Field(..., ge=1)

    @property
    def message(self) -> str:
        if self.requested_start == self.requested_end:
            return (
                f"No usable NASA POWER data for {self.requested_start} "
                f"or the {self.attempts - 1} day(s) before it"
            )
        return (
            "No usable NASA POWER data between "
            f"{self.requested_start} and {self.requested_end}"
        )


FetchResult = Union[FetchOk, UpstreamUnavailable, UpstreamFormatError]
ResolveResult = Union[
    Resolved, NoUsableData, UpstreamUnavailable, UpstreamFormatError
]
