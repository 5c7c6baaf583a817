"""
Value objects exchanged by the retrieval pipeline.

Everything here is request scoped: built for one retrieval, returned to
the caller and dropped. Field names are snake_case in Python; the public
JSON uses the camelCase aliases (``windSpeed``, ``usedDate``,
``fallbackSteps``).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# NASA POWER placeholder for "no observation"
SENTINEL_VALUE = -999.0

ParameterSeries = dict[str, float | None]


class Coordinate(BaseModel):
    """Point location, forwarded verbatim to the upstream service."""

    latitude: str = Field(..., description="Latitude (decimal string)")
    longitude: str = Field(..., description="Longitude (decimal string)")

    @field_validator("latitude", "longitude")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("coordinate fields must be non-empty strings")
        return value


class RawObservationSet(BaseModel):
    """
    Per-parameter series as returned by NASA POWER.

    A series is None when the parameter is absent from the payload, which
    is different from an empty mapping.
    """

    temperature: ParameterSeries | None = None
    precipitation: ParameterSeries | None = None
    wind_speed: ParameterSeries | None = None


class DailyRecord(BaseModel):
    """One normalized day. Sentinel values are kept as delivered."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="YYYYMMDD")
    temperature: float | None = Field(None, description="T2M (°C)")
    precipitation: float | None = Field(None, description="mm/day")
    wind_speed: float | None = Field(
        None, alias="windSpeed", description="WS10M (m/s)"
    )


class RetrievalResult(BaseModel):
    """Successful retrieval for a single day or a date range."""

    model_config = ConfigDict(populate_by_name=True)

    coordinate: Coordinate
    used_date: str | None = Field(None, alias="usedDate")
    records: list[DailyRecord] = Field(..., min_length=1)
    fallback_steps: int = Field(0, alias="fallbackSteps", ge=0)
