"""
Client for NASA POWER API.
Public Domain.
POWER Daily API
Return daily data for a single point.

Data Source:
-----------
The data was obtained from the Prediction Of Worldwide Energy Resources
(POWER) Project, funded through the NASA Earth Science Directorate
Applied Science Program.

NASA POWER: https://power.larc.nasa.gov/
Documentation: https://power.larc.nasa.gov/docs/services/api/
Citation Guide: https://power.larc.nasa.gov/docs/referencing/

3 DAILY VARIABLES REQUESTED (community 'RE'):
1. T2M: MERRA-2 Temperature at 2 Meters (C)  <- primary parameter
2. PRECTOTCORR: MERRA-2 Precipitation Corrected (mm/day)
3. WS10M: MERRA-2 Wind Speed at 10 Meters (m/s)

Days without an observation come back as -999 instead of an HTTP error.
The client does not judge usability; it only reports what came back:

- FetchOk: 2xx with a properties/parameter/T2M envelope
- UpstreamUnavailable: transport failure or non-2xx status
- UpstreamFormatError: body is not JSON or misses the envelope

No transport retries happen here. Day-stepping on placeholder data is
done by the FallbackResolver.
"""

import os
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from climatrack.core.retrieval.date_stamp import parse_date_stamp
from climatrack.core.retrieval.observations import (
    SENTINEL_VALUE,
    Coordinate,
    RawObservationSet,
)
from climatrack.core.retrieval.outcomes import (
    FetchOk,
    FetchResult,
    UpstreamFormatError,
    UpstreamUnavailable,
)


class NASAPowerConfig(BaseModel):
    """NASA POWER API configuration."""

    base_url: str = os.getenv(
        "NASA_POWER_URL",
        "https://power.larc.nasa.gov/api/temporal/daily/point",
    )
    timeout: float = float(os.getenv("NASA_POWER_TIMEOUT", "30"))
    community: str = "RE"  # UPPERCASE: AG, RE, SB
    temperature_parameter: str = "T2M"
    precipitation_parameter: str = "PRECTOTCORR"
    wind_speed_parameter: str = "WS10M"
    sentinel: float = Field(SENTINEL_VALUE, description="'No data' marker")

    @property
    def parameters(self) -> list[str]:
        return [
            self.temperature_parameter,
            self.precipitation_parameter,
            self.wind_speed_parameter,
        ]


class NASAPowerClient:
    """
    Async client issuing one NASA POWER request per call.
    """

    def __init__(
        self,
        config: NASAPowerConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize NASA POWER client.

        Args:
            config: Custom configuration (optional)
            client: Shared httpx.AsyncClient (optional); closed by its owner
        """
        self.config = config or NASAPowerConfig()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.config.timeout)

    async def close(self):
        """Close HTTP connection."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "NASAPowerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def build_params(
        self, coordinate: Coordinate, start_date: str, end_date: str
    ) -> dict[str, str]:
        """Query string for one point and one inclusive date range."""
        return {
            "parameters": ",".join(self.config.parameters),
            "community": self.config.community,
            "longitude": coordinate.longitude,
            "latitude": coordinate.latitude,
            "start": start_date,
            "end": end_date,
            "format": "JSON",
        }

    async def fetch_range(
        self,
        coordinate: Coordinate,
        start_date: str,
        end_date: str,
    ) -> FetchResult:
        """
        Fetch daily T2M/precipitation/wind for a point.

        Args:
            coordinate: Point, forwarded verbatim
            start_date: First day (YYYYMMDD), inclusive
            end_date: Last day (YYYYMMDD), inclusive

        Returns:
            FetchOk, UpstreamUnavailable or UpstreamFormatError

        Raises:
            ValueError: If a date is malformed or start_date > end_date
        """
        if parse_date_stamp(start_date) > parse_date_stamp(end_date):
            msg = "start_date must be <= end_date"
            raise ValueError(msg)

        params = self.build_params(coordinate, start_date, end_date)
        log = logger.bind(
            lat=coordinate.latitude,
            lon=coordinate.longitude,
            start=start_date,
            end=end_date,
        )
        log.info(
            f"NASA POWER request: lat={coordinate.latitude}, "
            f"lon={coordinate.longitude}, dates={start_date} to {end_date}"
        )

        try:
            response = await self.client.get(
                self.config.base_url, params=params
            )
        except httpx.HTTPError as e:
            log.error(f"NASA POWER transport failure: {e!r}")
            return UpstreamUnavailable(
                status_code=None,
                message="Failed to reach NASA POWER API",
            )

        if not response.is_success:
            log.error(
                f"NASA API error response ({response.status_code}): "
                f"{response.text}"
            )
            return UpstreamUnavailable(
                status_code=response.status_code,
                message=(
                    f"NASA API failed with status {response.status_code}"
                ),
                details=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            log.error(f"NASA POWER returned a non-JSON body: {e}")
            return UpstreamFormatError(raw_payload=response.text)

        return self._parse_response(data)

    def _parse_response(self, data: Any) -> FetchResult:
        """
        Parse NASA POWER JSON envelope.

        Args:
            data: Decoded JSON body

        Returns:
            FetchOk with the three series, or UpstreamFormatError
        """
        parameters = None
        if isinstance(data, dict) and isinstance(data.get("properties"), dict):
            parameters = data["properties"].get("parameter")

        primary = self.config.temperature_parameter
        if not isinstance(parameters, dict) or not isinstance(
            parameters.get(primary), dict
        ):
            logger.error(f"Unexpected NASA API data format: {data}")
            return UpstreamFormatError(raw_payload=data)

        try:
            observations = RawObservationSet(
                temperature=parameters[primary],
                precipitation=self._secondary_series(
                    parameters, self.config.precipitation_parameter
                ),
                wind_speed=self._secondary_series(
                    parameters, self.config.wind_speed_parameter
                ),
            )
        except ValidationError as e:
            logger.error(f"NASA POWER series could not be read: {e}")
            return UpstreamFormatError(raw_payload=data)

        logger.info(
            f"NASA POWER: received {len(observations.temperature or {})} "
            f"{primary} values"
        )
        return FetchOk(observations=observations)

    @staticmethod
    def _secondary_series(
        parameters: dict[str, Any], code: str
    ) -> dict[str, Any] | None:
        """Secondary series that are not date-keyed mappings count as absent."""
        series = parameters.get(code)
        if series is not None and not isinstance(series, dict):
            logger.warning(
                f"Ignoring NASA POWER {code}: expected a mapping, "
                f"got {type(series).__name__}"
            )
            return None
        return series
