"""
Shared fixtures and configuration for the ClimaTrack test suite.

No test reaches NASA POWER: the client is exercised through respx, and
everything above it through ScriptedFetcher.
"""

from typing import Any

import pytest

from climatrack.api.services.nasa_power import NASAPowerConfig
from climatrack.core.retrieval import (
    Coordinate,
    FetchOk,
    RawObservationSet,
)

POWER_URL = "https://power.example.test/api/temporal/daily/point"


class ScriptedFetcher:
    """
    Stand-in for NASAPowerClient.

    ``script`` maps a start date to the FetchResult returned for it (or
    an exception instance to raise). Unknown dates get ``default``.
    """

    def __init__(self, script: dict[str, Any] | None = None, default=None):
        self.script = script or {}
        self.default = default
        self.calls: list[tuple[str, str]] = []

    async def fetch_range(self, coordinate, start_date, end_date):
        self.calls.append((start_date, end_date))
        result = self.script.get(start_date, self.default)
        if isinstance(result, Exception):
            raise result
        if result is None:
            raise AssertionError(f"Unexpected fetch for {start_date}")
        return result

    @property
    def requested_dates(self) -> list[str]:
        return [start for start, _ in self.calls]


@pytest.fixture(scope="session")
def sample_coordinates():
    """Session-scoped fixture providing sample coordinates for testing."""
    return {
        "london": Coordinate(latitude="51.5074", longitude="0.1278"),
        "lahore": Coordinate(latitude="31.5497", longitude="74.3436"),
        "new_york": Coordinate(latitude="40.7128", longitude="-74.0060"),
    }


@pytest.fixture
def london(sample_coordinates):
    return sample_coordinates["london"]


@pytest.fixture
def power_config():
    """NASA POWER config pointing at a mocked host."""
    return NASAPowerConfig(base_url=POWER_URL, timeout=5)


@pytest.fixture
def power_payload():
    """Factory for NASA POWER JSON envelopes."""

    def make(
        t2m: dict[str, float] | None,
        precipitation: dict[str, float] | None = None,
        wind_speed: dict[str, float] | None = None,
    ) -> dict[str, Any]:
        parameter: dict[str, Any] = {}
        if t2m is not None:
            parameter["T2M"] = t2m
        if precipitation is not None:
            parameter["PRECTOTCORR"] = precipitation
        if wind_speed is not None:
            parameter["WS10M"] = wind_speed
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [0.1278, 51.5074]},
            "properties": {"parameter": parameter},
            "header": {"fill_value": -999.0},
        }

    return make


@pytest.fixture
def fetch_ok():
    """Factory for FetchOk results built from plain series."""

    def make(t2m, precipitation=None, wind_speed=None) -> FetchOk:
        return FetchOk(
            observations=RawObservationSet(
                temperature=t2m,
                precipitation=precipitation,
                wind_speed=wind_speed,
            )
        )

    return make


@pytest.fixture
def usable_day(fetch_ok):
    """FetchOk with one real observation on ``day``."""

    def make(day: str, temperature: float = 14.2) -> FetchOk:
        return fetch_ok(
            {day: temperature}, {day: 1.3}, {day: 4.1}
        )

    return make


@pytest.fixture
def placeholder_day(fetch_ok):
    """FetchOk where every value for ``day`` is the -999 sentinel."""

    def make(day: str) -> FetchOk:
        return fetch_ok({day: -999.0}, {day: -999.0}, {day: -999.0})

    return make


@pytest.fixture
def scripted_fetcher():
    return ScriptedFetcher


# Test configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: API related tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "/unit/" in item.nodeid or item.nodeid.startswith("unit/"):
            item.add_marker(pytest.mark.unit)
        if "api" in item.nodeid.lower():
            item.add_marker(pytest.mark.api)
