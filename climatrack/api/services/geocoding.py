"""
Fixed-table geocoder.

Free text is matched against known city names (case-insensitive
substring, first match in table order wins). Anything else resolves to
the default coordinate. The table is injected, so a real geocoding
service can replace this class behind the same ``resolve`` method.
"""

from collections.abc import Mapping

from loguru import logger

from climatrack.core.retrieval.observations import Coordinate

# Lahore region centroid used by the dashboard when nothing matches
DEFAULT_COORDINATE = Coordinate(latitude="30.3753", longitude="69.3451")

DEFAULT_CITY_TABLE: dict[str, Coordinate] = {
    "london": Coordinate(latitude="51.5074", longitude="0.1278"),
    "new york": Coordinate(latitude="40.7128", longitude="-74.0060"),
    "paris": Coordinate(latitude="48.8566", longitude="2.3522"),
    "tokyo": Coordinate(latitude="35.6895", longitude="139.6917"),
    "lahore": Coordinate(latitude="31.5497", longitude="74.3436"),
    "karachi": Coordinate(latitude="24.8607", longitude="67.0011"),
    "islamabad": Coordinate(latitude="33.6844", longitude="73.0479"),
}


class CityGeocoder:
    """Resolve free text to a Coordinate through a city lookup table."""

    def __init__(
        self,
        table: Mapping[str, Coordinate] | None = None,
        default: Coordinate = DEFAULT_COORDINATE,
    ):
        source = DEFAULT_CITY_TABLE if table is None else table
        self.table = {key.lower(): value for key, value in source.items()}
        self.default = default

    def lookup(self, text: str) -> Coordinate | None:
        """Matched coordinate, or None when no key occurs in ``text``."""
        needle = text.lower()
        for key, coordinate in self.table.items():
            if key in needle:
                return coordinate
        return None

    def resolve(self, text: str) -> Coordinate:
        coordinate = self.lookup(text) or self.default
        logger.info(
            f"Geocoding for '{text}': Lat {coordinate.latitude}, "
            f"Lon {coordinate.longitude}"
        )
        return coordinate
