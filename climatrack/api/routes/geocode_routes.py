"""
Geocoding route: free text -> coordinate via the city table.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from climatrack.api.services.geocoding import CityGeocoder

geocode_router = APIRouter(prefix="/api/geocode", tags=["Geocoding"])


def get_geocoder() -> CityGeocoder:
    return CityGeocoder()


@geocode_router.get("")
async def geocode(
    location: str | None = Query(None, description="City, country, ..."),
    geocoder: CityGeocoder = Depends(get_geocoder),
) -> JSONResponse:
    """
    Resolve a location name.

    **Response:**
    ```json
    {"latitude": "51.5074", "longitude": "0.1278"}
    ```
    """
    if location is None or not location.strip():
        return JSONResponse(
            status_code=400,
            content={"error": "Location parameter is required"},
        )

    coordinate = geocoder.resolve(location)
    return JSONResponse(content=coordinate.model_dump())
