"""
NASA POWER retrieval routes.

GET /api/nasa-power
    latitude, longitude and either ``date`` (single day, with fallback)
    or ``startDate`` + ``endDate`` (range, no fallback), all YYYYMMDD.

GET /api/nasa-power/export
    Same parameters plus ``format`` (csv | json); returns a download.

Status mapping:
    200  data found, or no usable data (explanatory message, empty list)
    400  missing or malformed parameters
    4xx/5xx  NASA POWER status passed through (502 if unreachable)
    502  unexpected NASA POWER payload (raw payload in ``details``)
    500  anything else
"""

from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response
from loguru import logger

from climatrack.api.services.nasa_power import NASAPowerClient
from climatrack.config.settings import get_settings
from climatrack.core.export import CSV_FILENAME, JSON_FILENAME, to_csv, to_json
from climatrack.core.retrieval import (
    NoUsableData,
    RetrievalError,
    RetrievalQuery,
    RetrievalResult,
    UpstreamFormatError,
    UpstreamUnavailable,
    WeatherRetrievalService,
)
from climatrack.core.retrieval.retrieval_service import RetrievalOutcome

weather_router = APIRouter(prefix="/api/nasa-power", tags=["NASA POWER"])

SUCCESS_MESSAGE = "Data fetched successfully from NASA POWER API"
EXPORT_FORMATS = ("csv", "json")


# ============================================================================
# DEPENDENCIES
# ============================================================================


async def get_nasa_power_client() -> AsyncIterator[NASAPowerClient]:
    """One client per request, closed once the response is sent."""
    client = NASAPowerClient()
    try:
        yield client
    finally:
        await client.close()


def get_retrieval_service(
    client: NASAPowerClient = Depends(get_nasa_power_client),
) -> WeatherRetrievalService:
    return WeatherRetrievalService(
        client,
        max_steps=get_settings().FALLBACK_MAX_STEPS,
        sentinel=client.config.sentinel,
    )


def get_retrieval_query(
    latitude: str | None = Query(None, description="Latitude"),
    longitude: str | None = Query(None, description="Longitude"),
    date: str | None = Query(None, description="Single day (YYYYMMDD)"),
    start_date: str | None = Query(
        None, alias="startDate", description="Range start (YYYYMMDD)"
    ),
    end_date: str | None = Query(
        None, alias="endDate", description="Range end (YYYYMMDD)"
    ),
) -> RetrievalQuery:
    return RetrievalQuery(
        latitude=latitude,
        longitude=longitude,
        date=date,
        start_date=start_date,
        end_date=end_date,
    )


# ============================================================================
# RESPONSE BUILDERS
# ============================================================================


def _location(query: RetrievalQuery) -> dict[str, str | None]:
    return {"latitude": query.latitude, "longitude": query.longitude}


def success_body(
    query: RetrievalQuery, result: RetrievalResult
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "location": {
            "latitude": result.coordinate.latitude,
            "longitude": result.coordinate.longitude,
        },
        "weatherData": [
            record.model_dump(by_alias=True) for record in result.records
        ],
        "message": SUCCESS_MESSAGE,
        "query": query.echo(),
    }
    if query.is_single_day:
        body["requestedDate"] = query.date
        body["usedDate"] = result.used_date
        body["fallbackSteps"] = result.fallback_steps
        if result.fallback_steps:
            body["message"] = (
                f"No usable data for {query.date}; showing "
                f"{result.used_date} instead"
            )
    else:
        body["dateRange"] = {"start": query.start_date, "end": query.end_date}
    return body


def no_data_body(
    query: RetrievalQuery, outcome: NoUsableData
) -> dict[str, Any]:
    return {
        "location": _location(query),
        "usedDate": None,
        "weatherData": [],
        "message": outcome.message,
        "lastAttemptedDate": outcome.last_attempted_date,
        "query": query.echo(),
    }


def error_response(
    outcome: UpstreamUnavailable | UpstreamFormatError,
) -> JSONResponse:
    if isinstance(outcome, UpstreamFormatError):
        return JSONResponse(
            status_code=502,
            content={"error": outcome.message, "details": outcome.raw_payload},
        )

    status_code = outcome.status_code
    if status_code is None or status_code < 400:
        status_code = 502
    content: dict[str, Any] = {"error": outcome.message}
    if outcome.details is not None:
        content["details"] = outcome.details
    return JSONResponse(status_code=status_code, content=content)


def outcome_response(
    query: RetrievalQuery, outcome: RetrievalOutcome
) -> JSONResponse:
    if isinstance(outcome, RetrievalResult):
        return JSONResponse(content=success_body(query, outcome))
    if isinstance(outcome, NoUsableData):
        return JSONResponse(content=no_data_body(query, outcome))
    return error_response(outcome)


async def _run(
    service: WeatherRetrievalService, query: RetrievalQuery
) -> RetrievalOutcome | JSONResponse:
    """Retrieve, converting caller errors and crashes into responses."""
    try:
        return await service.retrieve(query)
    except RetrievalError as e:
        logger.bind(query=query.echo()).warning(f"Rejected query: {e.message}")
        return JSONResponse(
            status_code=e.status_code, content={"error": e.message}
        )
    except Exception:
        logger.exception("Error fetching data from NASA POWER API")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch data from NASA POWER API"},
        )


# ============================================================================
# ENDPOINTS
# ============================================================================


@weather_router.get("")
async def get_weather(
    query: RetrievalQuery = Depends(get_retrieval_query),
    service: WeatherRetrievalService = Depends(get_retrieval_service),
) -> JSONResponse:
    """
    Daily T2M / precipitation / wind speed for a point.

    **Single day:** `?latitude=51.5074&longitude=0.1278&date=20240615`

    **Range:** `?latitude=51.5074&longitude=0.1278&startDate=20240601&endDate=20240607`

    **Response (single day):**
    ```json
    {
        "location": {"latitude": "51.5074", "longitude": "0.1278"},
        "requestedDate": "20240615",
        "usedDate": "20240615",
        "fallbackSteps": 0,
        "weatherData": [
            {"date": "20240615", "temperature": 14.2,
             "precipitation": 1.3, "windSpeed": 4.1}
        ],
        "message": "Data fetched successfully from NASA POWER API"
    }
    ```
    """
    outcome = await _run(service, query)
    if isinstance(outcome, JSONResponse):
        return outcome
    return outcome_response(query, outcome)


@weather_router.get("/export")
async def export_weather(
    export_format: str = Query("csv", alias="format"),
    query: RetrievalQuery = Depends(get_retrieval_query),
    service: WeatherRetrievalService = Depends(get_retrieval_service),
) -> Response:
    """Download the retrieval result as CSV or JSON."""
    export_format = export_format.lower()
    if export_format not in EXPORT_FORMATS:
        return JSONResponse(
            status_code=400,
            content={
                "error": (
                    f"Invalid format '{export_format}'. "
                    f"Use one of: {', '.join(EXPORT_FORMATS)}"
                )
            },
        )

    outcome = await _run(service, query)
    if isinstance(outcome, JSONResponse):
        return outcome
    if isinstance(outcome, (UpstreamUnavailable, UpstreamFormatError)):
        return error_response(outcome)

    if export_format == "csv":
        records = (
            outcome.records if isinstance(outcome, RetrievalResult) else []
        )
        return Response(
            content=to_csv(records),
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'
            },
        )

    body = (
        success_body(query, outcome)
        if isinstance(outcome, RetrievalResult)
        else no_data_body(query, outcome)
    )
    return Response(
        content=to_json(body),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{JSON_FILENAME}"'
        },
    )
