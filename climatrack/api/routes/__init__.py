from fastapi import APIRouter

from climatrack.api.routes.geocode_routes import geocode_router
from climatrack.api.routes.health_routes import health_router
from climatrack.api.routes.weather_routes import weather_router

api_router = APIRouter()

# Health check (1 endpoint)
api_router.include_router(health_router)

# NASA POWER retrieval + export (2 endpoints)
api_router.include_router(weather_router)

# City lookup (1 endpoint)
api_router.include_router(geocode_router)
