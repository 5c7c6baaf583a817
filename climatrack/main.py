from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from climatrack.api.routes import api_router
from climatrack.config.logging_config import get_logger, setup_logging
from climatrack.config.settings import get_settings

settings = get_settings()

setup_logging(
    log_level=settings.LOG_LEVEL,
    log_dir=settings.LOG_DIR,
    json_logs=settings.JSON_LOGS,
)
logger = get_logger(__name__)


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
    )

    # CORS for the dashboard front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        """Service entry point."""
        return {
            "message": "ClimaTrack API",
            "weather": f"{settings.API_PREFIX}/api/nasa-power",
            "docs": f"{settings.API_PREFIX}/docs",
        }

    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} ready")
    return app


app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("climatrack.main:app", host="0.0.0.0", port=8000, reload=True)
