from fastapi import FastAPI

from station_normalizer.core.config import settings
from station_normalizer.core.log import configure_logging
from station_normalizer.routers.health import router as health_router
from station_normalizer.routers.stations import router as stations_router
from station_normalizer.routers.units import router as units_router


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    - Configures logging from `LOG_LEVEL`.
    - Initializes the FastAPI app with metadata and documentation endpoints.
    - Registers all API routers.

    Returns:
        Configured FastAPI application instance.
    """
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Station unit normalization for RefET inputs",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Register API routers
    app.include_router(health_router)
    app.include_router(units_router)
    app.include_router(stations_router)

    return app


# Application entry point
app = create_app()
