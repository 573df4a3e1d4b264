# patron_api/adapters/api/main.py
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patron_api import __version__
from patron_api.adapters.api.errors import register_exception_handlers
from patron_api.adapters.api.routers import health, patrons
from patron_api.shared.container import Container
from patron_api.shared.logging_config import configure_logging
from patron_api.shared.observability import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()

# Modules using @inject / Provide[...]
WIRED_MODULES = [
    "patron_api.adapters.api.dependencies",
    "patron_api.adapters.api.routers.health",
    "patron_api.adapters.api.routers.patrons",
]

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: connects to MongoDB and ensures the indexes (Fail Fast).
    2. Shutdown: closes the connection.
    """
    container: Container = app.state.container
    settings = container.settings()
    logger.info("app_startup", env=settings.APP_ENV.value, database=settings.MONGODB_DATABASE)

    connection = container.mongo_connection()
    try:
        await connection.connect()
        await container.patron_repository().ensure_indexes()
    except Exception as e:
        logger.error("database_startup_failed", error=str(e))
        raise

    yield

    logger.info("app_shutdown")
    await connection.disconnect()

def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Factory function to create the FastAPI application.

    Args:
        container: A pre-built (possibly overridden) container. A fresh one is
            built from the environment when omitted.
    """
    if container is None:
        container = Container()
    settings = container.settings()

    configure_logging(settings)
    setup_telemetry(settings)

    container.wire(modules=WIRED_MODULES)

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Patron Registry (Hexagonal Architecture)",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(patrons.router, prefix=settings.API_PREFIX)

    instrument_fastapi(app, settings)

    return app

def run() -> None:
    """Console entry point: serves the app with uvicorn."""
    import uvicorn

    settings = Container().settings()
    uvicorn.run(
        "patron_api.adapters.api.main:create_app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        factory=True,
    )

# Entry point for local debugging (e.g. `python -m patron_api.adapters.api.main`)
if __name__ == "__main__":
    run()
