"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS),
registers the exception handlers and includes the API and page routers.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recordkit import __version__
from recordkit.core.database import init_db
from recordkit.core.logging_config import get_logger, setup_logging

from .api.v1 import health, incidents, plugins
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .pages import incidents as incident_pages
from .pages import plugins as plugin_pages

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup (unless disabled in the settings).
    """
    try:
        logger.info("Starting up recordkit server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down recordkit server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    recordkit Server API

    Manages plugins and security incidents through typed data entries, and renders
    them as HTML pages with the recordkit component library.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(plugins.router, prefix=f"{constant.API_V1_STR}/plugins")
app.include_router(incidents.router, prefix=f"{constant.API_V1_STR}/incidents")
app.include_router(plugin_pages.router)
app.include_router(incident_pages.router)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    logger.info(f"Serving recordkit on {settings.server_host}:{settings.server_port}")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
