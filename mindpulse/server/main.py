"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindpulse import __version__
from mindpulse.core.database import init_db
from mindpulse.core.logging_config import get_logger, setup_logging
from mindpulse.core.monitoring import initialize_logfire

from .api.v1 import (
    community,
    contact_support,
    health,
    interventions,
    mood_entries,
    progress,
    recommendations,
    users,
    wellness,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestTimingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup; the server still starts when the
    database is unreachable so ``/health`` can report it.
    """
    # Startup
    try:
        logger.info("Starting up MindPulse Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down MindPulse Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    MindPulse Server API

    Backend of the MindPulse mental-wellness tracker: mood logging, guided
    interventions, progress streaks, a moderated peer-support community,
    personalized recommendations and a support inbox.
    """,
    version=__version__,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)
setup_exception_handlers(app)

# Request timing and Logfire request metrics
app.add_middleware(RequestTimingMiddleware)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

# Register API routers
app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users")
app.include_router(mood_entries.router, prefix=f"{constant.API_PREFIX}/mood-entries")
app.include_router(interventions.router, prefix=f"{constant.API_PREFIX}/interventions")
app.include_router(wellness.router, prefix=constant.API_PREFIX)
app.include_router(progress.router, prefix=f"{constant.API_PREFIX}/progress")
app.include_router(community.router, prefix=constant.API_PREFIX)
app.include_router(recommendations.router, prefix=f"{constant.API_PREFIX}/recommendations")
app.include_router(contact_support.router, prefix=constant.API_PREFIX)
