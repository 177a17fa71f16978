"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of the MindPulse server, including:
- API endpoint tracing
- Database operation monitoring
- Gemini calls made through pydantic-ai
- Recommendation generation events

All event helpers are no-ops until ``initialize_logfire`` has configured Logfire.
"""

from __future__ import annotations

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from mindpulse.server.core.config import settings

logger = logging.getLogger(__name__)

_logfire_configured = False


def is_logfire_enabled() -> bool:
    return _logfire_configured


def initialize_logfire(app: FastAPI | None = None) -> None:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Sets up automatic instrumentation for pydantic-ai model calls, SQLAlchemy,
    HTTPX and (when ``app`` is given) FastAPI endpoints. Nothing happens unless
    ``LOGFIRE_ENABLED`` is true and ``LOGFIRE_TOKEN`` is set.

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).
    """
    global _logfire_configured

    config = settings.logfire
    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return

    if not config.token:
        logger.warning("Logfire is enabled but LOGFIRE_TOKEN is not set. Monitoring will not work.")
        return

    # Configure Logfire with project settings
    logfire.configure(
        token=config.token,
        service_name=config.service_name,
        service_version=config.service_version,
        environment=config.environment,
    )
    _logfire_configured = True

    # Instrument pydantic-ai, SQLAlchemy and HTTPX
    instrumentations = {
        "pydantic-ai": logfire.instrument_pydantic_ai,
        "SQLAlchemy": logfire.instrument_sqlalchemy,
        "HTTPX": logfire.instrument_httpx,
    }
    for name, instrument in instrumentations.items():
        try:
            instrument()
            logger.info(f"Logfire: {name} instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument {name}: {e}")

    # Instrument FastAPI
    if app is not None:
        try:
            logfire.instrument_fastapi(app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")

    logger.info(
        f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
    )


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _logfire_configured:
        return
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_llm_call(operation: str, model: str, success: bool, duration_ms: float) -> None:
    """
    Log a Gemini call made by the wellness AI service.

    Args:
        operation: Name of the generator (e.g. ``cbt_prompt``)
        model: The model name
        success: Whether a usable response came back
        duration_ms: Call duration in milliseconds
    """
    if not _logfire_configured:
        return
    logfire.info(
        "LLM call completed",
        operation=operation,
        model=model,
        success=success,
        duration_ms=duration_ms,
    )


def log_recommendations_generated(user_id: int, existing: int, created: int) -> None:
    if not _logfire_configured:
        return
    logfire.info("Recommendations generated", user_id=user_id, existing=existing, created=created)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _logfire_configured:
        return
    logfire.error(f"{error_type}: {error_message}", **(context or {}))
