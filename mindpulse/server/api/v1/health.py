"""
Health Check Endpoints.

Reports that the server is up and whether the database answers.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mindpulse.core.database import get_session
from mindpulse.core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server and its database.",
    response_description="Status object.",
)
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    Health check endpoint.

    Returns ``database: "error"`` instead of failing when the database is unreachable.
    """
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Health check database probe failed: {e}")
        database = "error"
    return {"status": "ok", "database": database}
