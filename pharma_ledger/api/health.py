"""
Health check endpoint.

Used by load balancers and monitoring to verify the service
is running and can reach its database.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pharma_ledger.logger import get_logger
from pharma_ledger.models.base import get_db

router = APIRouter(tags=["Health"])
logger = get_logger(__name__)


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Return application health status including database connectivity.

    A failing probe query reports the instance as degraded
    instead of raising.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        logger.warning("database health probe failed", exc_info=True)
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "pharma-ledger",
        "database": db_status,
    }
