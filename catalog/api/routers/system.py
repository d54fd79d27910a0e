"""
System API endpoints (health).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from catalog.api.dependencies import get_catalog_service
from catalog.service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(service: CatalogService = Depends(get_catalog_service)):
    """Health check: database reachable and row counts per collection."""
    try:
        counts = service.counts()
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        **counts,
    }
