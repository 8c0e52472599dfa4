"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.deps import get_catalog
from app.services.catalog_service import LenderCatalog

router = APIRouter()


@router.get("/health")
async def health_check(catalog: Annotated[LenderCatalog, Depends(get_catalog)]) -> dict:
    """
    Health check endpoint.

    Verifies that the API is running and reports whether lenders are loaded.

    Returns:
        dict: Health status with API and catalog status
    """
    catalog_status = "empty" if catalog.is_empty else "loaded"

    return {
        "status": "healthy" if catalog_status == "loaded" else "degraded",
        "api": "healthy",
        "catalog": catalog_status,
        "lenders": len(catalog),
    }
