"""Lender catalog endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from app.config import settings
from app.deps import get_catalog
from app.models.schemas.lender import (
    CatalogUploadResponse,
    LenderCriteriaResponse,
    LenderListResponse,
    SpecialtyListResponse,
)
from app.services.catalog_service import LenderCatalog
from app.services.criteria_loader import SpreadsheetReader

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=LenderListResponse)
async def list_lenders(
    catalog: Annotated[LenderCatalog, Depends(get_catalog)],
    specialty: Optional[str] = None,
) -> LenderListResponse:
    """
    List lenders in the catalog.

    Args:
        specialty: Only list lenders with this specialty
    """
    lenders = catalog.lenders
    if specialty:
        lenders = [lender for lender in lenders if lender.specialty == specialty]

    return LenderListResponse(
        total=len(lenders),
        lenders=[LenderCriteriaResponse.model_validate(lender) for lender in lenders],
    )


@router.get("/specialties", response_model=SpecialtyListResponse)
async def list_specialties(
    catalog: Annotated[LenderCatalog, Depends(get_catalog)],
) -> SpecialtyListResponse:
    """List the lender specialties present in the catalog."""
    return SpecialtyListResponse(specialties=catalog.specialties())


@router.get("/{lender_name}", response_model=LenderCriteriaResponse)
async def get_lender(
    lender_name: str,
    catalog: Annotated[LenderCatalog, Depends(get_catalog)],
) -> LenderCriteriaResponse:
    """Get a single lender's criteria by name."""
    lender = catalog.find(lender_name)
    if lender is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Lender '{lender_name}' not found",
        )
    return LenderCriteriaResponse.model_validate(lender)


@router.post("/upload", response_model=CatalogUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_lender_spreadsheet(
    file: Annotated[UploadFile, File(description="Lender criteria spreadsheet")],
    catalog: Annotated[LenderCatalog, Depends(get_catalog)],
) -> CatalogUploadResponse:
    """
    Upload a lender spreadsheet and replace the catalog.

    The first row is treated as a header. Rows without a lender name are
    skipped. The JSON cache is refreshed when a cache path is configured.

    Raises:
        HTTPException: If the file is invalid or cannot be read
    """
    # Validate file type
    if not file.filename or not SpreadsheetReader.is_supported(file.filename):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File must be an Excel (.xlsx) or CSV spreadsheet",
        )

    # Validate file size
    content = await file.read()
    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size must be less than {settings.MAX_UPLOAD_SIZE_MB}MB",
        )

    try:
        stats = catalog.load_upload(content, file.filename)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if settings.LENDER_CACHE_PATH:
        try:
            catalog.save_cache(settings.LENDER_CACHE_PATH)
        except OSError as e:
            logger.error(f"Failed to refresh lender cache: {e}", exc_info=True)

    logger.info(
        f"Uploaded {file.filename}: {stats.lenders_loaded} lenders, "
        f"{stats.rows_skipped} rows skipped"
    )
    return CatalogUploadResponse(
        filename=file.filename,
        rows_read=stats.rows_read,
        lenders_loaded=stats.lenders_loaded,
        rows_skipped=stats.rows_skipped,
    )
