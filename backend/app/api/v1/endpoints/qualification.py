"""Qualification endpoints for matching a client profile to lenders."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.deps import get_qualification_service
from app.models.schemas.qualification import (
    QualificationRequest,
    QualificationResponse,
    QualificationResultResponse,
    QualificationSummaryResponse,
)
from app.services.qualification_service import QualificationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/evaluate",
    response_model=QualificationResponse,
    summary="Qualify a client against all lenders",
    description="Evaluate a client profile against every lender in the catalog",
)
async def evaluate_qualification(
    request: QualificationRequest,
    service: Annotated[QualificationService, Depends(get_qualification_service)],
) -> QualificationResponse:
    """
    Qualify a client profile against the lender catalog.

    This endpoint:
    1. Evaluates the profile against every lender, criterion by criterion
    2. Summarizes the full batch (qualified count, average score, funding potential)
    3. Filters and orders the results for display
    """
    if service.catalog.is_empty:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No lenders loaded; upload a lender spreadsheet first",
        )

    try:
        report = service.qualify(
            profile=request.profile.to_domain(),
            specialty=request.specialty,
            only_qualified=request.only_qualified,
            sort_by=request.sort_by,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Qualification failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Qualification failed: {str(e)}",
        )

    return QualificationResponse(
        summary=QualificationSummaryResponse.model_validate(report.summary),
        results=[
            QualificationResultResponse.model_validate(result)
            for result in report.results
        ],
    )
