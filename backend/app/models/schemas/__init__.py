"""Pydantic schemas for API validation and serialization."""

from app.models.schemas.client import ClientProfileRequest
from app.models.schemas.lender import (
    CatalogUploadResponse,
    LenderCriteriaResponse,
    LenderListResponse,
    SpecialtyListResponse,
)
from app.models.schemas.qualification import (
    QualificationRequest,
    QualificationResponse,
    QualificationResultResponse,
    QualificationSummaryResponse,
)

__all__ = [
    "CatalogUploadResponse",
    "ClientProfileRequest",
    "LenderCriteriaResponse",
    "LenderListResponse",
    "QualificationRequest",
    "QualificationResponse",
    "QualificationResultResponse",
    "QualificationSummaryResponse",
    "SpecialtyListResponse",
]
