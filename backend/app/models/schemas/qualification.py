"""Pydantic schemas for qualification requests and results."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import ProfileStrength, ResultSortOrder
from app.models.schemas.client import ClientProfileRequest


class QualificationRequest(BaseModel):
    """Schema for a qualification request with display options."""

    profile: ClientProfileRequest
    specialty: Optional[str] = Field(None, max_length=100)
    only_qualified: bool = False
    sort_by: ResultSortOrder = ResultSortOrder.RANKED


class QualificationResultResponse(BaseModel):
    """Schema for one lender's qualification verdict."""

    lender_name: str
    specialty: Optional[str] = None
    is_qualified: bool
    match_score: int = Field(..., ge=0, le=100)
    matched_criteria: List[str]
    failed_criteria: List[str]
    warnings: List[str]
    min_funding: Optional[float] = None
    max_funding: Optional[float] = None
    payment_type: Optional[str] = None
    evidence: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True)


class QualificationSummaryResponse(BaseModel):
    """Schema for aggregate statistics over all evaluated lenders."""

    total_lenders: int
    qualified_lenders: int
    avg_match_score: int
    funding_potential: float
    profile_strength: ProfileStrength

    model_config = ConfigDict(from_attributes=True)


class QualificationResponse(BaseModel):
    """Schema for a full qualification report."""

    summary: QualificationSummaryResponse
    results: List[QualificationResultResponse]

    model_config = ConfigDict(from_attributes=True)
