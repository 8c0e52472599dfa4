"""Pydantic schemas for lender catalog responses."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class LenderCriteriaResponse(BaseModel):
    """Schema for a lender's published criteria."""

    lender_name: str
    specialty: Optional[str] = None
    min_fico: Optional[float] = None
    min_sbss: Optional[float] = None
    time_in_business_months: Optional[float] = None
    negative_days: Optional[float] = None
    monthly_deposits_required: Optional[float] = None
    average_monthly_revenue: Optional[float] = None
    average_daily_balances: Optional[float] = None
    preferred_industries: Optional[str] = None
    restricted_industries: Optional[str] = None
    restricted_industry_exceptions: Optional[str] = None
    restricted_states: Optional[str] = None
    ownership_requirement_pct: Optional[float] = None
    number_of_positions: Optional[float] = None
    allows_bankruptcies: Optional[bool] = None
    tax_liens_limit: Optional[float] = None
    min_funding_size: Optional[float] = None
    max_funding_size: Optional[float] = None
    auto_decline_reasons: Optional[str] = None
    holdback_percentage: Optional[str] = None
    payment_type: Optional[str] = None
    consolidation_positions: Optional[float] = None
    additional_information: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LenderListResponse(BaseModel):
    """Schema for the lender catalog listing."""

    total: int
    lenders: List[LenderCriteriaResponse]


class SpecialtyListResponse(BaseModel):
    """Schema for the specialties present in the catalog."""

    specialties: List[str]


class CatalogUploadResponse(BaseModel):
    """Schema for the result of a lender spreadsheet upload."""

    filename: str
    rows_read: int
    lenders_loaded: int
    rows_skipped: int

    model_config = ConfigDict(from_attributes=True)
