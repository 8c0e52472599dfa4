"""Pydantic schemas for client profile input."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.core.enums import CreditBucket
from app.models.domain.client import ClientProfile


class ClientProfileRequest(BaseModel):
    """Schema for a client profile submitted for qualification."""

    id: Optional[str] = None
    client_name: str = Field(..., min_length=1, max_length=255)
    company_name: str = Field(..., min_length=1, max_length=255)
    company_state: str = Field(..., min_length=2, max_length=2, pattern="^[A-Z]{2}$")
    company_city: Optional[str] = Field(None, max_length=100)
    legal_entity_type: str = Field(..., min_length=1, max_length=100)
    industry: Optional[str] = Field(None, max_length=255)
    employees_count: Optional[int] = Field(None, ge=0)
    is_home_based: bool = False
    business_start_date: date

    capital_requested: float = Field(..., ge=0)
    loan_purpose: str = Field(..., min_length=1, max_length=255)
    avg_monthly_deposits: float = Field(..., ge=0)
    avg_annual_revenue: float = Field(..., ge=0)
    avg_monthly_deposit_count: Optional[float] = Field(None, ge=0)

    credit_score: CreditBucket
    exact_credit_score: Optional[float] = Field(None, ge=300, le=850)

    has_existing_loans: bool = False
    has_defaulted_mca: bool = False
    mca_was_satisfied: Optional[bool] = None
    has_reduced_mca_payments: Optional[bool] = None
    owns_real_estate: Optional[bool] = None
    has_personal_debt_over_75k: Optional[bool] = None
    has_bankruptcy_foreclosure_3y: bool = False
    has_tax_liens: bool = False
    has_active_judgements: bool = False
    has_zbl: Optional[bool] = None

    proposed_loan_type: Optional[str] = Field(None, max_length=100)
    funding_eta: Optional[str] = Field(None, max_length=50)
    additional_notes: Optional[str] = None

    @field_validator("company_state", mode="before")
    @classmethod
    def validate_state(cls, v):
        """Ensure state is uppercase."""
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("business_start_date")
    @classmethod
    def validate_start_date(cls, v: date) -> date:
        """Business start date cannot be in the future."""
        if v > date.today():
            raise ValueError("business_start_date cannot be in the future")
        return v

    def to_domain(self) -> ClientProfile:
        """Convert to the ClientProfile used by the qualification engine."""
        data = self.model_dump()
        data["business_start_date"] = self.business_start_date.isoformat()
        data["credit_score"] = self.credit_score.value
        return ClientProfile(**data)
