"""Lender criteria domain model parsed from the lender spreadsheet."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LenderCriteria:
    """
    Eligibility rules published by a single lender.

    Every threshold is optional: None means the lender does not publish or
    enforce that constraint. Instances are immutable once parsed.
    """

    lender_name: str
    specialty: Optional[str] = None

    # Hard thresholds
    min_fico: Optional[float] = None
    min_sbss: Optional[float] = None
    time_in_business_months: Optional[float] = None
    negative_days: Optional[float] = None
    monthly_deposits_required: Optional[float] = None
    average_monthly_revenue: Optional[float] = None
    average_daily_balances: Optional[float] = None

    # Industry and geography
    preferred_industries: Optional[str] = None
    restricted_industries: Optional[str] = None
    restricted_industry_exceptions: Optional[str] = None
    restricted_states: Optional[str] = None

    # Ownership, positions and credit history
    ownership_requirement_pct: Optional[float] = None
    number_of_positions: Optional[float] = None
    allows_bankruptcies: Optional[bool] = None
    tax_liens_limit: Optional[float] = None

    # Funding terms
    min_funding_size: Optional[float] = None
    max_funding_size: Optional[float] = None
    auto_decline_reasons: Optional[str] = None
    holdback_percentage: Optional[str] = None
    payment_type: Optional[str] = None
    consolidation_positions: Optional[float] = None
    additional_information: Optional[str] = None

    def __repr__(self) -> str:
        return f"<LenderCriteria(lender_name={self.lender_name!r}, specialty={self.specialty!r})>"
