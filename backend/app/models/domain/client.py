"""Client profile domain model used as qualification input."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClientProfile:
    """
    Snapshot of an applicant's business and financial situation.

    Built fresh for each evaluation from a form submission or a stored
    record. Nullable risk flags mean the question was not asked.

    Attributes:
        business_start_date: ISO-8601 date (a datetime string is accepted,
            only the date part is used). Business age is always derived.
        credit_score: Self-reported credit bucket, e.g. "650-700".
        exact_credit_score: Exact score; takes precedence over the bucket.
    """

    client_name: str
    company_name: str
    company_state: str
    capital_requested: float
    loan_purpose: str
    avg_monthly_deposits: float
    avg_annual_revenue: float
    legal_entity_type: str
    business_start_date: str
    credit_score: str

    id: Optional[str] = None
    company_city: Optional[str] = None
    industry: Optional[str] = None
    employees_count: Optional[int] = None
    is_home_based: bool = False
    avg_monthly_deposit_count: Optional[float] = None
    exact_credit_score: Optional[float] = None

    # Risk flags
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

    # Narrative
    proposed_loan_type: Optional[str] = None
    funding_eta: Optional[str] = None
    additional_notes: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"<ClientProfile(company_name={self.company_name!r}, "
            f"state={self.company_state!r}, capital={self.capital_requested})>"
        )
