"""Core enums for type safety across the application."""

from enum import Enum


class CreditBucket(str, Enum):
    """Self-reported credit score ranges collected on the intake form."""

    EXCELLENT = "700+"
    GOOD = "650-700"
    FAIR = "600-650"
    POOR = "550-600"
    VERY_POOR = "Below 550"


class Criterion(str, Enum):
    """Qualification criteria checked for every lender."""

    FICO = "fico"
    TIME_IN_BUSINESS = "time_in_business"
    MONTHLY_REVENUE = "monthly_revenue"
    DEPOSIT_COUNT = "deposit_count"
    FUNDING_AMOUNT = "funding_amount"
    STATE_RESTRICTION = "state_restriction"
    INDUSTRY_RESTRICTION = "industry_restriction"
    FINANCIAL_HISTORY = "financial_history"
    EXISTING_POSITIONS = "existing_positions"


class ResultSortOrder(str, Enum):
    """Display orderings for qualification results."""

    RANKED = "ranked"
    MATCH = "match"
    NAME = "name"
    FUNDING = "funding"


class ProfileStrength(str, Enum):
    """Overall client profile strength based on qualified lender count."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
