"""Rule engine for qualifying client profiles against lender criteria."""

from .base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
    calculate_business_age_months,
    credit_score_to_numeric,
)
from .engine import (
    EVALUATION_ORDER,
    QualificationEngine,
    evaluate_all_lenders,
    evaluate_lender,
)
from .scoring import (
    calculate_funding_potential,
    calculate_match_score,
    classify_profile_strength,
    filter_results,
    order_results,
    summarize_results,
)

__all__ = [
    "EVALUATION_ORDER",
    "EvaluationContext",
    "EvaluationResult",
    "QualificationEngine",
    "RuleEvaluator",
    "calculate_business_age_months",
    "calculate_funding_potential",
    "calculate_match_score",
    "classify_profile_strength",
    "credit_score_to_numeric",
    "evaluate_all_lenders",
    "evaluate_lender",
    "filter_results",
    "order_results",
    "summarize_results",
]
