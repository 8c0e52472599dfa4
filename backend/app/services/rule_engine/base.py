"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Union

from app.core.enums import CreditBucket, Criterion
from app.models.domain.client import ClientProfile
from app.models.domain.lender import LenderCriteria

CREDIT_BUCKET_FLOORS = {
    CreditBucket.EXCELLENT.value: 700,
    CreditBucket.GOOD.value: 650,
    CreditBucket.FAIR.value: 600,
    CreditBucket.POOR.value: 550,
    CreditBucket.VERY_POOR.value: 500,
}
DEFAULT_CREDIT_FLOOR = 500


def calculate_business_age_months(
    business_start_date: Union[str, date],
    today: Optional[date] = None,
) -> int:
    """
    Calendar months between the business start date and today.

    Only year and month count; the day of month is ignored.

    A start date in the future yields 0, never a negative age.

    Raises:
        ValueError: If the start date is not an ISO-8601 date
    """
    if isinstance(business_start_date, datetime):
        start = business_start_date.date()
    elif isinstance(business_start_date, date):
        start = business_start_date
    else:
        start = date.fromisoformat(business_start_date.strip()[:10])

    today = today or date.today()
    months = (today.year - start.year) * 12 + today.month - start.month
    return max(0, months)


def credit_score_to_numeric(
    credit_score: Optional[str],
    exact_credit_score: Optional[float] = None,
) -> float:
    """
    Numeric credit score used for evaluation.

    The exact score wins when present; otherwise the bucket maps to its
    floor value. Unrecognized buckets fall back to 500.
    """
    if exact_credit_score is not None:
        return exact_credit_score
    if isinstance(credit_score, CreditBucket):
        credit_score = credit_score.value
    return CREDIT_BUCKET_FLOORS.get(credit_score, DEFAULT_CREDIT_FLOOR)


@dataclass(frozen=True)
class EvaluationContext:
    """
    Derived values for one (client, lender) pair, computed once.

    Attributes:
        profile: The client profile being evaluated
        lender: The lender criteria being evaluated against
        business_age_months: Calendar months since the business started
        credit_score: Exact credit score, or the bucket floor
    """

    profile: ClientProfile
    lender: LenderCriteria
    business_age_months: int
    credit_score: float

    @classmethod
    def build(
        cls,
        profile: ClientProfile,
        lender: LenderCriteria,
        today: Optional[date] = None,
    ) -> "EvaluationContext":
        return cls(
            profile=profile,
            lender=lender,
            business_age_months=calculate_business_age_months(
                profile.business_start_date, today
            ),
            credit_score=credit_score_to_numeric(
                profile.credit_score, profile.exact_credit_score
            ),
        )


@dataclass
class EvaluationResult:
    """
    Outcome of one criterion evaluator.

    Attributes:
        passed: False only when this criterion disqualifies the lender
        matched: Explanations counted as passed checks
        failed: Explanations counted as failed checks
        warnings: Caution notes that never affect qualification
        evidence: Actual vs. required values for debugging
    """

    passed: bool
    matched: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    evidence: dict = field(default_factory=dict)


class RuleEvaluator(ABC):
    """
    Abstract base class for criterion evaluators.

    Each concrete evaluator handles one group of related criteria and
    dispatches on the Criterion it is asked to evaluate. Evaluators hold
    no state and never raise on missing lender data.
    """

    @abstractmethod
    def evaluate(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        """
        Evaluate one criterion for the given context.

        Raises:
            ValueError: If the evaluator does not handle the criterion
        """

    def _unsupported(self, criterion: Criterion) -> ValueError:
        return ValueError(
            f"{type(self).__name__} cannot handle criterion: {criterion.value}"
        )

    @staticmethod
    def _pass(reason: str, **evidence) -> EvaluationResult:
        return EvaluationResult(passed=True, matched=[reason], evidence=evidence)

    @staticmethod
    def _fail(reason: str, **evidence) -> EvaluationResult:
        return EvaluationResult(passed=False, failed=[reason], evidence=evidence)

    @staticmethod
    def _money(amount: float) -> str:
        if amount == int(amount):
            return f"${amount:,.0f}"
        return f"${amount:,.2f}"

    @staticmethod
    def _count(value: float) -> str:
        return f"{value:g}"
