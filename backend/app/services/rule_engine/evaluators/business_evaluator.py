"""Business rule evaluator for time in business and bank deposit criteria."""

from app.core.enums import Criterion
from app.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)

# Applied when a lender publishes no minimum monthly revenue.
BASELINE_MIN_MONTHLY_REVENUE = 10000


class BusinessEvaluator(RuleEvaluator):
    """
    Evaluator for business-related criteria.

    Handles:
    - TIME_IN_BUSINESS: Minimum business age in months
    - MONTHLY_REVENUE: Minimum average monthly deposits, with a baseline
    - DEPOSIT_COUNT: Minimum number of monthly deposits
    """

    def evaluate(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        if criterion == Criterion.TIME_IN_BUSINESS:
            return self._evaluate_time_in_business(context)
        elif criterion == Criterion.MONTHLY_REVENUE:
            return self._evaluate_monthly_revenue(context)
        elif criterion == Criterion.DEPOSIT_COUNT:
            return self._evaluate_deposit_count(context)
        raise self._unsupported(criterion)

    def _evaluate_time_in_business(
        self, context: EvaluationContext
    ) -> EvaluationResult:
        actual_months = context.business_age_months
        required_months = context.lender.time_in_business_months

        if required_months is None:
            return self._pass(
                f"Time in business: {actual_months} months (no minimum specified)",
                actual=actual_months,
                required=None,
            )

        required = self._count(required_months)
        if actual_months >= required_months:
            return self._pass(
                f"Time in business: {actual_months} months meets minimum of {required} months",
                actual=actual_months,
                required=required_months,
            )
        return self._fail(
            f"Time in business: {actual_months} months is below minimum of {required} months",
            actual=actual_months,
            required=required_months,
            gap=required_months - actual_months,
        )

    def _evaluate_monthly_revenue(
        self, context: EvaluationContext
    ) -> EvaluationResult:
        """
        Compare average monthly deposits against the lender minimum.

        Without a lender minimum, deposits under $10,000 are still rejected.
        """
        deposits = context.profile.avg_monthly_deposits
        required_revenue = context.lender.average_monthly_revenue
        actual = self._money(deposits)

        if required_revenue is None:
            if deposits < BASELINE_MIN_MONTHLY_REVENUE:
                return self._fail(
                    f"Monthly revenue {actual} is below the baseline minimum of "
                    f"{self._money(BASELINE_MIN_MONTHLY_REVENUE)}",
                    actual=deposits,
                    required=BASELINE_MIN_MONTHLY_REVENUE,
                )
            return self._pass(
                f"Monthly revenue {actual} (no minimum specified)",
                actual=deposits,
                required=None,
            )

        required = self._money(required_revenue)
        if deposits >= required_revenue:
            return self._pass(
                f"Monthly revenue {actual} meets minimum of {required}",
                actual=deposits,
                required=required_revenue,
            )
        return self._fail(
            f"Monthly revenue {actual} is below minimum of {required}",
            actual=deposits,
            required=required_revenue,
            gap=required_revenue - deposits,
        )

    def _evaluate_deposit_count(self, context: EvaluationContext) -> EvaluationResult:
        """
        Compare the monthly deposit count against the lender minimum.

        An unknown client deposit count is not penalized.
        """
        deposit_count = context.profile.avg_monthly_deposit_count
        required_count = context.lender.monthly_deposits_required

        if required_count is None:
            return self._pass(
                "Monthly deposits: no minimum count specified",
                actual=deposit_count,
                required=None,
            )

        required = self._count(required_count)
        if deposit_count is None:
            return self._pass(
                f"Monthly deposits: count not provided (lender requires {required})",
                actual=None,
                required=required_count,
            )

        actual = self._count(deposit_count)
        if deposit_count >= required_count:
            return self._pass(
                f"Monthly deposits: {actual} meets minimum of {required}",
                actual=deposit_count,
                required=required_count,
            )
        return self._fail(
            f"Monthly deposits: {actual} is below minimum of {required}",
            actual=deposit_count,
            required=required_count,
            gap=required_count - deposit_count,
        )
