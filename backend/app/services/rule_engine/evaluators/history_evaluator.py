"""Financial history evaluator for bankruptcy and credit event signals."""

from app.core.enums import Criterion
from app.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class HistoryEvaluator(RuleEvaluator):
    """
    Evaluator for the client's financial history.

    Handles:
    - FINANCIAL_HISTORY: Bankruptcy policy plus cautionary signals

    Only the bankruptcy check can disqualify. Tax liens and judgements
    count as passed checks when absent and warn when present. An
    unsatisfied MCA default or a home-based business only warns.
    """

    def evaluate(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        if criterion == Criterion.FINANCIAL_HISTORY:
            return self._evaluate_financial_history(context)
        raise self._unsupported(criterion)

    def _evaluate_financial_history(
        self, context: EvaluationContext
    ) -> EvaluationResult:
        profile = context.profile
        # Unknown bankruptcy policy is treated as not allowed
        allows_bankruptcies = context.lender.allows_bankruptcies is True

        result = EvaluationResult(
            passed=True,
            evidence={
                "has_bankruptcy": profile.has_bankruptcy_foreclosure_3y,
                "allows_bankruptcies": context.lender.allows_bankruptcies,
            },
        )

        if profile.has_bankruptcy_foreclosure_3y:
            if allows_bankruptcies:
                result.warnings.append(
                    "Bankruptcy or foreclosure in the last 3 years (lender allows bankruptcies)"
                )
            else:
                result.passed = False
                result.failed.append(
                    "Bankruptcy or foreclosure in the last 3 years is not accepted by this lender"
                )
        else:
            result.matched.append("No bankruptcy or foreclosure in the last 3 years")

        if profile.has_tax_liens:
            result.warnings.append("Tax liens present")
        else:
            result.matched.append("No tax liens")
        if profile.has_active_judgements:
            result.warnings.append("Active judgements present")
        else:
            result.matched.append("No active judgements")
        if profile.has_defaulted_mca and not profile.mca_was_satisfied:
            result.warnings.append("Previous MCA default has not been satisfied")
        if profile.is_home_based:
            result.warnings.append("Home-based business")

        return result
