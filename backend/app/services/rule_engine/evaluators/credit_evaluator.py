"""Credit score evaluator."""

from app.core.enums import Criterion
from app.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)

# Applied when a lender publishes no minimum FICO.
BASELINE_MIN_FICO = 500


class CreditEvaluator(RuleEvaluator):
    """
    Evaluator for credit-related criteria.

    Handles:
    - FICO: Minimum FICO score, with a conservative baseline when the
      lender publishes none
    """

    def evaluate(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        if criterion == Criterion.FICO:
            return self._evaluate_fico(context)
        raise self._unsupported(criterion)

    def _evaluate_fico(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate the client's numeric credit score.

        Without a lender minimum, scores below 500 are still rejected.
        """
        score = context.credit_score
        min_fico = context.lender.min_fico
        shown = self._count(score)

        # A published minimum of 0 means no floor
        if min_fico is None or min_fico <= 0:
            if score < BASELINE_MIN_FICO:
                return self._fail(
                    f"Credit score {shown} is below the baseline minimum of {BASELINE_MIN_FICO}",
                    actual=score,
                    required=BASELINE_MIN_FICO,
                )
            return self._pass(
                f"Credit score {shown} (no minimum FICO specified)",
                actual=score,
                required=None,
            )

        required = self._count(min_fico)
        if score >= min_fico:
            return self._pass(
                f"Credit score {shown} meets minimum FICO of {required}",
                actual=score,
                required=min_fico,
            )
        return self._fail(
            f"Credit score {shown} is below minimum FICO of {required}",
            actual=score,
            required=min_fico,
            gap=min_fico - score,
        )
