"""Loan structure evaluator for funding amount and existing position criteria."""

from app.core.enums import Criterion
from app.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class LoanEvaluator(RuleEvaluator):
    """
    Evaluator for loan structure criteria.

    Handles:
    - FUNDING_AMOUNT: Requested capital against the lender's funding range
    - EXISTING_POSITIONS: Lender position limit against existing loans

    Note: The client profile records whether loans exist, not how many,
    so the position limit can only produce a warning.
    """

    def evaluate(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        if criterion == Criterion.FUNDING_AMOUNT:
            return self._evaluate_funding_amount(context)
        elif criterion == Criterion.EXISTING_POSITIONS:
            return self._evaluate_existing_positions(context)
        raise self._unsupported(criterion)

    def _evaluate_funding_amount(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate requested capital against the lender's min and max funding.

        Below the minimum fails. Above the maximum only warns.
        """
        requested = context.profile.capital_requested
        min_funding = context.lender.min_funding_size
        max_funding = context.lender.max_funding_size
        amount = self._money(requested)

        result = EvaluationResult(
            passed=True,
            evidence={"actual": requested, "min": min_funding, "max": max_funding},
        )

        if min_funding is None and max_funding is None:
            result.matched.append(
                f"Funding amount {amount} (no funding range specified)"
            )
            return result

        if min_funding is not None:
            if requested < min_funding:
                result.passed = False
                result.failed.append(
                    f"Funding amount {amount} is below minimum of {self._money(min_funding)}"
                )
            else:
                result.matched.append(
                    f"Funding amount {amount} meets minimum of {self._money(min_funding)}"
                )

        if max_funding is not None:
            if requested > max_funding:
                result.warnings.append(
                    f"Funding amount {amount} exceeds maximum of {self._money(max_funding)}"
                )
            else:
                result.matched.append(
                    f"Funding amount {amount} is within maximum of {self._money(max_funding)}"
                )

        return result

    def _evaluate_existing_positions(
        self, context: EvaluationContext
    ) -> EvaluationResult:
        limit = context.lender.number_of_positions
        has_loans = context.profile.has_existing_loans

        if limit is None:
            return self._pass(
                "Existing positions: no position limit specified",
                actual=has_loans,
                required=None,
            )

        shown = self._count(limit)
        if has_loans:
            return EvaluationResult(
                passed=True,
                warnings=[
                    f"Existing loans reported; lender allows at most {shown} "
                    f"position(s), verify current position count"
                ],
                evidence={"actual": has_loans, "required": limit},
            )
        return self._pass(
            f"Existing positions: no existing loans (lender allows up to {shown})",
            actual=has_loans,
            required=limit,
        )
