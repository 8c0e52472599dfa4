"""Geographic and industry restriction evaluator."""

from typing import List, Optional

from app.core.enums import Criterion
from app.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


def parse_state_list(restricted_states: Optional[str]) -> List[str]:
    """Split a comma-separated state list into trimmed, uppercased codes."""
    if not restricted_states:
        return []
    return [
        state.strip().upper()
        for state in restricted_states.split(",")
        if state.strip()
    ]


class GeographicEvaluator(RuleEvaluator):
    """
    Evaluator for geographic and industry-related criteria.

    Handles:
    - STATE_RESTRICTION: Client state against the lender's restricted states
    - INDUSTRY_RESTRICTION: Client descriptors against restricted industries

    Note: Industry matching is a plain substring test against the lender's
    free-text restriction list, not a taxonomy lookup.
    """

    def evaluate(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        if criterion == Criterion.STATE_RESTRICTION:
            return self._evaluate_state_restriction(context)
        elif criterion == Criterion.INDUSTRY_RESTRICTION:
            return self._evaluate_industry_restriction(context)
        raise self._unsupported(criterion)

    def _evaluate_state_restriction(
        self, context: EvaluationContext
    ) -> EvaluationResult:
        state = context.profile.company_state.strip().upper()
        restricted = parse_state_list(context.lender.restricted_states)

        if not restricted:
            return self._pass(
                f"State {state}: no state restrictions",
                actual=state,
                restricted=[],
            )

        if state in restricted:
            return self._fail(
                f"State {state} is restricted by this lender",
                actual=state,
                restricted=restricted,
            )
        return self._pass(
            f"State {state} is not restricted",
            actual=state,
            restricted=restricted,
        )

    def _evaluate_industry_restriction(
        self, context: EvaluationContext
    ) -> EvaluationResult:
        """
        Check whether any client descriptor appears in the restricted industries.

        Loan purpose, legal entity type and industry are each tested as a
        lowercase substring of the lender's restricted industries text.
        A missing industry is ignored; an empty loan purpose or entity type
        matches any restriction text.
        """
        restricted_text = context.lender.restricted_industries
        if not restricted_text or not restricted_text.strip():
            return self._pass(
                "Industry: no industry restrictions",
                restricted=None,
            )

        restricted = restricted_text.lower()
        profile = context.profile
        descriptors = [
            profile.loan_purpose,
            profile.legal_entity_type,
            profile.industry,
        ]

        for descriptor in descriptors:
            if not descriptor:
                continue
            if descriptor.lower() in restricted:
                return self._fail(
                    f"Industry: '{descriptor}' falls under restricted industries",
                    actual=descriptor,
                    restricted=restricted_text,
                )

        return self._pass(
            "Industry: not in restricted industries",
            restricted=restricted_text,
        )
