"""Qualification engine orchestrating criterion evaluators per lender."""

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from app.core.enums import Criterion
from app.models.domain.client import ClientProfile
from app.models.domain.lender import LenderCriteria
from app.models.domain.qualification import QualificationResult
from app.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from app.services.rule_engine.evaluators import (
    BusinessEvaluator,
    CreditEvaluator,
    GeographicEvaluator,
    HistoryEvaluator,
    LoanEvaluator,
)
from app.services.rule_engine.scoring import calculate_match_score

logger = logging.getLogger(__name__)

# Evaluation order fixes the order of explanation strings in every result.
EVALUATION_ORDER = (
    Criterion.FICO,
    Criterion.TIME_IN_BUSINESS,
    Criterion.MONTHLY_REVENUE,
    Criterion.DEPOSIT_COUNT,
    Criterion.FUNDING_AMOUNT,
    Criterion.STATE_RESTRICTION,
    Criterion.INDUSTRY_RESTRICTION,
    Criterion.FINANCIAL_HISTORY,
    Criterion.EXISTING_POSITIONS,
)


class QualificationEngine:
    """
    Qualification engine orchestrating criterion evaluations.

    This class:
    - Maintains a registry of criterion evaluators
    - Runs every criterion for every lender, without short-circuiting
    - Aggregates outcomes into a QualificationResult
    - Ranks qualified lenders ahead of unqualified ones
    """

    def __init__(self):
        """Initialize the engine with the default evaluator registry."""
        self._evaluators: Dict[Criterion, RuleEvaluator] = {}
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register default evaluators for all criteria."""
        credit_evaluator = CreditEvaluator()
        self._evaluators[Criterion.FICO] = credit_evaluator

        business_evaluator = BusinessEvaluator()
        self._evaluators[Criterion.TIME_IN_BUSINESS] = business_evaluator
        self._evaluators[Criterion.MONTHLY_REVENUE] = business_evaluator
        self._evaluators[Criterion.DEPOSIT_COUNT] = business_evaluator

        loan_evaluator = LoanEvaluator()
        self._evaluators[Criterion.FUNDING_AMOUNT] = loan_evaluator
        self._evaluators[Criterion.EXISTING_POSITIONS] = loan_evaluator

        geographic_evaluator = GeographicEvaluator()
        self._evaluators[Criterion.STATE_RESTRICTION] = geographic_evaluator
        self._evaluators[Criterion.INDUSTRY_RESTRICTION] = geographic_evaluator

        self._evaluators[Criterion.FINANCIAL_HISTORY] = HistoryEvaluator()

    def register_evaluator(self, criterion: Criterion, evaluator: RuleEvaluator) -> None:
        """
        Register a custom evaluator for a specific criterion.

        Args:
            criterion: The criterion to handle
            evaluator: The evaluator instance
        """
        self._evaluators[criterion] = evaluator

    def evaluate_criterion(
        self, context: EvaluationContext, criterion: Criterion
    ) -> EvaluationResult:
        """
        Evaluate a single criterion for a prepared context.

        Raises:
            ValueError: If no evaluator is registered for the criterion
        """
        evaluator = self._evaluators.get(criterion)
        if evaluator is None:
            raise ValueError(f"No evaluator registered for criterion: {criterion.value}")
        return evaluator.evaluate(context, criterion)

    def evaluate_lender(
        self,
        profile: ClientProfile,
        lender: LenderCriteria,
        today: Optional[date] = None,
    ) -> QualificationResult:
        """
        Evaluate one lender against a client profile.

        Args:
            profile: The client profile to evaluate
            lender: The lender criteria to evaluate against
            today: Reference date for business age (defaults to today)

        Returns:
            QualificationResult with every criterion's explanation
        """
        context = EvaluationContext.build(profile, lender, today)

        matched: List[str] = []
        failed: List[str] = []
        warnings: List[str] = []
        evidence: Dict[str, dict] = {}
        is_qualified = True

        for criterion in EVALUATION_ORDER:
            outcome = self.evaluate_criterion(context, criterion)
            matched.extend(outcome.matched)
            failed.extend(outcome.failed)
            warnings.extend(outcome.warnings)
            evidence[criterion.value] = outcome.evidence
            if not outcome.passed:
                is_qualified = False

        match_score = calculate_match_score(len(matched), len(failed))
        logger.debug(
            f"Lender {lender.lender_name}: qualified={is_qualified}, score={match_score}"
        )

        return QualificationResult(
            lender_name=lender.lender_name,
            specialty=lender.specialty,
            is_qualified=is_qualified,
            match_score=match_score,
            matched_criteria=matched,
            failed_criteria=failed,
            warnings=warnings,
            min_funding=lender.min_funding_size,
            max_funding=lender.max_funding_size,
            payment_type=lender.payment_type,
            evidence=evidence,
        )

    def evaluate_all_lenders(
        self,
        profile: ClientProfile,
        lenders: Sequence[LenderCriteria],
        today: Optional[date] = None,
    ) -> List[QualificationResult]:
        """
        Evaluate every lender and rank the results.

        Qualified lenders come first, then higher match scores. Ties keep
        catalog order.

        Args:
            profile: The client profile to evaluate
            lenders: The lender catalog
            today: Reference date for business age (defaults to today)

        Returns:
            Ranked list of QualificationResult, one per lender
        """
        today = today or date.today()
        results = [self.evaluate_lender(profile, lender, today) for lender in lenders]
        results.sort(key=lambda x: (not x.is_qualified, -x.match_score))

        qualified = sum(1 for result in results if result.is_qualified)
        logger.info(
            f"Evaluated {len(results)} lenders for {profile.company_name}: "
            f"{qualified} qualified"
        )
        return results


_default_engine = QualificationEngine()


def evaluate_lender(
    profile: ClientProfile,
    lender: LenderCriteria,
    today: Optional[date] = None,
) -> QualificationResult:
    """Evaluate one lender with the default engine."""
    return _default_engine.evaluate_lender(profile, lender, today)


def evaluate_all_lenders(
    profile: ClientProfile,
    lenders: Sequence[LenderCriteria],
    today: Optional[date] = None,
) -> List[QualificationResult]:
    """Evaluate and rank every lender with the default engine."""
    return _default_engine.evaluate_all_lenders(profile, lenders, today)
