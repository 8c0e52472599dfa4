"""Qualification result domain models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from app.core.enums import ProfileStrength


@dataclass(frozen=True)
class QualificationResult:
    """
    Verdict for a single (client, lender) pair.

    Attributes:
        is_qualified: True only when every criterion evaluator passed
        match_score: Percentage (0-100) of pass/fail outcomes that passed
        matched_criteria: Explanations of passed checks, in evaluator order
        failed_criteria: Explanations of failed checks, in evaluator order
        warnings: Non-disqualifying caution notes
        evidence: Actual vs. required values per criterion, keyed by
            criterion name
    """

    lender_name: str
    specialty: Optional[str]
    is_qualified: bool
    match_score: int
    matched_criteria: List[str] = field(default_factory=list)
    failed_criteria: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    min_funding: Optional[float] = None
    max_funding: Optional[float] = None
    payment_type: Optional[str] = None
    evidence: Dict[str, Dict[str, Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class QualificationSummary:
    """Aggregate statistics over one evaluation batch."""

    total_lenders: int
    qualified_lenders: int
    avg_match_score: int
    funding_potential: float
    profile_strength: ProfileStrength
