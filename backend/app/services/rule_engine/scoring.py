"""Scoring, funding potential and result statistics for qualification results."""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence, Union

from app.core.enums import ProfileStrength, ResultSortOrder
from app.models.domain.qualification import QualificationResult, QualificationSummary

# Revenue-based ceiling on any single funding estimate.
REVENUE_CAP_MULTIPLIER = Decimal("1.5")
# Stand-in ceiling for lenders that publish no maximum funding size.
UNLIMITED_FUNDING_SENTINEL = 5_000_000

EXCELLENT_PROFILE_THRESHOLD = 20
GOOD_PROFILE_THRESHOLD = 10


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_match_score(passed: int, failed: int) -> int:
    """
    Percentage of pass/fail outcomes that passed, rounded half up.

    Warnings are not counted. Returns 0 when nothing was counted.
    """
    total = passed + failed
    if total == 0:
        return 0
    return _round_half_up(Decimal(100 * passed) / Decimal(total))


def calculate_funding_potential(
    results: Sequence[QualificationResult],
    annual_revenue: float,
    capital_requested: float,
) -> float:
    """
    Advisory maximum funding estimate across qualified lenders.

    Each qualified lender contributes min(max_funding, 1.5 x annual revenue),
    with a missing max_funding treated as 5,000,000. When the evaluation is
    non-empty but yields no positive estimate, falls back to
    min(capital_requested, 1.5 x annual revenue).

    Args:
        results: Results from one evaluation batch
        annual_revenue: Client's stated annual revenue
        capital_requested: Client's requested capital

    Returns:
        Estimated maximum funding, 0.0 for an empty evaluation
    """
    if not results:
        return 0.0

    revenue_cap = Decimal(str(annual_revenue)) * REVENUE_CAP_MULTIPLIER

    estimate = Decimal("0")
    for result in results:
        if not result.is_qualified:
            continue
        lender_max = (
            result.max_funding
            if result.max_funding is not None
            else UNLIMITED_FUNDING_SENTINEL
        )
        ceiling = min(Decimal(str(lender_max)), revenue_cap)
        estimate = max(estimate, ceiling)

    if estimate <= 0:
        estimate = min(Decimal(str(capital_requested)), revenue_cap)

    return float(estimate)


def classify_profile_strength(qualified_count: int) -> ProfileStrength:
    """Classify the client profile by how many lenders it qualifies for."""
    if qualified_count > EXCELLENT_PROFILE_THRESHOLD:
        return ProfileStrength.EXCELLENT
    elif qualified_count > GOOD_PROFILE_THRESHOLD:
        return ProfileStrength.GOOD
    elif qualified_count > 0:
        return ProfileStrength.FAIR
    return ProfileStrength.POOR


def summarize_results(
    results: Sequence[QualificationResult],
    annual_revenue: float,
    capital_requested: float,
) -> QualificationSummary:
    """
    Build aggregate statistics for one evaluation batch.

    Args:
        results: Results from one evaluation batch, before any filtering
        annual_revenue: Client's stated annual revenue
        capital_requested: Client's requested capital

    Returns:
        QualificationSummary with counts, average score and funding estimate
    """
    total = len(results)
    qualified = sum(1 for result in results if result.is_qualified)

    if total:
        score_sum = sum(result.match_score for result in results)
        avg_match_score = _round_half_up(Decimal(score_sum) / Decimal(total))
    else:
        avg_match_score = 0

    return QualificationSummary(
        total_lenders=total,
        qualified_lenders=qualified,
        avg_match_score=avg_match_score,
        funding_potential=calculate_funding_potential(
            results, annual_revenue, capital_requested
        ),
        profile_strength=classify_profile_strength(qualified),
    )


def order_results(
    results: Sequence[QualificationResult],
    sort_by: Union[ResultSortOrder, str] = ResultSortOrder.RANKED,
) -> List[QualificationResult]:
    """
    Reorder results for display. All orderings are stable.

    Raises:
        ValueError: If sort_by is not a known ordering
    """
    sort_by = ResultSortOrder(sort_by)

    if sort_by == ResultSortOrder.MATCH:
        return sorted(results, key=lambda x: -x.match_score)
    elif sort_by == ResultSortOrder.NAME:
        return sorted(results, key=lambda x: x.lender_name.casefold())
    elif sort_by == ResultSortOrder.FUNDING:
        return sorted(results, key=lambda x: x.min_funding or 0)
    return list(results)


def filter_results(
    results: Sequence[QualificationResult],
    specialty: Optional[str] = None,
    only_qualified: bool = False,
) -> List[QualificationResult]:
    """Keep results matching a specialty and, optionally, only qualified ones."""
    filtered = list(results)
    if specialty:
        filtered = [result for result in filtered if result.specialty == specialty]
    if only_qualified:
        filtered = [result for result in filtered if result.is_qualified]
    return filtered
