"""Qualification service for evaluating a client against the lender catalog."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from app.core.enums import ResultSortOrder
from app.models.domain.client import ClientProfile
from app.models.domain.qualification import QualificationResult, QualificationSummary
from app.services.catalog_service import LenderCatalog
from app.services.rule_engine import (
    QualificationEngine,
    filter_results,
    order_results,
    summarize_results,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QualificationReport:
    """
    Qualification outcome for one client.

    Attributes:
        summary: Statistics over every evaluated lender, before filtering
        results: Filtered and ordered results for display
    """

    summary: QualificationSummary
    results: List[QualificationResult]


class QualificationService:
    """
    Qualification service coordinating the engine with the lender catalog.

    Provides the calling-layer workflow: evaluate every lender, summarize
    the full batch, then filter and order results for display.
    """

    def __init__(
        self,
        catalog: LenderCatalog,
        engine: Optional[QualificationEngine] = None,
    ):
        """
        Initialize the qualification service.

        Args:
            catalog: Lender catalog to evaluate against
            engine: Qualification engine (a default engine if omitted)
        """
        self.catalog = catalog
        self.engine = engine or QualificationEngine()

    def qualify(
        self,
        profile: ClientProfile,
        specialty: Optional[str] = None,
        only_qualified: bool = False,
        sort_by: Union[ResultSortOrder, str] = ResultSortOrder.RANKED,
        today: Optional[date] = None,
    ) -> QualificationReport:
        """
        Qualify a client profile against the whole catalog.

        Args:
            profile: Client profile to evaluate
            specialty: Only show lenders with this specialty
            only_qualified: Only show qualified lenders
            sort_by: Display ordering
            today: Reference date for business age (defaults to today)

        Returns:
            QualificationReport with summary and display results

        Raises:
            ValueError: If the catalog is empty or sort_by is unknown
        """
        if self.catalog.is_empty:
            raise ValueError("Lender catalog is empty")

        results = self.engine.evaluate_all_lenders(
            profile, self.catalog.lenders, today
        )
        summary = summarize_results(
            results, profile.avg_annual_revenue, profile.capital_requested
        )
        shown = order_results(
            filter_results(results, specialty, only_qualified), sort_by
        )

        logger.info(
            f"Qualified {profile.company_name}: {summary.qualified_lenders}/"
            f"{summary.total_lenders} lenders, strength {summary.profile_strength.value}"
        )
        return QualificationReport(summary=summary, results=shown)
