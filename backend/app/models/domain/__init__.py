"""Domain models for the application."""

from app.models.domain.client import ClientProfile
from app.models.domain.lender import LenderCriteria
from app.models.domain.qualification import QualificationResult, QualificationSummary

__all__ = [
    "ClientProfile",
    "LenderCriteria",
    "QualificationResult",
    "QualificationSummary",
]
