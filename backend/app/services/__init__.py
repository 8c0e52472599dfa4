"""Service layer for business logic."""

from app.services.catalog_service import CatalogLoadStats, LenderCatalog
from app.services.qualification_service import QualificationReport, QualificationService

__all__ = [
    "CatalogLoadStats",
    "LenderCatalog",
    "QualificationReport",
    "QualificationService",
]
