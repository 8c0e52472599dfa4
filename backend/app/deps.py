"""Dependency injection for FastAPI endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from app.services.catalog_service import LenderCatalog
from app.services.qualification_service import QualificationService


def get_catalog(request: Request) -> LenderCatalog:
    """
    Get the lender catalog loaded at application startup.

    The catalog lives on the application state so uploads are visible to
    every subsequent request.
    """
    return request.app.state.catalog


def get_qualification_service(
    catalog: Annotated[LenderCatalog, Depends(get_catalog)],
) -> QualificationService:
    """Get a qualification service bound to the current catalog."""
    return QualificationService(catalog)
