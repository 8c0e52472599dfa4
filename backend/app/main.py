"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.config import settings
from app.services.catalog_service import LenderCatalog

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def load_catalog() -> LenderCatalog:
    """
    Build the startup catalog from the JSON cache or the lender spreadsheet.

    The cache is preferred. A missing or unreadable source leaves the
    catalog empty until a spreadsheet is uploaded.
    """
    catalog = LenderCatalog()

    if settings.LENDER_CACHE_PATH:
        try:
            if catalog.load_cache(settings.LENDER_CACHE_PATH):
                return catalog
        except ValueError as e:
            logger.error(f"Invalid lender cache {settings.LENDER_CACHE_PATH}: {e}")

    if settings.LENDER_SPREADSHEET_PATH:
        try:
            catalog.load_spreadsheet(settings.LENDER_SPREADSHEET_PATH)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load lender spreadsheet: {e}", exc_info=True)
            return catalog
        if settings.LENDER_CACHE_PATH:
            catalog.save_cache(settings.LENDER_CACHE_PATH)

    if catalog.is_empty:
        logger.warning("Starting with an empty lender catalog")
    return catalog


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.catalog = load_catalog()
    yield


# Create FastAPI application
app = FastAPI(
    title="Lender Qualification API",
    description="API for qualifying business funding clients against lender criteria",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Lender Qualification API",
        "version": "1.0.0",
        "docs": "/api/docs",
    }
