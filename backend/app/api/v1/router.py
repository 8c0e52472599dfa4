"""API v1 router configuration."""

from fastapi import APIRouter

from app.api.v1.endpoints import health, lenders, qualification

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    lenders.router,
    prefix="/lenders",
    tags=["lenders"],
)

api_router.include_router(
    qualification.router,
    prefix="/qualification",
    tags=["qualification"],
)
