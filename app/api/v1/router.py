"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, biometrics, training

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    biometrics.router, prefix="/biometrics", tags=["Biometric records"]
)
api_router.include_router(
    training.router,
    prefix="/training/sessions",
    tags=["Training sessions"],
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
