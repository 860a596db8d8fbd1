"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from dbhealth.api.v1.endpoints import health

api_router = APIRouter()

# Public routes (no authentication required)
api_router.include_router(health.router, tags=["health"])
