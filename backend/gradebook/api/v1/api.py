"""
API v1 router combining all v1 endpoints.
"""
from fastapi import APIRouter
from gradebook.api.v1 import final_grades, health, item_analysis

api_router = APIRouter()

# Include all v1 routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(item_analysis.router, tags=["item-analysis"])
api_router.include_router(final_grades.router, tags=["final-grades"])
