"""
API v1 routes
"""

from fastapi import APIRouter
from liquor_cabinet.api.v1 import (
    auth,
    bottles,
    stats,
    identify,
    recipes,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(bottles.router)
api_router.include_router(stats.router)
api_router.include_router(identify.router)
api_router.include_router(recipes.router)

__all__ = ["api_router"]
