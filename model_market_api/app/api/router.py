"""
Top‑level router.

Aggregates the resource routers.  Routes are served at the root
without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import info, models, purchases

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(models.router, prefix="/models", tags=["models"])
router.include_router(purchases.router, prefix="/purchases", tags=["purchases"])
