"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  When
new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, businesses, categories, i18n

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(businesses.router, prefix="/businesses", tags=["businesses"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(i18n.router, prefix="/i18n", tags=["i18n"])
