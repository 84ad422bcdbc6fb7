"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from graphghan.api.pattern import router as pattern_router
from graphghan.api.themes import router as themes_router

router = APIRouter()
router.include_router(pattern_router)
router.include_router(themes_router)
