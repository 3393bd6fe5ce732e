"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from airaudit.api.scenario import router as scenario_router
from airaudit.api.load_profile import router as load_profile_router
from airaudit.api.catalog import router as catalog_router
from airaudit.api.measures import router as measures_router
from airaudit.api.report import router as report_router

router = APIRouter()
router.include_router(scenario_router)
router.include_router(load_profile_router)
router.include_router(catalog_router)
router.include_router(measures_router)
router.include_router(report_router)
