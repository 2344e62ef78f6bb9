"""API v1 router aggregator."""

from fastapi import APIRouter

from meetsynth.api.v1.emails import router as email_router
from meetsynth.api.v1.summaries import router as summaries_router

router = APIRouter(prefix="/api/v1")
router.include_router(summaries_router)
router.include_router(email_router)
