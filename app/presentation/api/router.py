"""JSON API router (non-admin endpoints)."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
