"""Top-level API router — every endpoint lives under ``/api``."""

from fastapi import APIRouter

from app.presentation.api.endpoints.health import router as health_router
from app.presentation.api.endpoints.articles import router as articles_router
from app.presentation.api.endpoints.auth import router as auth_router
from app.presentation.api.endpoints.profile import router as profile_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(auth_router)
router.include_router(profile_router)
