"""API routes."""

from fastapi import APIRouter

from sweetshop.api import auth, health, sweets

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(sweets.router, prefix="/sweets", tags=["sweets"])
