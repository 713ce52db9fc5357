"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from userauth.api.routes import auth, health, users

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
