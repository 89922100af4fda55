"""Health check endpoint — no database access, always available."""

from fastapi import APIRouter

from app.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the application name, version and environment."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
