"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from app.config import get_settings
from app.infrastructure.database import engine

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the application status and the configured database backend."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": engine.dialect.name,
    }
