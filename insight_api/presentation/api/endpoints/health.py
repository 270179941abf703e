"""Health check endpoint. Does not touch the store."""

from fastapi import APIRouter

from insight_api.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report service status and which collection the search endpoints read."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "collection": f"{settings.mongodb_database}.{settings.mongodb_collection}",
    }
