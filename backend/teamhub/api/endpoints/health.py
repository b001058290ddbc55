"""Health check endpoints."""
from fastapi import APIRouter, Depends

from teamhub import __version__
from teamhub.api.deps import get_app_settings, get_team_store
from teamhub.core import cache
from teamhub.core.config import Settings
from teamhub.store import TeamStore

router = APIRouter()


@router.get("/healthz")
async def health_check(
    store: TeamStore = Depends(get_team_store),
    app_settings: Settings = Depends(get_app_settings),
):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": app_settings.ENVIRONMENT,
        "store": store.backend,
        "redis": "connected" if cache.redis_client else "disconnected",
    }


@router.get("/version")
async def version():
    """Version endpoint."""
    return {"version": __version__}
