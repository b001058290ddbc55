"""FastAPI application entrypoint for the team roster service."""
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from teamhub import __version__
from teamhub.api.endpoints import greeting, health, players, team_collection, teams
from teamhub.bootstrap import seed_store
from teamhub.core.cache import clear_cache_pattern, close_cache, configure_cache
from teamhub.core.config import Settings, settings
from teamhub.core.logging import RequestLoggingMiddleware, configure_logging, get_logger
from teamhub.store import TeamStore, build_store

logger = get_logger(__name__)


def create_application(
    app_settings: Optional[Settings] = None,
    store: Optional[TeamStore] = None,
) -> FastAPI:
    """Instantiate the FastAPI application with middleware and routers.

    ``store`` replaces the backend selected by ``STORE_BACKEND``.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings.ENVIRONMENT, app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build and seed the store before any request is served."""
        logger.info("startup", service=app_settings.PROJECT_NAME)
        team_store = store if store is not None else build_store(app_settings)
        configure_cache(app_settings.REDIS_URL, app_settings.CACHE_TTL_SECONDS)
        # Cached lookups from an earlier run may name teams this store lacks
        clear_cache_pattern("team_by_*")
        if app_settings.SEED_ON_STARTUP:
            # A failure here aborts startup
            seed_store(team_store)
        app.state.team_store = team_store
        app.state.settings = app_settings
        yield
        close_cache()
        logger.info("shutdown", service=app_settings.PROJECT_NAME)

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Greeting page and Team/Player lookups.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1_000)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router, tags=["health"])
    app.include_router(greeting.router, tags=["greeting"])
    app.include_router(teams.router, prefix="/teams", tags=["teams"])
    app.include_router(team_collection.router, prefix="/api/teams", tags=["teams"])
    app.include_router(players.router, prefix="/api/players", tags=["players"])

    @app.get("/")
    async def root() -> dict[str, str]:
        return {
            "message": app_settings.PROJECT_NAME,
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_application()


def run() -> None:
    uvicorn.run("teamhub.main:app", host=settings.HOST, port=settings.PORT)
