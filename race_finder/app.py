"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from race_finder import supabase_client as db
from race_finder.config import STATIC_DIR, Settings
from race_finder.routers import pages, races_api

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, client=None) -> FastAPI:
    """Build the app. ``client`` overrides the Supabase client (tests)."""
    settings = settings or Settings.from_env()
    if client is None:
        client = db.get_client(settings)

    app = FastAPI(
        title="Race Finder",
        description="Upcoming running races with an interactive map.",
        version="1.0.0",
        docs_url="/api/v1/docs",
        redoc_url=None,
        openapi_url="/api/v1/openapi.json",
    )
    app.state.settings = settings
    app.state.supabase = client

    # Static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(pages.router, include_in_schema=False)
    app.include_router(races_api.router)

    return app
