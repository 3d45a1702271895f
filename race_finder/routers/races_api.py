"""Races API — read-only JSON endpoints over the races table."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from race_finder import supabase_client as db
from race_finder.services.race_filter import FILTERS, filter_races

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# GET /api/v1/races — list, optionally filtered by distance category
# ---------------------------------------------------------------------------

@router.get(
    "/api/v1/races",
    summary="List upcoming races",
    description=(
        "Returns every stored race ordered by date. The optional distance "
        "filter matches 'Marathon' (full marathons only), 'Half' or 'Ultra'."
    ),
    tags=["Races"],
)
async def list_races(
    request: Request,
    distance: Optional[str] = Query(None, description="All, Marathon, Half or Ultra"),
):
    if distance and distance not in FILTERS:
        raise HTTPException(status_code=422, detail=f"Unknown distance filter '{distance}'")
    try:
        races = db.list_races(request.app.state.supabase)
    except (APIError, httpx.HTTPError) as e:
        logger.error("Failed to load races: %s", e)
        raise HTTPException(status_code=502, detail="Race store unavailable")

    results = filter_races(races, distance)
    return {"count": len(results), "results": results}


# ---------------------------------------------------------------------------
# GET /api/v1/health/db — store connectivity
# ---------------------------------------------------------------------------

@router.get(
    "/api/v1/health/db",
    summary="Check the Supabase connection",
    tags=["Health"],
)
async def database_health(request: Request):
    try:
        status = db.check_connection(request.app.state.supabase)
    except Exception as e:
        logger.error("Supabase connection failed: %s", e)
        return JSONResponse(
            {
                "success": False,
                "message": "Supabase connection failed",
                "error": str(e),
                "connected": False,
            },
            status_code=500,
        )

    if status["table_exists"]:
        message = "Supabase connection successful! races table exists."
    else:
        message = "Supabase connection successful! races table does not exist yet."
    return {
        "success": True,
        "message": message,
        "connected": True,
        "tableExists": status["table_exists"],
    }
