"""Race Finder page — GET /"""

import logging
from datetime import date

import httpx
from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates
from postgrest.exceptions import APIError

from race_finder import supabase_client as db
from race_finder.config import WEB_TEMPLATES_DIR
from race_finder.services.race_filter import FILTER_LABELS, FILTERS, categories

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))

PLACEHOLDER_IMAGE = "/static/placeholder.svg"


def format_race_date(value) -> str:
    """'2026-04-20' → 'Apr 20, 2026'; anything unparseable is returned as-is."""
    try:
        parsed = date.fromisoformat(str(value)[:10])
    except ValueError:
        return str(value or "")
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def race_card(race: dict) -> dict:
    """Everything the card and map templates need for one race."""
    lat, lng = race.get("latitude"), race.get("longitude")
    has_coords = (isinstance(lat, (int, float)) and not isinstance(lat, bool)
                  and isinstance(lng, (int, float)) and not isinstance(lng, bool))
    location = race.get("location") or ""
    if race.get("country"):
        location = f"{location}, {race['country']}"
    return {
        "id": race.get("id"),
        "name": race.get("name") or "",
        "date": format_race_date(race.get("date")),
        "location": location,
        "badge": race.get("distance") or "Race",
        "image_url": race.get("image_url") or PLACEHOLDER_IMAGE,
        "website_url": race.get("website_url"),
        "categories": categories(race),
        "latitude": lat if has_coords else None,
        "longitude": lng if has_coords else None,
    }


@router.get("/")
async def race_finder(request: Request):
    client = request.app.state.supabase
    try:
        races = db.list_races(client)
    except (APIError, httpx.HTTPError) as e:
        logger.error("Failed to load races: %s", e)
        races = []

    cards = [race_card(r) for r in races]
    markers = [
        {"id": c["id"], "name": c["name"], "latitude": c["latitude"], "longitude": c["longitude"]}
        for c in cards if c["latitude"] is not None
    ]
    return templates.TemplateResponse(request, "index.html", {
        "races": cards,
        "markers": markers,
        "filters": [(f, FILTER_LABELS[f]) for f in FILTERS],
        "mapbox_token": request.app.state.settings.mapbox_token,
    })
