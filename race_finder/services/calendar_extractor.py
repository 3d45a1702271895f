"""Race calendar — schema-guided extraction from a fixed calendar page."""

from __future__ import annotations

import logging

from race_finder.services.candidates import Candidate
from race_finder.services.scraper import ScrapeClient

logger = logging.getLogger(__name__)

CALENDAR_URL = "https://www.ahotu.com/calendar/running/marathon"
MIN_PARTICIPANTS = 10_000

CALENDAR_PROMPT = (
    "Extract every upcoming running race listed on this calendar page. "
    "For each race give its name, the race date (ISO 8601 if possible), the city "
    "or venue, the country, the distance or category (e.g. Marathon, Half "
    "Marathon, Ultra), the expected number of participants, and the official "
    "website and image URLs when shown."
)

CALENDAR_SCHEMA = {
    "type": "object",
    "properties": {
        "races": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "date": {"type": "string"},
                    "location": {"type": "string"},
                    "country": {"type": "string"},
                    "distance": {"type": "string"},
                    "participants": {"type": ["number", "string"]},
                    "latitude": {"type": "number"},
                    "longitude": {"type": "number"},
                    "image_url": {"type": "string"},
                    "website_url": {"type": "string"},
                    "type": {"type": "string"},
                    "description": {"type": "string"},
                },
                "required": ["name", "date", "location"],
            },
        },
    },
    "required": ["races"],
}


def fetch_calendar_races(scraper: ScrapeClient, url: str = CALENDAR_URL) -> list[Candidate]:
    result = scraper.scrape(
        url,
        formats=["json"],
        json_options={"schema": CALENDAR_SCHEMA, "prompt": CALENDAR_PROMPT},
    )
    extracted = (result.json or {}).get("races") or []
    races = [Candidate.from_dict(item) for item in extracted if isinstance(item, dict)]
    logger.info("Extracted %d races from %s", len(races), url)
    return races
