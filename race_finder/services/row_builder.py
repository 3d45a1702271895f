"""Row builder — turns candidate records into store-ready race rows.

Candidates are processed one at a time, in order. Geocoding is rate limited,
so the builder sleeps after every lookup it makes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Callable, Iterable, Optional

from race_finder.services.candidates import Candidate
from race_finder.services.dates import normalize_date, parse_participants
from race_finder.services.geocoder import Coordinates, Geocoder

logger = logging.getLogger(__name__)

Admission = Callable[[Candidate], bool]


@dataclass
class RaceRow:
    name: str
    date: str
    location: str
    country: Optional[str] = None
    distance: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    website_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_record(self) -> dict:
        return asdict(self)


def min_participants(threshold: int) -> Admission:
    """Admit candidates whose participant count reaches ``threshold``."""
    def admit(candidate: Candidate) -> bool:
        return parse_participants(candidate.participants) >= threshold
    return admit


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _supplied_coordinates(candidate: Candidate) -> Coordinates:
    try:
        lat = float(candidate.latitude)
        lon = float(candidate.longitude)
    except (TypeError, ValueError):
        return Coordinates(None, None)
    return Coordinates(lat, lon)


def build_rows(
    candidates: Iterable[Candidate],
    geocoder: Geocoder,
    admit: Admission | None = None,
    delay: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> list[RaceRow]:
    """Validate, filter and geocode candidates into rows, preserving order."""
    rows: list[RaceRow] = []

    for candidate in candidates:
        name = _clean(candidate.name)
        location = _clean(candidate.location)
        country = _clean(candidate.country)
        date = normalize_date(candidate.date)

        logger.info("Processing: %s", name or "<unnamed>")
        logger.debug("  location=%s country=%s date=%s distance=%s",
                     location, country, date or candidate.date, candidate.distance)

        if not name or not location:
            logger.info("  SKIPPED: Missing name or location")
            continue

        if not date:
            logger.info("  SKIPPED: Missing date")
            continue

        if admit is not None and not admit(candidate):
            logger.debug("  SKIPPED: Not admitted")
            continue

        coords = _supplied_coordinates(candidate)
        if not coords.known:
            coords = geocoder.geocode(location, country)
            logger.info("  Geocoded: %s, %s", coords.latitude, coords.longitude)
            sleep(delay)

        rows.append(RaceRow(
            name=name,
            date=date,
            location=location,
            country=country,
            distance=_clean(candidate.distance),
            type=_clean(candidate.type),
            description=_clean(candidate.description),
            image_url=_clean(candidate.image_url),
            website_url=_clean(candidate.website_url),
            latitude=coords.latitude,
            longitude=coords.longitude,
        ))

    return rows
