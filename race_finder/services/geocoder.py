"""Geocode race locations using Nominatim (OpenStreetMap).

Free API, limited to one request per second by policy. The caller waits out
the delay between calls; this module only performs the lookup.
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple, Optional

import requests

from race_finder.config import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class Coordinates(NamedTuple):
    latitude: Optional[float]
    longitude: Optional[float]

    @property
    def known(self) -> bool:
        return self.latitude is not None and self.longitude is not None


UNKNOWN = Coordinates(None, None)


def build_query(location: str, country: str | None = None) -> str:
    """'City', 'Country' → 'City, Country' with parenthetical notes removed."""
    query = f"{location}, {country}" if country else location
    # Remove parenthetical notes like "(Central Park start)"
    query = re.sub(r"\(.*?\)", "", query)
    query = re.sub(r"\s+,", ",", query)
    query = re.sub(r",\s*,", ",", query)
    return re.sub(r"\s+", " ", query).strip(", ")


def _to_float(value) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class Geocoder:
    """Single-shot Nominatim lookups that never raise."""

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT,
                 session: requests.Session | None = None, timeout: float = 10):
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent
        self.timeout = timeout

    def geocode(self, location: str, country: str | None = None) -> Coordinates:
        query = build_query(location or "", country)
        if not query:
            return UNKNOWN

        try:
            resp = self.session.get(
                NOMINATIM_URL,
                params={"format": "json", "q": query},
                timeout=self.timeout,
            )
            if not resp.ok:
                logger.warning("Geocoding '%s' returned HTTP %s", query, resp.status_code)
                return UNKNOWN
            results = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Geocoding failed for '%s': %s", query, e)
            return UNKNOWN

        if not isinstance(results, list) or not results:
            return UNKNOWN
        first = results[0] if isinstance(results[0], dict) else {}
        lat, lon = _to_float(first.get("lat")), _to_float(first.get("lon"))
        if lat is None or lon is None:
            return UNKNOWN
        return Coordinates(lat, lon)
