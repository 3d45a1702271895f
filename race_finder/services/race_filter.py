"""Distance filter for the race list — All / Marathon / Half / Ultra."""

from __future__ import annotations

FILTERS = ("All", "Marathon", "Half", "Ultra")
FILTER_LABELS = {
    "All": "All Races",
    "Marathon": "Marathon",
    "Half": "Half Marathon",
    "Ultra": "Ultra",
}


def matches(race: dict, category: str | None) -> bool:
    """Case-insensitive substring match on the race's distance field."""
    if not category or category == "All" or category not in FILTERS:
        return True
    distance = (race.get("distance") or "").lower()
    if category == "Marathon":
        return "marathon" in distance and "half" not in distance and "ultra" not in distance
    if category == "Half":
        return "half" in distance
    return "ultra" in distance


def categories(race: dict) -> list[str]:
    """Every filter the race appears under, 'All' included."""
    return [f for f in FILTERS if matches(race, f)]


def filter_races(races: list[dict], category: str | None) -> list[dict]:
    return [r for r in races if matches(r, category)]
