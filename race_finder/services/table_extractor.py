"""Largest-running-events table — scrape Wikipedia as markdown and parse it.

Column contract (positional, first table whose header mentions "Event"):

    | Event | Location | Country | Distance | Participants | ...

Only the first five columns are read. The page carries no dates, so every
candidate gets a placeholder date.
"""

from __future__ import annotations

import logging
import re

from race_finder.services.candidates import Candidate
from race_finder.services.scraper import ScrapeClient

logger = logging.getLogger(__name__)

WIKIPEDIA_URL = "https://en.wikipedia.org/wiki/List_of_largest_running_events"
PLACEHOLDER_DATE = "2026-06-01"

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_BRACKET_RE = re.compile(r"\[.*?\]")


def strip_markup(cell: str) -> str:
    """'[Boston Marathon](https://...)[1]' → 'Boston Marathon'."""
    cell = _IMAGE_RE.sub("", cell)
    cell = _LINK_RE.sub(r"\1", cell)
    cell = _BRACKET_RE.sub("", cell)
    return re.sub(r"\s+", " ", cell).strip()


def _is_separator(line: str) -> bool:
    stripped = line.strip()
    return "-" in stripped and set(stripped) <= set("|-: ")


def parse_markdown_table(markdown: str) -> list[Candidate]:
    """Parse the race table out of a markdown document."""
    races: list[Candidate] = []
    in_table = False

    for line in markdown.splitlines():
        if not in_table:
            if "|" in line and "Event" in line:
                in_table = True
            continue

        if not line.strip() or "|" not in line:
            break
        if _is_separator(line):
            continue

        columns = [c.strip() for c in line.split("|")]
        columns = [c for c in columns if c]
        if len(columns) < 4:
            continue

        name, location, country, distance = (strip_markup(c) for c in columns[:4])
        participants = strip_markup(columns[4]) if len(columns) > 4 else ""
        if not name or not location:
            continue

        races.append(Candidate(
            name=name,
            location=location,
            country=country or None,
            distance=distance or None,
            participants=participants or None,
        ))

    return races


def fetch_table_races(scraper: ScrapeClient, url: str = WIKIPEDIA_URL,
                      placeholder_date: str = PLACEHOLDER_DATE) -> list[Candidate]:
    result = scraper.scrape(url, formats=["markdown"])
    markdown = result.markdown
    logger.info("Markdown length: %d", len(markdown))
    logger.debug("First 500 chars: %s", markdown[:500])

    races = parse_markdown_table(markdown)
    for race in races:
        race.date = placeholder_date
    logger.info("Parsed %d races from markdown", len(races))
    if races:
        logger.debug("First race sample: %s", races[0].to_dict())
    return races
