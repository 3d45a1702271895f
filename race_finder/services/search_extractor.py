"""Race discovery — Exa web search, then an LLM pulls race details from each page.

Results without page text are skipped. Per-page extraction failures are
logged and dropped; only the search call itself can abort a run.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

import anthropic
import requests

from race_finder.config import DEFAULT_LLM_MODEL
from race_finder.services.candidates import Candidate

logger = logging.getLogger(__name__)

EXA_SEARCH_URL = "https://api.exa.ai/search"
DEFAULT_QUERY = "official marathon race website 2026"
MAX_TEXT_CHARS = 10_000

SYSTEM_PROMPT = (
    "You are a data cleaner. Extract the following JSON object from this website "
    "text: { name, date (ISO), location, distances (array), image_url }. "
    "If you can't find a date, set date to null. "
    "Output ONLY valid JSON, no markdown code blocks, no explanation."
)


@dataclass
class SearchResult:
    url: str
    title: Optional[str] = None
    text: Optional[str] = None


class SearchClient:
    """Minimal Exa search-and-contents client."""

    def __init__(self, api_key: str, session: requests.Session | None = None,
                 timeout: float = 60):
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def search_and_contents(self, query: str, num_results: int = 10) -> list[SearchResult]:
        response = self.session.post(
            EXA_SEARCH_URL,
            headers={"x-api-key": self.api_key, "Content-Type": "application/json"},
            json={"query": query, "numResults": num_results, "contents": {"text": True}},
            timeout=self.timeout,
        )
        if response.status_code != 200:
            raise RuntimeError(f"Exa API error: {response.status_code} - {response.text[:200]}")

        return [
            SearchResult(url=r.get("url", ""), title=r.get("title"), text=r.get("text"))
            for r in response.json().get("results", [])
        ]


def parse_json_reply(text: str) -> dict:
    """Parse a model reply as a JSON object, tolerating code fences."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("```")[1]
        if text.startswith("json"):
            text = text[4:]
        text = text.strip()
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _join_distances(distances) -> Optional[str]:
    if isinstance(distances, str):
        return distances.strip() or None
    if isinstance(distances, list):
        joined = ", ".join(str(d).strip() for d in distances if str(d).strip())
        return joined or None
    return None


class RaceExtractor:
    """Asks the language model for one race record per web page."""

    def __init__(self, client: anthropic.Anthropic, model: str = DEFAULT_LLM_MODEL):
        self.client = client
        self.model = model

    def extract(self, title: str, url: str, text: str) -> Candidate | None:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=1024,
                temperature=0,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": text[:MAX_TEXT_CHARS]}],
            )
            reply = next(
                (b.text for b in response.content or [] if getattr(b, "type", None) == "text"),
                None,
            )
            if reply is None:
                logger.info("No text returned from the model for %s", url)
                return None
            extracted = parse_json_reply(reply)
        except (anthropic.AnthropicError, ValueError) as e:
            logger.error("Error extracting race data for %s: %s", url, e)
            return None

        if not extracted.get("date"):
            return None

        return Candidate(
            name=extracted.get("name") or title,
            date=str(extracted["date"]),
            location=extracted.get("location"),
            distance=_join_distances(extracted.get("distances")),
            image_url=extracted.get("image_url"),
            website_url=url,
        )


def discover_races(search: SearchClient, extractor: RaceExtractor,
                   query: str = DEFAULT_QUERY, num_results: int = 10) -> list[Candidate]:
    logger.info("Discovering races with Exa: %r", query)
    results = search.search_and_contents(query, num_results=num_results)
    logger.info("Found %d results", len(results))

    races: list[Candidate] = []
    for result in results:
        if not result.text:
            logger.info("Skipping %s - no text content", result.url)
            continue

        logger.info("Extracting data from: %s", result.url)
        candidate = extractor.extract(result.title or "Unknown Race", result.url, result.text)
        if candidate is None:
            logger.info("Skipping %s - no date found or extraction failed", result.url)
            continue

        logger.debug("Extracted race data: %s", candidate.to_dict())
        races.append(candidate)

    return races
