"""Firecrawl scrape client — fetches a page as markdown or structured JSON."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

FIRECRAWL_SCRAPE_URL = "https://api.firecrawl.dev/v1/scrape"


class ScrapeError(RuntimeError):
    """The scrape service reported a failure."""


@dataclass
class ScrapeResult:
    markdown: str = ""
    json: Optional[dict[str, Any]] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class ScrapeClient:
    def __init__(self, api_key: str, session: requests.Session | None = None,
                 timeout: float = 120):
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def scrape(self, url: str, formats: list[str] | None = None,
               json_options: dict | None = None) -> ScrapeResult:
        payload: dict[str, Any] = {"url": url, "formats": formats or ["markdown"]}
        if json_options:
            payload["jsonOptions"] = json_options

        logger.info("Scraping %s (%s)", url, ", ".join(payload["formats"]))
        response = self.session.post(
            FIRECRAWL_SCRAPE_URL,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
            timeout=self.timeout,
        )

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        if response.status_code != 200 or not body.get("success"):
            error = body.get("error") or response.text[:200]
            raise ScrapeError(f"Firecrawl error: {response.status_code} - {error}")

        data = body.get("data") or {}
        return ScrapeResult(
            markdown=data.get("markdown") or "",
            json=data.get("json"),
            metadata=data.get("metadata") or {},
        )
