#!/usr/bin/env python3
"""
Scrape the Wikipedia list of largest running events and insert the races.

The page has no race dates, so every row gets a placeholder date.

Usage:
    python scripts/scrape_races.py
    python scripts/scrape_races.py --dry-run
    python scripts/scrape_races.py --placeholder-date 2026-09-01
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from race_finder import supabase_client as db
from race_finder.config import Settings
from race_finder.services.geocoder import Geocoder
from race_finder.services.pipeline_runner import pipeline_arg_parser, run_pipeline, run_script
from race_finder.services.scraper import ScrapeClient
from race_finder.services.table_extractor import (
    PLACEHOLDER_DATE, WIKIPEDIA_URL, fetch_table_races,
)


def main():
    parser = pipeline_arg_parser("Scrape the largest running events table")
    parser.add_argument("--url", default=WIKIPEDIA_URL, help="Page to scrape")
    parser.add_argument("--placeholder-date", default=PLACEHOLDER_DATE,
                        help="Date assigned to every scraped race")
    args = parser.parse_args()

    def scrape():
        settings = Settings.from_env().require(
            "supabase_url", "supabase_key", "firecrawl_api_key",
        )
        client = db.get_client(settings)
        scraper = ScrapeClient(settings.firecrawl_api_key)
        summary = run_pipeline(
            lambda: fetch_table_races(scraper, args.url, args.placeholder_date),
            client,
            Geocoder(settings.geocoder_user_agent),
            delay=settings.geocode_delay,
            dry_run=args.dry_run,
        )
        print(f"\nFetched: {summary['candidates']}, Prepared: {summary['rows']}, "
              f"Inserted: {summary['inserted']}")

    sys.exit(run_script("Scrape", scrape, verbose=args.verbose))


if __name__ == "__main__":
    main()
