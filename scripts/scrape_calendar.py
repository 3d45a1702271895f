#!/usr/bin/env python3
"""
Scrape a race calendar with schema-guided extraction and insert the big races.

Only races with at least --min-participants runners are kept.

Usage:
    python scripts/scrape_calendar.py
    python scripts/scrape_calendar.py --dry-run --min-participants 20000
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from race_finder import supabase_client as db
from race_finder.config import Settings
from race_finder.services.calendar_extractor import (
    CALENDAR_URL, MIN_PARTICIPANTS, fetch_calendar_races,
)
from race_finder.services.geocoder import Geocoder
from race_finder.services.pipeline_runner import pipeline_arg_parser, run_pipeline, run_script
from race_finder.services.row_builder import min_participants
from race_finder.services.scraper import ScrapeClient


def main():
    parser = pipeline_arg_parser("Scrape a race calendar with structured extraction")
    parser.add_argument("--url", default=CALENDAR_URL, help="Calendar page to scrape")
    parser.add_argument("--min-participants", type=int, default=MIN_PARTICIPANTS,
                        help="Skip races smaller than this")
    args = parser.parse_args()

    def scrape():
        settings = Settings.from_env().require(
            "supabase_url", "supabase_key", "firecrawl_api_key",
        )
        client = db.get_client(settings)
        scraper = ScrapeClient(settings.firecrawl_api_key)
        summary = run_pipeline(
            lambda: fetch_calendar_races(scraper, args.url),
            client,
            Geocoder(settings.geocoder_user_agent),
            admit=min_participants(args.min_participants),
            delay=settings.geocode_delay,
            dry_run=args.dry_run,
        )
        if not summary["rows"]:
            print("\nNo races matched the participants filter.")
        print(f"\nFetched: {summary['candidates']}, Prepared: {summary['rows']}, "
              f"Inserted: {summary['inserted']}")

    sys.exit(run_script("Calendar scrape", scrape, verbose=args.verbose))


if __name__ == "__main__":
    main()
