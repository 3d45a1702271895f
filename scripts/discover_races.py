#!/usr/bin/env python3
"""
Discover upcoming races with Exa search and LLM extraction, then insert them.

Usage:
    python scripts/discover_races.py               # Search, extract, geocode, insert
    python scripts/discover_races.py --dry-run     # Preview rows without inserting
    python scripts/discover_races.py --query "official half marathon website 2026"
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import anthropic

from race_finder import supabase_client as db
from race_finder.config import Settings
from race_finder.services.geocoder import Geocoder
from race_finder.services.pipeline_runner import pipeline_arg_parser, run_pipeline, run_script
from race_finder.services.search_extractor import (
    DEFAULT_QUERY, RaceExtractor, SearchClient, discover_races,
)


def main():
    parser = pipeline_arg_parser("Discover races with Exa + LLM extraction")
    parser.add_argument("--query", default=DEFAULT_QUERY, help="Search query")
    parser.add_argument("--num-results", type=int, default=10, help="Search results to fetch")
    args = parser.parse_args()

    def discover():
        settings = Settings.from_env().require(
            "supabase_url", "supabase_key", "exa_api_key", "anthropic_api_key",
        )
        client = db.get_client(settings)
        search = SearchClient(settings.exa_api_key)
        extractor = RaceExtractor(
            anthropic.Anthropic(api_key=settings.anthropic_api_key),
            model=settings.llm_model,
        )
        summary = run_pipeline(
            lambda: discover_races(search, extractor, args.query, args.num_results),
            client,
            Geocoder(settings.geocoder_user_agent),
            delay=settings.geocode_delay,
            dry_run=args.dry_run,
        )
        print(f"\nDiscovered: {summary['candidates']}, Prepared: {summary['rows']}, "
              f"Inserted: {summary['inserted']}")

    sys.exit(run_script("Discovery", discover, verbose=args.verbose))


if __name__ == "__main__":
    main()
