#!/usr/bin/env python3
"""
Seed the races table with a few well-known marathons.

Usage:
    python scripts/seed_races.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from race_finder import supabase_client as db
from race_finder.config import Settings
from race_finder.services.pipeline_runner import run_script

SAMPLE_RACES = [
    {
        "name": "Boston Marathon",
        "date": "2026-04-20",
        "location": "Boston, MA, USA",
        "country": "USA",
        "distance": "Marathon",
        "type": "road",
        "description": "Point-to-point race from Hopkinton to Boston.",
        "latitude": 42.3601,
        "longitude": -71.0589,
        "website_url": "https://www.baa.org/",
    },
    {
        "name": "London Marathon",
        "date": "2026-04-26",
        "location": "London, UK",
        "country": "UK",
        "distance": "Marathon",
        "type": "road",
        "description": "Flat city course winding past London landmarks.",
        "latitude": 51.5074,
        "longitude": -0.1278,
        "website_url": "https://www.tcslondonmarathon.com/",
    },
    {
        "name": "Berlin Marathon",
        "date": "2026-09-27",
        "location": "Berlin, Germany",
        "country": "Germany",
        "distance": "Marathon",
        "type": "road",
        "description": "Fast, flat course through central Berlin.",
        "latitude": 52.5200,
        "longitude": 13.4050,
        "website_url": "https://www.bmw-berlin-marathon.com/",
    },
]


def main():
    def seed():
        settings = Settings.from_env().require("supabase_url", "supabase_key")
        print("Seeding races...")
        inserted = db.insert_races(db.get_client(settings), SAMPLE_RACES)
        print(f"Successfully added {inserted} races!")

    sys.exit(run_script("Seed", seed))


if __name__ == "__main__":
    main()
