#!/usr/bin/env python3
"""
Verify the Supabase connection and whether the races table exists.

Usage:
    python scripts/check_connection.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from race_finder import supabase_client as db
from race_finder.config import Settings
from race_finder.services.pipeline_runner import run_script


def main():
    def check():
        settings = Settings.from_env().require("supabase_url", "supabase_key")
        print("Testing Supabase connection...")
        print(f"  URL: {settings.supabase_url}")

        status = db.check_connection(db.get_client(settings))
        print("  ✓ Supabase connection successful!")
        if status["table_exists"]:
            print("  ✓ races table exists and is accessible")
        else:
            print("  Note: races table does not exist yet. Run the migration SQL to create it.")

    sys.exit(run_script("Connection check", check))


if __name__ == "__main__":
    main()
