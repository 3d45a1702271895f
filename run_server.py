#!/usr/bin/env python3
"""Race Finder — web server.

Launch: python3 run_server.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import sys

import uvicorn

from race_finder.config import HOST, PORT, ConfigError, Settings


def main():
    print("=" * 60)
    print("  Race Finder")
    print("=" * 60)

    settings = Settings.from_env()
    try:
        settings.require("supabase_url", "supabase_key")
    except ConfigError as e:
        print(f"\n  ERROR: {e}")
        print("  Set SUPABASE_URL and SUPABASE_SERVICE_KEY (or add them to .env)")
        sys.exit(1)

    url = f"http://{HOST}:{PORT}"
    print(f"\n  Race Finder: {url}")
    print(f"  API docs:    {url}/api/v1/docs")
    print("  Press Ctrl+C to stop\n")

    from race_finder.app import create_app
    app = create_app(settings)
    uvicorn.run(app, host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
