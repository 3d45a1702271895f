"""Pipeline runner — fetch candidates, build rows, insert, summarize.

Shared by the scripts in scripts/. Each script supplies its own fetch step
and optional admission filter; everything else runs the same way.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Callable

from race_finder import supabase_client as db
from race_finder.config import ConfigError, configure_logging
from race_finder.services.candidates import Candidate
from race_finder.services.geocoder import Geocoder
from race_finder.services.row_builder import Admission, build_rows

logger = logging.getLogger(__name__)


def run_pipeline(
    fetch: Callable[[], list[Candidate]],
    client,
    geocoder: Geocoder,
    admit: Admission | None = None,
    delay: float = 1.0,
    dry_run: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> dict:
    """Run one discovery pass. Store errors propagate to the caller."""
    candidates = fetch()
    logger.info("Fetched %d candidate races", len(candidates))

    rows = build_rows(candidates, geocoder, admit=admit, delay=delay, sleep=sleep)
    logger.info("Prepared %d races for insertion", len(rows))

    if dry_run:
        for row in rows:
            logger.info("  [dry-run] %s | %s | %s", row.date, row.name, row.location)
        inserted = 0
    else:
        inserted = db.insert_races(client, rows)

    return {"candidates": len(candidates), "rows": len(rows), "inserted": inserted}


def pipeline_arg_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--dry-run", action="store_true",
                        help="Build rows but do not insert them")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def run_script(name: str, main: Callable[[], object], verbose: bool = False) -> int:
    """Run a script body and map failures to an exit status."""
    configure_logging(verbose)
    try:
        main()
    except ConfigError as e:
        logger.error("%s: %s", name, e)
        return 1
    except Exception:
        logger.exception("%s failed", name)
        return 1
    logger.info("Done!")
    return 0
