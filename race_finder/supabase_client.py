"""Supabase connection and query helpers for the races table."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from postgrest.exceptions import APIError
from supabase import Client, create_client

from race_finder.config import Settings

logger = logging.getLogger(__name__)

RACES_TABLE = "races"
RACE_COLUMNS = (
    "id, name, date, location, country, distance, type, description, "
    "image_url, website_url, latitude, longitude"
)

# PostgREST code for a missing relation
_MISSING_TABLE_CODES = {"PGRST116", "PGRST205", "42P01"}


def get_client(settings: Settings) -> Client:
    """Create a Supabase client from explicit settings."""
    settings.require("supabase_url", "supabase_key")
    return create_client(settings.supabase_url, settings.supabase_key)


def insert_races(client: Client, rows: Iterable[Any]) -> int:
    """Bulk-insert race rows and return the number the store reports back.

    Rows may be plain dicts or objects with a ``to_record()`` method. An
    empty batch never touches the store. Store errors propagate.
    """
    records = [r.to_record() if hasattr(r, "to_record") else dict(r) for r in rows]
    if not records:
        logger.info("No races to insert.")
        return 0

    result = client.table(RACES_TABLE).insert(records).execute()
    inserted = len(result.data or [])
    logger.info("Inserted %d races.", inserted)
    if inserted != len(records):
        logger.warning("Store accepted %d of %d rows", inserted, len(records))
    return inserted


def list_races(client: Client) -> list[dict]:
    """All races ordered by date, earliest first."""
    result = (
        client.table(RACES_TABLE)
        .select(RACE_COLUMNS)
        .order("date", desc=False)
        .execute()
    )
    return result.data or []


def check_connection(client: Client) -> dict:
    """Probe the races table.

    A missing table still counts as a working connection. Any other store
    error propagates.
    """
    try:
        client.table(RACES_TABLE).select("id", count="exact").limit(0).execute()
    except APIError as e:
        message = e.message or ""
        if e.code in _MISSING_TABLE_CODES or "does not exist" in message:
            return {"connected": True, "table_exists": False}
        raise
    return {"connected": True, "table_exists": True}
