"""Date and participant-count normalization for scraped race data."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone

# Written forms tried after ISO-8601, in order
_DATE_FORMATS = [
    "%B %d, %Y",      # May 1, 2026
    "%b %d, %Y",      # May 1, 2026 / Apr 20, 2026
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",       # 1 May 2026
    "%d %b %Y",
    "%A, %B %d, %Y",  # Sunday, April 20, 2026
    "%a, %b %d, %Y",
    "%m/%d/%Y",       # 05/01/2026
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%B %Y",          # June 2026 → first of month
    "%b %Y",
    "%Y-%m",          # 2026-05
]

_ORDINAL_RE = re.compile(r"(\d{1,2})(st|nd|rd|th)\b", re.IGNORECASE)
_TRAILING_TIME_RE = re.compile(
    r"(?:\s*,)?\s+(?:at\s+)?\d{1,2}:\d{2}(?::\d{2})?\s*(?:[ap]\.?m\.?)?$", re.IGNORECASE,
)
_NON_DIGIT_RE = re.compile(r"[^\d]")


def _parse(text: str) -> datetime | date | None:
    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    cleaned = _ORDINAL_RE.sub(r"\1", text)
    # "April 20, 2026 09:00" → "April 20, 2026"
    cleaned = _TRAILING_TIME_RE.sub("", cleaned)
    # "Apr. 20" → "Apr 20"; leaves 2026.05.01 alone
    cleaned = re.sub(r"(?<=[A-Za-z])\.", "", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: str | None) -> str:
    """Return the UTC calendar date of ``value`` as YYYY-MM-DD, or ''.

    Aware datetimes are converted to UTC first; naive values are read as UTC.
    """
    if not value or not isinstance(value, str):
        return ""
    parsed = _parse(value.strip())
    if parsed is None:
        return ""
    if isinstance(parsed, datetime) and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


def parse_participants(value) -> int:
    """Coerce a participant count; 0 means unknown.

    >>> parse_participants("12,345 runners")
    12345
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else 0
    digits = _NON_DIGIT_RE.sub("", str(value))
    return int(digits) if digits else 0
