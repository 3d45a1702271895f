"""Shared fixtures for Race Finder tests.

Provides:
- fake_db: an in-memory stand-in for the supabase-py client
- settings: Settings with fake credentials
- client: FastAPI TestClient wired to the fake store
- make_race / make_candidate: sample data factories
"""

import os
import uuid
from collections import defaultdict

import pytest

# Set env vars before any race_finder imports
os.environ.setdefault("SUPABASE_URL", "https://fake.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "fake-key")


# ---------------------------------------------------------------------------
# In-memory fake Supabase
# ---------------------------------------------------------------------------

class FakeQueryResult:
    def __init__(self, data=None, count=None):
        self.data = data or []
        self.count = count


class FakeQueryBuilder:
    """Mimics the supabase-py query builder chain."""

    def __init__(self, db, table_name):
        self._db = db
        self._table = table_name
        self._filters = []
        self._order_col = None
        self._order_desc = False
        self._limit_val = None
        self._columns = "*"
        self._count_mode = None
        self._insert_data = None

    def select(self, columns="*", count=None):
        self._columns = columns
        self._count_mode = count
        return self

    def insert(self, data):
        self._insert_data = data
        return self

    def eq(self, col, val):
        self._filters.append((col, val))
        return self

    def order(self, col, desc=False):
        self._order_col = col
        self._order_desc = desc
        return self

    def limit(self, n):
        self._limit_val = n
        return self

    def _project(self, row):
        if self._columns == "*":
            return dict(row)
        cols = [c.strip() for c in self._columns.split(",")]
        return {c: row.get(c) for c in cols}

    def execute(self):
        self._db.calls.append((self._table, "insert" if self._insert_data is not None else "select"))
        if self._db.error is not None:
            raise self._db.error

        table = self._db.store[self._table]

        if self._insert_data is not None:
            batch = self._insert_data if isinstance(self._insert_data, list) else [self._insert_data]
            inserted = []
            for data in batch:
                row = dict(data)
                row.setdefault("id", str(uuid.uuid4()))
                table.append(row)
                inserted.append(row)
            return FakeQueryResult(data=inserted)

        rows = [r for r in table if all(r.get(c) == v for c, v in self._filters)]
        if self._order_col:
            rows.sort(key=lambda r: r.get(self._order_col) or "", reverse=self._order_desc)
        total = len(rows)
        if self._limit_val is not None:
            rows = rows[:self._limit_val]
        return FakeQueryResult(
            data=[self._project(r) for r in rows],
            count=total if self._count_mode else None,
        )


class FakeDB:
    """In-memory store keyed by table name; usable wherever a Client is."""

    def __init__(self):
        self.store = defaultdict(list)
        self.calls = []
        self.error = None

    def table(self, name):
        return FakeQueryBuilder(self, name)


@pytest.fixture
def fake_db():
    return FakeDB()


@pytest.fixture
def settings():
    from race_finder.config import Settings

    return Settings(
        supabase_url="https://fake.supabase.co",
        supabase_key="fake-key",
        exa_api_key="exa-key",
        anthropic_api_key="anthropic-key",
        firecrawl_api_key="firecrawl-key",
    )


@pytest.fixture
def client(fake_db, settings):
    """Sync test client for the FastAPI app backed by fake_db."""
    from fastapi.testclient import TestClient

    from race_finder.app import create_app

    app = create_app(settings, client=fake_db)
    with TestClient(app) as c:
        yield c


class FakeGeocoder:
    """Records lookups and returns fixed coordinates."""

    def __init__(self, result=(40.0, -75.0)):
        self.result = result
        self.calls = []

    def geocode(self, location, country=None):
        from race_finder.services.geocoder import Coordinates

        self.calls.append((location, country))
        return Coordinates(*self.result)


@pytest.fixture
def geocoder():
    return FakeGeocoder()


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_race():
    def factory(**overrides):
        defaults = {
            "id": str(uuid.uuid4()),
            "name": "Boston Marathon",
            "date": "2026-04-20",
            "location": "Boston, MA",
            "country": "USA",
            "distance": "Marathon",
            "type": "road",
            "description": None,
            "image_url": None,
            "website_url": "https://www.baa.org/",
            "latitude": 42.3601,
            "longitude": -71.0589,
        }
        defaults.update(overrides)
        return defaults
    return factory


@pytest.fixture
def make_candidate():
    from race_finder.services.candidates import Candidate

    def factory(**overrides):
        defaults = {
            "name": "City Marathon",
            "date": "2026-05-01",
            "location": "Springfield",
        }
        defaults.update(overrides)
        return Candidate(**defaults)
    return factory
