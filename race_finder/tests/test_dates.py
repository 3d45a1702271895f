"""Tests for date normalization and participant-count parsing."""

import pytest

from race_finder.services.dates import normalize_date, parse_participants


class TestNormalizeDate:
    @pytest.mark.parametrize("value,expected", [
        ("2026-05-01", "2026-05-01"),
        ("2026-05-01T09:30:00Z", "2026-05-01"),
        ("2026-05-01T09:30:00.000Z", "2026-05-01"),
        ("May 1, 2026", "2026-05-01"),
        ("Apr. 20, 2026", "2026-04-20"),
        ("1 May 2026", "2026-05-01"),
        ("September 27th, 2026", "2026-09-27"),
        ("05/01/2026", "2026-05-01"),
        ("2026/05/01", "2026-05-01"),
        ("  2026-04-26  ", "2026-04-26"),
        ("2026-05", "2026-05-01"),
        ("June 2026", "2026-06-01"),
        ("April 20, 2026 09:00", "2026-04-20"),
        ("April 20, 2026 at 9:00 AM", "2026-04-20"),
        ("20 April 2026 07:30:00", "2026-04-20"),
    ])
    def test_valid_dates(self, value, expected):
        assert normalize_date(value) == expected

    def test_aware_datetime_read_in_utc(self):
        # 23:30 on the 1st in New York is already the 2nd in UTC
        assert normalize_date("2026-05-01T23:30:00-04:00") == "2026-05-02"
        assert normalize_date("2026-05-02T01:00:00+05:00") == "2026-05-01"

    @pytest.mark.parametrize("value", [None, "", "   ", "TBD", "sometime in spring", "2026-13-45", 20260501])
    def test_unparseable_returns_empty(self, value):
        assert normalize_date(value) == ""


class TestParseParticipants:
    def test_strips_non_digits(self):
        assert parse_participants("12,345 runners") == 12345

    def test_currency_like_markup(self):
        assert parse_participants("~45,000*") == 45000

    def test_absent_is_zero(self):
        assert parse_participants(None) == 0

    def test_numbers_pass_through(self):
        assert parse_participants(42) == 42
        assert parse_participants(42.0) == 42

    def test_non_finite_numbers_are_unknown(self):
        assert parse_participants(float("nan")) == 0
        assert parse_participants(float("inf")) == 0

    def test_no_digits_is_zero(self):
        assert parse_participants("unknown") == 0
        assert parse_participants("") == 0
