"""Tests for the All / Marathon / Half / Ultra distance filter."""

import pytest

from race_finder.services.race_filter import categories, filter_races, matches

RACES = [
    {"name": "Boston", "distance": "Marathon"},
    {"name": "NYC Half", "distance": "Half Marathon"},
    {"name": "Comrades", "distance": "Ultra Marathon"},
    {"name": "Western States", "distance": "100-mile ULTRA"},
    {"name": "Bay to Breakers", "distance": "12K"},
    {"name": "Mystery", "distance": None},
]


@pytest.mark.parametrize("category,expected", [
    ("All", ["Boston", "NYC Half", "Comrades", "Western States", "Bay to Breakers", "Mystery"]),
    ("Marathon", ["Boston"]),
    ("Half", ["NYC Half"]),
    ("Ultra", ["Comrades", "Western States"]),
])
def test_filter_races(category, expected):
    assert [r["name"] for r in filter_races(RACES, category)] == expected


def test_marathon_is_case_insensitive():
    assert matches({"distance": "MARATHON, 10K"}, "Marathon")


def test_unknown_or_missing_filter_matches_everything():
    assert matches({"distance": None}, None)
    assert matches({"distance": "5K"}, "Sprint")


def test_categories():
    assert categories({"distance": "Half Marathon"}) == ["All", "Half"]
    assert categories({"distance": "Marathon"}) == ["All", "Marathon"]
    assert categories({}) == ["All"]
