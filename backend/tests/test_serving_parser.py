"""Tests for serving descriptor parsing."""

import math

from recipe_budget.services.scaling.serving_parser import parse_servings


def test_parse_servings_numbers_pass_through():
    assert parse_servings(6) == 6
    assert parse_servings(2.5) == 2.5


def test_parse_servings_free_text():
    assert parse_servings("4 people") == 4
    assert parse_servings("serves 12") == 12
    assert parse_servings("4") == 4


def test_parse_servings_range_takes_first_number():
    assert parse_servings("4 to 6") == 4
    assert parse_servings("2-3") == 2


def test_parse_servings_defaults_to_one():
    assert parse_servings("") == 1
    assert parse_servings(None) == 1
    assert parse_servings("no digits here") == 1


def test_parse_servings_degenerate_counts_default_to_one():
    assert parse_servings("0 people") == 1
    assert parse_servings(0) == 1
    assert parse_servings(-3) == 1
    assert parse_servings(math.nan) == 1
    assert parse_servings(math.inf) == 1
    assert parse_servings(True) == 1
