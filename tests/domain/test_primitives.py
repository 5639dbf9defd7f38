"""Tests for the primitive comparators."""

from datetime import date, datetime

import pytest

from ordkit.domain.primitives import (
    always_equal,
    by_boolean,
    by_code_unit,
    by_date,
    by_number,
    by_string,
    by_string_case_insensitive,
)
from ordkit.domain.services.composition import as_key


def test_always_equal():
    assert always_equal(1, 2) == 0
    assert always_equal("a", None) == 0


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1, 2, -1),
        (2, 1, 1),
        (2.5, 2.5, 0.0),
        (-3, 4, -7),
    ],
)
def test_by_number_is_difference(a, b, expected):
    assert by_number(a, b) == expected


def test_by_number_sorts_ascending():
    assert sorted([1, 10, 3, 8, 5], key=as_key(by_number)) == [1, 3, 5, 8, 10]


def test_by_string_orders_lowercase_words():
    assert sorted(["pear", "apple", "fig"], key=as_key(by_string)) == ["apple", "fig", "pear"]
    assert by_string("same", "same") == 0


def test_by_string_case_insensitive_ignores_case():
    assert by_string_case_insensitive("Apple", "apple") == 0
    assert by_string_case_insensitive("STRASSE", "straße") == 0
    assert by_string_case_insensitive("apple", "Banana") < 0


def test_by_code_unit_orders_by_code_point():
    """Uppercase letters have lower code points than lowercase ones."""
    assert by_code_unit("B", "a") == -1
    assert by_code_unit("a", "B") == 1
    assert by_code_unit("x", "x") == 0


def test_by_date_is_chronological():
    assert by_date(date(2020, 1, 1), date(2021, 1, 1)) == -1
    assert by_date(datetime(2021, 5, 1, 12), datetime(2021, 5, 1, 9)) == 1
    assert by_date(date(2020, 2, 29), date(2020, 2, 29)) == 0


def test_by_boolean_false_before_true():
    assert sorted([True, False, True], key=as_key(by_boolean)) == [False, True, True]
    assert by_boolean(False, True) == -1
    assert by_boolean(True, True) == 0


def test_by_string_case_insensitive_ignores_accents():
    assert by_string_case_insensitive("Résumé", "resume") == 0
    assert by_string_case_insensitive("Ångström", "ANGSTROM") == 0
    assert by_string_case_insensitive("éclair", "fig") < 0


def test_by_code_unit_uses_utf16_order():
    """Astral characters are surrogate pairs (0xD800..) and sort before U+FF21."""
    assert by_code_unit("\U0001F600", "Ａ") == -1
    assert by_code_unit("Ａ", "\U0001F600") == 1
    assert by_code_unit("\U0001F600", "\U0001F600") == 0
