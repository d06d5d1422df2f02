"""
Unit tests for ingredient name cleanup and the length policy.
Run from repo root: python -m pytest backend/tests/test_normalizer.py -v
"""
import pytest

from dishcraft.classification.normalizer import clean_ingredient_name, normalize_ingredient_name


def test_punctuation_and_emoji_removed():
    assert normalize_ingredient_name("  Salt, to taste! \U0001F9C2 ") == "Salt to taste"


def test_hyphen_and_case_preserved():
    assert normalize_ingredient_name("Half-and-Half") == "Half-and-Half"


def test_non_ascii_letters_are_stripped():
    assert clean_ingredient_name("crème fraîche") == "crme frache"


@pytest.mark.parametrize("raw", ["!!", "", "   ", "ab", "A.b", "--"])
def test_too_short_dropped(raw):
    assert normalize_ingredient_name(raw) is None


def test_three_characters_accepted():
    assert normalize_ingredient_name("Ham") == "Ham"


def test_upper_bound_is_exclusive():
    assert normalize_ingredient_name("a" * 49) == "a" * 49
    assert normalize_ingredient_name("a" * 50) is None
    assert normalize_ingredient_name("a" * 120) is None


def test_length_checked_after_cleanup():
    """Punctuation does not count towards the length."""
    assert normalize_ingredient_name("a!!!!b") is None
    assert normalize_ingredient_name("!" * 10 + "a" * 49) == "a" * 49


def test_non_string_input():
    assert normalize_ingredient_name(None) is None
    assert normalize_ingredient_name(42) is None


def test_unicode_whitespace_kept_between_words():
    assert normalize_ingredient_name("Chicken\xa0Breast") == "Chicken\xa0Breast"
    assert clean_ingredient_name("Brown Rice!") == "Brown Rice"
    assert normalize_ingredient_name("\xa0Salt\xa0") == "Salt"
