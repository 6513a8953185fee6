import pytest

from bidiweb.core.types import Direction
from bidiweb.i18n.classifier import (
    CharacterClassifier,
    classify,
    classify_character_set,
    has_any_strong_ltr,
    has_any_strong_rtl,
    has_numerals,
    is_first_strong_ltr,
    is_first_strong_rtl,
    looks_like_url,
)


def test_has_any_strong_ltr_looks_past_the_first_character():
    assert has_any_strong_ltr("שלום hello")
    assert not has_any_strong_ltr("שלום")
    assert not has_any_strong_ltr("")
    assert not has_any_strong_ltr(None)


def test_has_any_strong_rtl():
    assert has_any_strong_rtl("hello שלום")
    assert not has_any_strong_rtl("hello 123")


def test_first_strong_rtl_skips_neutral_prefix():
    assert is_first_strong_rtl("123 - שלום hello")
    assert not is_first_strong_rtl("hello שלום")
    assert not is_first_strong_rtl("!!! 42")


def test_first_strong_ltr_is_symmetric():
    assert is_first_strong_ltr("... hello שלום")
    assert not is_first_strong_ltr("(שלום) hello")
    assert not is_first_strong_ltr("")


@pytest.mark.parametrize(
    "token, expected",
    [
        ("שלום", Direction.RTL),
        ("مرحبا", Direction.RTL),
        ("(שלום)", Direction.RTL),
        ("hello", Direction.LTR),
        ("Привет", Direction.LTR),
        ("Ελλάδα", Direction.LTR),
        ("aשלום", Direction.LTR),
        ("123", Direction.NEUTRAL),
        ("", Direction.NEUTRAL),
    ],
)
def test_classify(token, expected):
    assert classify(token) is expected


def test_classify_character_set():
    profile = classify_character_set("hello שלום")
    assert profile.has_any_strong_ltr
    assert profile.has_any_strong_rtl
    assert profile.is_first_strong_ltr
    assert not profile.is_first_strong_rtl


def test_classify_character_set_of_empty_text():
    profile = classify_character_set("")
    assert not any(
        [
            profile.has_any_strong_ltr,
            profile.has_any_strong_rtl,
            profile.is_first_strong_ltr,
            profile.is_first_strong_rtl,
        ]
    )


def test_url_detection_is_a_plain_http_prefix_match():
    assert looks_like_url("http://example.com")
    assert not looks_like_url("https://example.com/a")
    assert not looks_like_url("see:http://example.com")
    assert not looks_like_url("ftp://example.com")


def test_numerals_are_ascii_digits():
    assert has_numerals("abc1")
    assert not has_numerals("abc")
    # Arabic-Indic digits are already strong RTL in the tables
    assert not has_numerals("٣")


def test_first_strong_direction():
    classifier = CharacterClassifier()
    assert classifier.first_strong_direction("12 שלום hi") is Direction.RTL
    assert classifier.first_strong_direction("12 hi שלום") is Direction.LTR
    assert classifier.first_strong_direction("12 !!") is Direction.NEUTRAL
