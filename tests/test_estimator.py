import math

import pytest

from bidiweb.core.config import EstimationSettings, Strategy
from bidiweb.core.types import Direction
from bidiweb.i18n.estimator import (
    DirectionEstimator,
    embed_direction,
    estimate_direction,
    estimate_first_n_words,
    estimate_first_strong_direction,
    tokenize,
)

BOTH = [
    lambda text: estimate_direction(text, 0.4),
    estimate_first_strong_direction,
]


@pytest.mark.parametrize("estimate", BOTH)
@pytest.mark.parametrize("text", ["", "   ", "... !!! ---", "(*) [?]", "\U0001F600 \U0001F600"])
def test_neutral_text(estimate, text):
    assert estimate(text) is Direction.NEUTRAL


@pytest.mark.parametrize("estimate", BOTH)
@pytest.mark.parametrize("text", ["שלום עולם", "مرحبا بالعالم", "«שלום»"])
def test_rtl_script_text(estimate, text):
    assert estimate(text) is Direction.RTL


@pytest.mark.parametrize("estimate", BOTH)
@pytest.mark.parametrize("text", ["Hello World", "Привет мир", "hello, world!"])
def test_ltr_script_text(estimate, text):
    assert estimate(text) is Direction.LTR


def test_none_is_neutral():
    assert estimate_direction(None) is Direction.NEUTRAL
    assert estimate_first_strong_direction(None) is Direction.NEUTRAL
    assert estimate_first_n_words(None) is Direction.NEUTRAL


class TestWeighted:
    def test_majority_rtl(self):
        assert estimate_direction("שלום שלום שלום hello", 0.4) is Direction.RTL

    def test_half_rtl_is_above_default_threshold(self):
        assert estimate_direction("hello שלום", 0.4) is Direction.RTL

    def test_threshold_is_strictly_greater(self):
        # ratio 0.5 exactly
        assert estimate_direction("hello שלום", 0.49) is Direction.RTL
        assert estimate_direction("hello שלום", 0.5) is Direction.LTR
        assert estimate_direction("hello שלום", 0.6) is Direction.LTR

    def test_one_rtl_word_in_three(self):
        # ratio 1/3
        assert estimate_direction("hello world שלום", 0.4) is Direction.LTR
        assert estimate_direction("hello world שלום", 0.3) is Direction.RTL

    def test_default_threshold(self):
        assert estimate_direction("hello שלום") is Direction.RTL

    def test_digits_are_weak(self):
        assert estimate_direction("123 שלום") is Direction.RTL
        assert estimate_direction("123 456") is Direction.LTR

    def test_url_is_weak_and_not_counted(self):
        assert estimate_direction("http://example.com") is Direction.LTR
        assert estimate_direction("http://example.com שלום") is Direction.RTL
        assert estimate_direction("hello http://example.com שלום") is Direction.RTL

    def test_https_token_counts_as_strong_ltr_word(self):
        # 1 RTL of 4 strong tokens = 0.25
        text = "שלום https://a.com https://b.com https://c.com"
        analysis = DirectionEstimator().analyze_weighted(text, 0.4)
        assert analysis.direction is Direction.LTR
        assert analysis.strong_count == 4
        assert not analysis.has_weakly_ltr

    def test_byte_order_mark_separates_tokens(self):
        assert estimate_direction("\ufeffשלום") is Direction.RTL
        assert estimate_first_n_words("\ufeffשלום") is Direction.RTL

    def test_token_with_leading_hebrew_counts_as_rtl(self):
        assert estimate_direction("שלוםhello hello", 0.4) is Direction.RTL

    def test_threshold_is_clamped(self):
        assert estimate_direction("hello שלום", 1.5) is Direction.LTR
        assert estimate_direction("hello שלום", -3) is Direction.RTL
        assert estimate_direction("hello", -1) is Direction.LTR

    def test_nan_threshold_falls_back_to_default(self):
        assert estimate_direction("hello שלום", math.nan) is Direction.RTL

    def test_analysis_details(self):
        analysis = DirectionEstimator().analyze_weighted("שלום שלום שלום hello 42", 0.4)
        assert analysis.direction is Direction.RTL
        assert analysis.rtl_count == 3
        assert analysis.ltr_count == 1
        assert analysis.strong_count == 4
        assert analysis.ratio == pytest.approx(0.75)
        assert analysis.threshold == 0.4
        assert analysis.has_weakly_ltr
        assert analysis.reason == "ratio_above_threshold"

    def test_weak_only_reason(self):
        analysis = DirectionEstimator().analyze_weighted("42", 0.4)
        assert analysis.direction is Direction.LTR
        assert analysis.reason == "weakly_ltr_only"
        assert analysis.ratio is None


class TestFirstStrong:
    def test_first_strong_character_wins(self):
        assert estimate_first_strong_direction("hello שלום שלום שלום") is Direction.LTR
        assert estimate_first_strong_direction("שלום hello hello") is Direction.RTL

    def test_digits_before_rtl_do_not_decide(self):
        assert estimate_first_strong_direction("123 שלום") is Direction.RTL

    def test_weak_signals_turn_neutral_into_ltr(self):
        assert estimate_first_strong_direction("123 !!") is Direction.LTR
        assert estimate_first_strong_direction("- 2024 -") is Direction.LTR
        assert estimate_first_strong_direction("!!") is Direction.NEUTRAL

    def test_analysis_reason(self):
        analysis = DirectionEstimator().analyze_first_strong("  שלום")
        assert analysis.reason == "first_strong_char"
        assert analysis.strategy == "first_strong"


class TestFirstNWords:
    def test_short_sample_returns_first_word_direction(self):
        # five strong words < six needed to compare
        text = "hello שלום שלום שלום שלום"
        assert estimate_first_n_words(text) is Direction.LTR

    def test_no_strong_words(self):
        assert estimate_first_n_words("123 !!! 456") is Direction.NEUTRAL

    def test_unopposed_candidate(self):
        assert estimate_first_n_words("שלום " * 8) is Direction.RTL

    def test_candidate_outvoted(self):
        # 1 agreeing / 5 opposing = 0.2 < 0.4
        text = "hello שלום שלום שלום שלום שלום"
        assert estimate_first_n_words(text) is Direction.RTL

    def test_candidate_kept(self):
        # 2 / 4 = 0.5
        text = "hello world שלום שלום שלום שלום"
        assert estimate_first_n_words(text) is Direction.LTR

    def test_ratio_equal_to_minimum_keeps_candidate(self):
        # 2 / 5 = 0.4
        text = "hello world שלום שלום שלום שלום שלום"
        assert estimate_first_n_words(text) is Direction.LTR

    def test_only_the_first_words_are_sampled(self):
        text = "hello שלום שלום שלום שלום שלום world world world world"
        # default sample of 10: 5 LTR vs 5 RTL, candidate kept
        assert estimate_first_n_words(text) is Direction.LTR
        # sample of 6: 1 LTR vs 5 RTL
        assert estimate_first_n_words(text, sample_size=6) is Direction.RTL

    def test_neutral_tokens_are_not_sampled(self):
        text = "1 2 3 4 5 6 hello שלום"
        assert estimate_first_n_words(text) is Direction.LTR

    def test_custom_parameters(self):
        # 1 agreeing / 2 opposing = 0.5
        text = "hello שלום שלום"
        assert estimate_first_n_words(text, min_sample_to_compare=3) is Direction.LTR
        assert (
            estimate_first_n_words(text, min_sample_to_compare=3, min_ratio=0.6)
            is Direction.RTL
        )


class TestDirectionEstimator:
    def test_default_strategy_is_weighted(self):
        estimator = DirectionEstimator()
        assert estimator.strategy is Strategy.weighted
        assert estimator.estimate("hello שלום שלום") is Direction.RTL

    def test_strategy_from_settings(self):
        text = "123 hello שלום שלום"
        first_strong = DirectionEstimator(EstimationSettings(strategy="first_strong"))
        weighted = DirectionEstimator(EstimationSettings(strategy="weighted"))
        assert first_strong.estimate(text) is Direction.LTR
        assert weighted.estimate(text) is Direction.RTL

    def test_threshold_from_settings(self):
        estimator = DirectionEstimator(EstimationSettings(threshold=0.6))
        analysis = estimator.analyze("hello שלום")
        assert analysis.direction is Direction.LTR
        assert analysis.threshold == 0.6

    def test_first_n_words_settings(self):
        estimator = DirectionEstimator(
            EstimationSettings(strategy="first_n_words", min_sample_to_compare=2)
        )
        analysis = estimator.analyze("hello world שלום שלום שלום")
        assert analysis.direction is Direction.LTR
        assert analysis.reason == "candidate_kept"
        assert analysis.threshold == 0.4

    def test_repeated_calls_are_identical(self):
        estimator = DirectionEstimator()
        text = "שלום hello 123 http://example.com"
        assert estimator.analyze(text) == estimator.analyze(text)
        assert estimate_direction(text) is estimate_direction(text)


def test_tokenize_drops_empty_tokens():
    assert tokenize("  a \n b\t") == ["a", "b"]
    assert tokenize("") == []
    assert tokenize("\ufeffשלום\ufeffhello") == ["שלום", "hello"]


def test_embed_direction():
    assert embed_direction("שלום") == "\u202bשלום\u202c"
    assert embed_direction("hello") == "\u202ahello\u202c"
    assert embed_direction("hello", Direction.RTL) == "\u202bhello\u202c"
    assert embed_direction("!!!") == "!!!"
    assert embed_direction("") == ""
