"""
Character Classifier
====================

Decides whether a character, token or text is strongly LTR, strongly RTL or
neutral using the static range tables in `char_ranges`.
"""

from typing import Optional

from ..core.types import CharacterSetProfile, Direction
from .char_ranges import (
    LTR_CHAR_RE,
    LTR_DIR_CHECK_RE,
    NUMERALS_RE,
    REQUIRED_LTR_RE,
    RTL_CHAR_RE,
    RTL_DIR_CHECK_RE,
    STRONG_CHAR_RE,
)


class CharacterClassifier:
    """Stateless strong-character tests; safe to share between callers."""

    def has_any_strong_ltr(self, text: Optional[str]) -> bool:
        """Whether any character of `text` is in the strong LTR set."""
        return bool(text) and LTR_CHAR_RE.search(text) is not None

    def has_any_strong_rtl(self, text: Optional[str]) -> bool:
        return bool(text) and RTL_CHAR_RE.search(text) is not None

    def is_first_strong_rtl(self, text: Optional[str]) -> bool:
        """
        Whether the first strongly directional character is RTL.

        Returns False when `text` has no strong character at all.
        """
        return bool(text) and RTL_DIR_CHECK_RE.match(text) is not None

    def is_first_strong_ltr(self, text: Optional[str]) -> bool:
        return bool(text) and LTR_DIR_CHECK_RE.match(text) is not None

    def first_strong_direction(self, text: Optional[str]) -> Direction:
        """Direction of the first strong character, NEUTRAL when none."""
        match = STRONG_CHAR_RE.search(text or "")
        if match is None:
            return Direction.NEUTRAL
        if RTL_CHAR_RE.match(match.group(0)):
            return Direction.RTL
        return Direction.LTR

    def classify(self, token: Optional[str]) -> Direction:
        """
        Coarse direction of a single token.

        RTL when the first strong character is RTL, else LTR when any strong
        LTR character is present, else NEUTRAL.
        """
        if self.is_first_strong_rtl(token):
            return Direction.RTL
        if self.has_any_strong_ltr(token):
            return Direction.LTR
        return Direction.NEUTRAL

    def classify_character_set(self, text: Optional[str]) -> CharacterSetProfile:
        return CharacterSetProfile(
            has_any_strong_ltr=self.has_any_strong_ltr(text),
            has_any_strong_rtl=self.has_any_strong_rtl(text),
            is_first_strong_rtl=self.is_first_strong_rtl(text),
            is_first_strong_ltr=self.is_first_strong_ltr(text),
        )

    # Weak LTR signals

    def looks_like_url(self, token: Optional[str]) -> bool:
        return bool(token) and REQUIRED_LTR_RE.match(token) is not None

    def has_numerals(self, text: Optional[str]) -> bool:
        return bool(text) and NUMERALS_RE.search(text) is not None


_default_classifier = CharacterClassifier()


# Convenience functions
def has_any_strong_ltr(text: Optional[str]) -> bool:
    return _default_classifier.has_any_strong_ltr(text)


def has_any_strong_rtl(text: Optional[str]) -> bool:
    return _default_classifier.has_any_strong_rtl(text)


def is_first_strong_rtl(text: Optional[str]) -> bool:
    return _default_classifier.is_first_strong_rtl(text)


def is_first_strong_ltr(text: Optional[str]) -> bool:
    return _default_classifier.is_first_strong_ltr(text)


def classify(token: Optional[str]) -> Direction:
    return _default_classifier.classify(token)


def classify_character_set(text: Optional[str]) -> CharacterSetProfile:
    """Strong-character predicates for `text` in one record."""
    return _default_classifier.classify_character_set(text)


def looks_like_url(token: Optional[str]) -> bool:
    return _default_classifier.looks_like_url(token)


def has_numerals(text: Optional[str]) -> bool:
    return _default_classifier.has_numerals(text)


__all__ = [
    "CharacterClassifier",
    "has_any_strong_ltr",
    "has_any_strong_rtl",
    "is_first_strong_rtl",
    "is_first_strong_ltr",
    "classify",
    "classify_character_set",
    "looks_like_url",
    "has_numerals",
]
