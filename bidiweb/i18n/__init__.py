"""
bidiweb direction estimation
============================

- Strong LTR / RTL code-point range tables
- Character classification (first strong character, any strong LTR)
- Paragraph direction estimation (weighted, first strong, first N words)
"""

from .char_ranges import (
    CodePointRange,
    Format,
    LTR_RANGES,
    RTL_RANGES,
    ranges_are_disjoint,
)
from .classifier import (
    CharacterClassifier,
    classify,
    has_any_strong_ltr,
    has_any_strong_rtl,
    is_first_strong_ltr,
    is_first_strong_rtl,
)
from .estimator import (
    DirectionEstimator,
    classify_character_set,
    embed_direction,
    estimate_direction,
    estimate_first_n_words,
    estimate_first_strong_direction,
    tokenize,
)

__all__ = [
    # Range tables
    "CodePointRange",
    "Format",
    "LTR_RANGES",
    "RTL_RANGES",
    "ranges_are_disjoint",
    # Classifier
    "CharacterClassifier",
    "classify",
    "classify_character_set",
    "has_any_strong_ltr",
    "has_any_strong_rtl",
    "is_first_strong_ltr",
    "is_first_strong_rtl",
    # Estimator
    "DirectionEstimator",
    "embed_direction",
    "estimate_direction",
    "estimate_first_n_words",
    "estimate_first_strong_direction",
    "tokenize",
]
