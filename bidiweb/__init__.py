"""
bidiweb - paragraph direction estimation
========================================

Estimates whether a block of text reads right-to-left, left-to-right or is
neutral, using a fast character-range heuristic (not the full Unicode
Bidirectional Algorithm), and applies the verdict to HTML elements.

    >>> from bidiweb import estimate_direction, Direction
    >>> estimate_direction("שלום שלום שלום hello") is Direction.RTL
    True
"""

from .core.types import CharacterSetProfile, Direction, DirectionAnalysis
from .core.config import BidiSettings, EstimationSettings, Strategy, load_settings
from .i18n.estimator import (
    DirectionEstimator,
    classify_character_set,
    embed_direction,
    estimate_direction,
    estimate_first_n_words,
    estimate_first_strong_direction,
)

__version__ = "1.0.0"
__all__ = [
    "Direction",
    "DirectionAnalysis",
    "CharacterSetProfile",
    "BidiSettings",
    "EstimationSettings",
    "Strategy",
    "load_settings",
    "DirectionEstimator",
    "classify_character_set",
    "embed_direction",
    "estimate_direction",
    "estimate_first_n_words",
    "estimate_first_strong_direction",
    "estimate",
]


def estimate(text, settings=None):
    """
    Simple estimation interface

    Args:
        text: Text to analyze
        settings: Optional EstimationSettings (weighted, threshold 0.4 by default)

    Returns:
        Direction
    """
    return DirectionEstimator(settings).estimate(text)
