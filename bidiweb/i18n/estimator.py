"""
Direction Estimator
===================

Turns a block of text into a single paragraph-level direction.

Three interchangeable strategies:

- ``weighted`` (default): share of RTL tokens among strongly directional
  tokens, compared against a detection threshold.
- ``first_strong``: direction of the first strong character in the text.
- ``first_n_words``: legacy sampling of the first strongly directional
  words, where the first word's direction wins unless clearly outvoted.

Numbers and URL-like tokens are weakly LTR: they never outweigh a strong
character, but they turn an otherwise neutral text into LTR.
"""

import logging
import re
from typing import Callable, Dict, List, Optional

from ..core.config import (
    DEFAULT_MIN_RATIO,
    DEFAULT_MIN_SAMPLE_TO_COMPARE,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_THRESHOLD,
    EstimationSettings,
    Strategy,
    clamp_unit,
)
from ..core.types import CharacterSetProfile, Direction, DirectionAnalysis
from ..utils.log_safety import create_safe_logger_wrapper, preview_text
from .char_ranges import Format
from .classifier import CharacterClassifier

logger = create_safe_logger_wrapper(logging.getLogger(__name__))

# U+FEFF is not str.isspace() but must separate tokens like other whitespace
WHITESPACE_RE = re.compile(r"[\s\ufeff]+")


def tokenize(text: Optional[str]) -> List[str]:
    """Split on whitespace runs (byte order marks included), dropping empty tokens."""
    return [token for token in WHITESPACE_RE.split(text or "") if token]


class DirectionEstimator:
    """Estimates text direction with a configurable strategy."""

    def __init__(
        self,
        settings: Optional[EstimationSettings] = None,
        classifier: Optional[CharacterClassifier] = None,
    ):
        self.settings = settings or EstimationSettings()
        self.classifier = classifier or CharacterClassifier()
        self._strategies: Dict[Strategy, Callable[[str], DirectionAnalysis]] = {
            Strategy.weighted: lambda text: self.analyze_weighted(
                text, self.settings.threshold
            ),
            Strategy.first_strong: self.analyze_first_strong,
            Strategy.first_n_words: lambda text: self.analyze_first_n_words(
                text,
                sample_size=self.settings.sample_size,
                min_sample_to_compare=self.settings.min_sample_to_compare,
                min_ratio=self.settings.min_ratio,
            ),
        }

    @property
    def strategy(self) -> Strategy:
        return self.settings.strategy

    def analyze(self, text: Optional[str]) -> DirectionAnalysis:
        """Run the configured strategy and log the verdict."""
        analysis = self._strategies[self.settings.strategy](text or "")
        logger.debug(
            f"DIRECTION_ESTIMATE: strategy={analysis.strategy} "
            f"direction={analysis.direction.name} reason={analysis.reason} "
            f"text='{preview_text(text)}'"
        )
        return analysis

    def estimate(self, text: Optional[str]) -> Direction:
        return self.analyze(text).direction

    def analyze_weighted(
        self, text: Optional[str], threshold: float = DEFAULT_THRESHOLD
    ) -> DirectionAnalysis:
        """
        Estimate direction from relative word counts.

        If the share of RTL words among strongly directional words is above
        `threshold`, the text is RTL. Otherwise, if any word is strongly or
        weakly LTR, it is LTR. Otherwise it is NEUTRAL.

        Args:
            text: Text to analyze
            threshold: Share in [0, 1]; out-of-range values are clamped

        Returns:
            DirectionAnalysis for the weighted strategy
        """
        threshold = self._clamp_threshold(threshold)
        rtl_count = 0
        total_count = 0
        has_weakly_ltr = False

        for token in tokenize(text):
            if self.classifier.is_first_strong_rtl(token):
                rtl_count += 1
                total_count += 1
            elif self.classifier.looks_like_url(token):
                has_weakly_ltr = True
            elif self.classifier.has_any_strong_ltr(token):
                total_count += 1
            elif self.classifier.has_numerals(token):
                has_weakly_ltr = True

        common = dict(
            strategy=Strategy.weighted.value,
            rtl_count=rtl_count,
            ltr_count=total_count - rtl_count,
            strong_count=total_count,
            has_weakly_ltr=has_weakly_ltr,
            threshold=threshold,
        )

        if total_count == 0:
            if has_weakly_ltr:
                return DirectionAnalysis(
                    direction=Direction.LTR, reason="weakly_ltr_only", **common
                )
            return DirectionAnalysis(
                direction=Direction.NEUTRAL, reason="no_strong_tokens", **common
            )

        ratio = rtl_count / total_count
        if ratio > threshold:
            return DirectionAnalysis(
                direction=Direction.RTL,
                ratio=ratio,
                reason="ratio_above_threshold",
                **common,
            )
        return DirectionAnalysis(
            direction=Direction.LTR,
            ratio=ratio,
            reason="ratio_at_or_below_threshold",
            **common,
        )

    def analyze_first_strong(self, text: Optional[str]) -> DirectionAnalysis:
        """Direction of the first strong character; weak LTR decides ties with NEUTRAL."""
        text = text or ""
        direction = self.classifier.first_strong_direction(text)
        if direction.is_strong:
            return DirectionAnalysis(
                direction=direction,
                strategy=Strategy.first_strong.value,
                rtl_count=int(direction is Direction.RTL),
                ltr_count=int(direction is Direction.LTR),
                strong_count=1,
                reason="first_strong_char",
            )

        has_weakly_ltr = self.classifier.has_numerals(text) or any(
            self.classifier.looks_like_url(token) for token in tokenize(text)
        )
        return DirectionAnalysis(
            direction=Direction.LTR if has_weakly_ltr else Direction.NEUTRAL,
            strategy=Strategy.first_strong.value,
            has_weakly_ltr=has_weakly_ltr,
            reason="weakly_ltr_only" if has_weakly_ltr else "no_strong_chars",
        )

    def analyze_first_n_words(
        self,
        text: Optional[str],
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        min_sample_to_compare: int = DEFAULT_MIN_SAMPLE_TO_COMPARE,
        min_ratio: float = DEFAULT_MIN_RATIO,
    ) -> DirectionAnalysis:
        """
        Legacy estimate from the first `sample_size` strongly directional words.

        The first word's direction is the candidate. With fewer than
        `min_sample_to_compare` sampled words it is returned as is; otherwise
        it is kept unless agreeing/opposing falls below `min_ratio`.
        """
        sample: List[Direction] = []
        for token in tokenize(text):
            if len(sample) >= sample_size:
                break
            direction = self.classifier.classify(token)
            if direction.is_strong:
                sample.append(direction)

        rtl_count = sample.count(Direction.RTL)
        common = dict(
            strategy=Strategy.first_n_words.value,
            rtl_count=rtl_count,
            ltr_count=len(sample) - rtl_count,
            strong_count=len(sample),
            threshold=min_ratio,
        )

        if not sample:
            return DirectionAnalysis(
                direction=Direction.NEUTRAL, reason="no_strong_tokens", **common
            )

        candidate = sample[0]
        if len(sample) < min_sample_to_compare:
            return DirectionAnalysis(
                direction=candidate, reason="insufficient_sample", **common
            )

        agreeing = sample.count(candidate)
        opposing = len(sample) - agreeing
        if opposing == 0:
            return DirectionAnalysis(
                direction=candidate, reason="unopposed", **common
            )

        ratio = agreeing / opposing
        if ratio >= min_ratio:
            return DirectionAnalysis(
                direction=candidate, ratio=ratio, reason="candidate_kept", **common
            )
        return DirectionAnalysis(
            direction=candidate.opposite(),
            ratio=ratio,
            reason="candidate_outvoted",
            **common,
        )

    @staticmethod
    def _clamp_threshold(threshold: float) -> float:
        if threshold != threshold:  # NaN
            return DEFAULT_THRESHOLD
        clamped = clamp_unit(threshold)
        if clamped != threshold:
            logger.debug(f"THRESHOLD_CLAMPED: requested={threshold} used={clamped}")
        return clamped


_default_estimator = DirectionEstimator()


# Convenience functions
def estimate_direction(
    text: Optional[str], threshold: float = DEFAULT_THRESHOLD
) -> Direction:
    """Weighted word-ratio estimate; the primary entry point."""
    return _default_estimator.analyze_weighted(text, threshold).direction


def estimate_first_strong_direction(text: Optional[str]) -> Direction:
    """First-strong-character estimate."""
    return _default_estimator.analyze_first_strong(text).direction


def estimate_first_n_words(
    text: Optional[str],
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    min_sample_to_compare: int = DEFAULT_MIN_SAMPLE_TO_COMPARE,
    min_ratio: float = DEFAULT_MIN_RATIO,
) -> Direction:
    """Legacy sampled-words estimate."""
    return _default_estimator.analyze_first_n_words(
        text,
        sample_size=sample_size,
        min_sample_to_compare=min_sample_to_compare,
        min_ratio=min_ratio,
    ).direction


def classify_character_set(text: Optional[str]) -> CharacterSetProfile:
    return _default_estimator.classifier.classify_character_set(text)


def embed_direction(text: str, direction: Optional[Direction] = None) -> str:
    """
    Wrap `text` in an RLE/LRE ... PDF embedding.

    The direction is estimated with the weighted strategy when not given;
    neutral text is returned unchanged.
    """
    if not text:
        return text
    if direction is None:
        direction = estimate_direction(text)
    if direction is Direction.RTL:
        return f"{Format.RLE}{text}{Format.PDF}"
    if direction is Direction.LTR:
        return f"{Format.LRE}{text}{Format.PDF}"
    return text


__all__ = [
    "DirectionEstimator",
    "tokenize",
    "estimate_direction",
    "estimate_first_strong_direction",
    "estimate_first_n_words",
    "classify_character_set",
    "embed_direction",
]
