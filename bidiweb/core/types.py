"""
Types shared by the direction estimator and the DOM processors
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Union


class Direction(Enum):
    """Estimated writing direction of a piece of text."""

    RTL = -1
    NEUTRAL = 0  # no strongly directional content, nothing to apply
    LTR = 1

    @property
    def css_value(self) -> Optional[str]:
        """Value for the css `direction` property, None means no action."""
        if self is Direction.RTL:
            return "rtl"
        if self is Direction.LTR:
            return "ltr"
        return None

    @property
    def is_strong(self) -> bool:
        return self is not Direction.NEUTRAL

    def opposite(self) -> "Direction":
        if self is Direction.RTL:
            return Direction.LTR
        if self is Direction.LTR:
            return Direction.RTL
        return Direction.NEUTRAL

    @classmethod
    def from_value(cls, value: Union["Direction", int, str]) -> "Direction":
        """
        Coerce an enum, its numeric value or a name into a Direction.

        Accepts "rtl", "ltr", "neutral" and the legacy alias "unknown"
        (case-insensitive).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        name = str(value).strip().upper()
        if name == "UNKNOWN":
            return cls.NEUTRAL
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


@dataclass(frozen=True)
class CharacterSetProfile:
    """Strong-character predicates for a piece of text."""

    has_any_strong_ltr: bool
    has_any_strong_rtl: bool
    is_first_strong_rtl: bool
    is_first_strong_ltr: bool


@dataclass(frozen=True)
class DirectionAnalysis:
    """Outcome of one estimation, with the evidence behind it."""

    direction: Direction
    strategy: str
    rtl_count: int = 0
    ltr_count: int = 0
    strong_count: int = 0
    has_weakly_ltr: bool = False
    ratio: Optional[float] = None
    threshold: Optional[float] = None
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["direction"] = self.direction.name
        return data
