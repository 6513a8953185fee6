"""
Strong-direction Unicode range tables
=====================================

Practical code-point ranges identifying strong LTR and strong RTL characters.
They are not theoretically correct according to the Unicode standard; they are
simplified for speed and stay in the Basic Multilingual Plane. Characters
outside both tables (digits, punctuation, whitespace, astral code points) are
neutral.
"""

import re
from typing import Iterable, NamedTuple, Tuple, Union


class CodePointRange(NamedTuple):
    """Inclusive code-point interval."""

    start: int
    end: int

    def __contains__(self, item: Union[str, int]) -> bool:
        code_point = ord(item) if isinstance(item, str) else item
        return self.start <= code_point <= self.end

    def to_class_fragment(self) -> str:
        if self.start == self.end:
            return re.escape(chr(self.start))
        return f"{re.escape(chr(self.start))}-{re.escape(chr(self.end))}"


LTR_RANGES: Tuple[CodePointRange, ...] = (
    CodePointRange(0x0041, 0x005A),  # A-Z
    CodePointRange(0x0061, 0x007A),  # a-z
    CodePointRange(0x00C0, 0x00D6),  # Latin-1 letters before the multiplication sign
    CodePointRange(0x00D8, 0x00F6),  # ... before the division sign
    CodePointRange(0x00F8, 0x02B8),  # Latin extended, IPA
    CodePointRange(0x0300, 0x0590),  # combining marks, Greek, Cyrillic, Armenian
    CodePointRange(0x0800, 0x1FFF),  # Samaritan through Greek Extended
    CodePointRange(0x2C00, 0xFB1C),  # Glagolitic through Latin/Armenian ligatures
    CodePointRange(0xFE00, 0xFE6F),  # variation selectors, CJK compatibility forms
    CodePointRange(0xFEFD, 0xFFFF),  # halfwidth and fullwidth forms, specials
)

RTL_RANGES: Tuple[CodePointRange, ...] = (
    CodePointRange(0x0591, 0x07FF),  # Hebrew, Arabic, Syriac, Thaana, NKo
    CodePointRange(0xFB1D, 0xFDFF),  # Hebrew and Arabic presentation forms A
    CodePointRange(0xFE70, 0xFEFC),  # Arabic presentation forms B
)


class Format:
    """Unicode directional formatting characters."""

    LRE = "\u202a"  # Left-to-Right Embedding
    RLE = "\u202b"  # Right-to-Left Embedding
    PDF = "\u202c"  # Pop Directional Formatting
    LRM = "\u200e"  # Left-to-Right Mark
    RLM = "\u200f"  # Right-to-Left Mark


def build_char_class(ranges: Iterable[CodePointRange]) -> str:
    """Body of a regex character class (without brackets) matching `ranges`."""
    return "".join(r.to_class_fragment() for r in ranges)


def ranges_are_disjoint(
    first: Iterable[CodePointRange], second: Iterable[CodePointRange]
) -> bool:
    """Return True when no code point belongs to both range sets."""
    second = list(second)
    for a in first:
        for b in second:
            if a.start <= b.end and b.start <= a.end:
                return False
    return True


def in_ranges(char: str, ranges: Iterable[CodePointRange]) -> bool:
    return any(char in r for r in ranges)


LTR_CHARS = build_char_class(LTR_RANGES)
RTL_CHARS = build_char_class(RTL_RANGES)

# Compiled once; every matcher below is read-only.
LTR_CHAR_RE = re.compile(f"[{LTR_CHARS}]")
RTL_CHAR_RE = re.compile(f"[{RTL_CHARS}]")
STRONG_CHAR_RE = re.compile(f"[{LTR_CHARS}{RTL_CHARS}]")

# First strong character is LTR / RTL
LTR_DIR_CHECK_RE = re.compile(f"^[^{RTL_CHARS}]*[{LTR_CHARS}]")
RTL_DIR_CHECK_RE = re.compile(f"^[^{LTR_CHARS}]*[{RTL_CHARS}]")

# Tokens that must stay LTR even inside RTL text; weakly LTR, like numbers
REQUIRED_LTR_RE = re.compile(r"^http://")
NUMERALS_RE = re.compile(r"\d", re.ASCII)


__all__ = [
    "CodePointRange",
    "LTR_RANGES",
    "RTL_RANGES",
    "Format",
    "build_char_class",
    "ranges_are_disjoint",
    "in_ranges",
    "LTR_CHAR_RE",
    "RTL_CHAR_RE",
    "STRONG_CHAR_RE",
    "LTR_DIR_CHECK_RE",
    "RTL_DIR_CHECK_RE",
    "REQUIRED_LTR_RE",
    "NUMERALS_RE",
]
