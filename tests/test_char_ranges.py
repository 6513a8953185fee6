from bidiweb.i18n.char_ranges import (
    LTR_RANGES,
    RTL_RANGES,
    CodePointRange,
    Format,
    in_ranges,
    ranges_are_disjoint,
)


def test_tables_are_disjoint():
    assert ranges_are_disjoint(LTR_RANGES, RTL_RANGES)


def test_overlap_is_detected():
    assert not ranges_are_disjoint(
        [CodePointRange(0x10, 0x20)], [CodePointRange(0x20, 0x30)]
    )


def test_range_membership_accepts_chars_and_code_points():
    latin_lower = CodePointRange(0x61, 0x7A)
    assert "a" in latin_lower
    assert 0x7A in latin_lower
    assert "A" not in latin_lower


def test_script_membership():
    assert in_ranges("ש", RTL_RANGES)  # Hebrew
    assert in_ranges("م", RTL_RANGES)  # Arabic
    assert in_ranges("ﻻ", RTL_RANGES)  # Arabic presentation form B
    assert in_ranges("a", LTR_RANGES)
    assert in_ranges("Ж", LTR_RANGES)  # Cyrillic
    assert in_ranges("你", LTR_RANGES)
    assert not in_ranges("ש", LTR_RANGES)


def test_neutral_characters_are_in_neither_table():
    for char in ("1", " ", "!", "-", "×", "\U0001F600"):
        assert not in_ranges(char, LTR_RANGES)
        assert not in_ranges(char, RTL_RANGES)


def test_hebrew_block_boundary():
    # U+0590 is still LTR in the practical tables, U+0591 starts RTL
    assert in_ranges("\u0590", LTR_RANGES)
    assert in_ranges("\u0591", RTL_RANGES)


def test_format_characters():
    assert Format.RLE == "\u202b"
    assert Format.LRE == "\u202a"
    assert Format.PDF == "\u202c"
