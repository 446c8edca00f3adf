"""Test module for the strings grammar on valid input."""

from __future__ import annotations

from stringsfile_py.core import Entry, parse_text


def _entries(text: str) -> list[Entry]:
    return list(parse_text(text))


def test_empty_input_has_no_entries():
    assert _entries("") == []


def test_comments_and_whitespace_only():
    """Verify trailing comments without an entry are dropped."""
    assert _entries("/* comment */\n// comment\n\n") == []


def test_single_entry():
    assert _entries('"key0" = "value0";\n\n') == [Entry("key0", "value0", None)]


def test_key_shortcut_repeats_key_as_value():
    assert _entries('"key0";') == [Entry("key0", "key0", None)]


def test_unquoted_key_and_value():
    """Verify the full unquoted alphabet and surrounding blanks."""
    text = "aA0_$/:.- = /aA0_$:.-;\n   key1  =  value1  ;"
    assert _entries(text) == [
        Entry("aA0_$/:.-", "/aA0_$:.-", None),
        Entry("key1", "value1", None),
    ]


def test_single_quoted_strings_allow_double_quotes():
    assert _entries("'it\"s' = 'x';") == [Entry('it"s', "x", None)]


def test_supplementary_plane_character_is_kept_literally():
    assert _entries('"key0" = "\U0001F30D";') == [Entry("key0", "\U0001F30D", None)]


def test_strings_may_span_lines():
    assert _entries('"key\n0" = "value\n0";') == [Entry("key\n0", "value\n0", None)]


def test_escaped_characters():
    """Verify control escapes and escaped quotes/backslash."""
    text = '"\\a\\b\\f\\n\\r\\t\\v\\\'\\"\\\\" = "value0";'
    assert _entries(text) == [
        Entry("\x07\x08\x0c\n\r\t\x0b'\"\\", "value0", None),
    ]


def test_unknown_escape_is_the_literal_character():
    assert _entries('"\\q\\\U0001F30D" = "";') == [Entry("q\U0001F30D", "", None)]


def test_unicode_escapes_take_at_most_four_hex_digits():
    text = '"\\U00f1" = "";\n"\\U00f11" = "";\n"\\U00fg" = "";\n"\\U0" = "";'
    assert _entries(text) == [
        Entry("ñ", "", None),
        Entry("ñ1", "", None),
        Entry("\x0fg", "", None),
        Entry("\x00", "", None),
    ]


def test_unicode_escape_without_digits_is_literal_u():
    assert _entries('"\\Ux" = "";') == [Entry("Ux", "", None)]


def test_unicode_escape_surrogate_pair_forms_one_character():
    assert _entries('"\\UD83C\\UDF0D" = "";') == [Entry("\U0001F30D", "", None)]


def test_duplicate_keys_are_all_kept_in_order():
    text = '"k" = "1";\n"k" = "2";\n"j" = "3";'
    assert [(e.key, e.value) for e in _entries(text)] == [
        ("k", "1"),
        ("k", "2"),
        ("j", "3"),
    ]


def test_block_comments_attach_to_next_entry():
    """Verify block comment trimming keeps inner newlines."""
    text = (
        "/* comment 0\non multiple lines */\n"
        '"key0" = "value0";\n\n'
        "/* comment 1\non multiple lines\n */\n"
        '"key1" = "value1";\n'
    )
    assert _entries(text) == [
        Entry("key0", "value0", "comment 0\non multiple lines"),
        Entry("key1", "value1", "comment 1\non multiple lines\n"),
    ]


def test_line_comment_attaches_to_next_entry_only():
    text = '// comment 0\n"key0" = "value0";\n\n"key1" = "value1";\n'
    assert _entries(text) == [
        Entry("key0", "value0", "comment 0"),
        Entry("key1", "value1", None),
    ]


def test_nearest_of_several_comments_wins():
    text = '// comment 0\n// comment 1\n"key0" = "value0";'
    assert _entries(text) == [Entry("key0", "value0", "comment 1")]


def test_inline_comments_are_discarded_and_empty_comment_is_kept():
    """Verify comments inside an entry are skipped and `/**/` yields ""."""
    text = '"key0" /**/ = /**/ "value0" /**/ ; /**/\n\n"key1" = "value1";\n/**/'
    assert _entries(text) == [
        Entry("key0", "value0", None),
        Entry("key1", "value1", ""),
    ]


def test_comment_trim_strips_blanks_but_not_newlines():
    assert _entries('/*\t padded \n*/"k";')[0].comment == "padded \n"


def test_vertical_tab_and_form_feed_are_whitespace():
    assert _entries('"a" = "b"\v;\f') == [Entry("a", "b", None)]


def test_unicode_line_separators_end_line_comments():
    text = "// first\u2028\"k\" = \"v\";\u2029"
    assert _entries(text) == [Entry("k", "v", "first")]
