"""Unit tests for core/frontmatter.py"""

import pytest

from palette.core.frontmatter import (
    delimited_frontmatter,
    extract_frontmatter,
    implicit_frontmatter,
    split_lines,
    split_pair,
    strip_quotes,
)


@pytest.mark.parametrize("raw, expected", [
    ('"value"', "value"),
    ("'value'", "value"),
    ("'va\"lue'", 'va"lue'),
    ("\"mismatched'", "\"mismatched'"),
    ('""value""', '"value"'),
    ('"', '"'),
    ("plain", "plain"),
])
def test_strip_quotes(raw, expected):
    """strip_quotes removes at most one matching pair of enclosing quotes."""
    assert strip_quotes(raw) == expected


def test_split_pair_first_colon():
    """Only the first colon separates key from value."""
    assert split_pair("url: http://example.com:8080") == ("url", "http://example.com:8080")


def test_split_pair_trims_and_strips_quotes():
    assert split_pair('  title :  "Hello"  ') == ("title", "Hello")


@pytest.mark.parametrize("line", ["no colon here", "key:", "key:   ", ": value", "   : value", 'key: ""'])
def test_split_pair_rejects_empty_sides(line):
    """Lines without a colon or with an empty key/value yield nothing."""
    assert split_pair(line) is None


def test_delimited_block():
    """A closed --- block yields its pairs and a body start after the closer."""
    lines = split_lines("---\na: 1\nb: two\n---\nBODY")
    meta, start = delimited_frontmatter(lines)
    assert meta == {"a": "1", "b": "two"}
    assert start == 4
    assert lines[start] == "BODY"


def test_delimited_block_skips_invalid_lines():
    """Lines without a colon or with empty values contribute nothing."""
    meta, _ = delimited_frontmatter(split_lines("---\njust text\nempty:\n- item\nk: v\n---\n"))
    assert meta == {"k": "v"}


def test_delimited_block_last_write_wins():
    meta, _ = delimited_frontmatter(split_lines("---\nk: first\nk: second\n---\n"))
    assert meta == {"k": "second"}


def test_delimited_block_unclosed():
    """Without a closing --- there is no metadata and the body starts at line 0."""
    meta, start = delimited_frontmatter(split_lines("---\na: 1\nbody"))
    assert meta == {}
    assert start == 0


def test_delimited_block_tolerates_whitespace_around_markers():
    meta, start = delimited_frontmatter(split_lines("  ---  \na: 1\n---\t\nrest"))
    assert meta == {"a": "1"}
    assert start == 3


def test_implicit_stops_at_blank_line():
    meta, start = implicit_frontmatter(split_lines("a: 1\nb: 2\n\ntext"))
    assert meta == {"a": "1", "b": "2"}
    assert start == 2


def test_implicit_stops_at_tag_line():
    meta, start = implicit_frontmatter(split_lines("a: 1\n<role>x</role>"))
    assert meta == {"a": "1"}
    assert start == 1


def test_implicit_stops_at_line_without_colon():
    """Scanning halts before a non key/value line and never resumes."""
    meta, start = implicit_frontmatter(split_lines("a: 1\nplain line\nb: 2"))
    assert meta == {"a": "1"}
    assert start == 1


def test_implicit_stops_at_list_item():
    meta, start = implicit_frontmatter(split_lines("a: 1\n- b: 2\nc: 3"))
    assert meta == {"a": "1"}
    assert start == 1


def test_implicit_consumes_line_with_empty_value():
    """A key/value line with an empty value is consumed but not recorded."""
    meta, start = implicit_frontmatter(split_lines("a:\nb: 2\n\nbody"))
    assert meta == {"b": "2"}
    assert start == 2


def test_implicit_runs_to_end_of_text():
    meta, start = implicit_frontmatter(split_lines("a: 1\nb: 2"))
    assert meta == {"a": "1", "b": "2"}
    assert start == 2


def test_implicit_prose_first_line():
    meta, start = implicit_frontmatter(split_lines("Just some prose.\nkey: value"))
    assert meta == {}
    assert start == 0


def test_extract_frontmatter_unclosed_does_not_fall_back_to_implicit():
    """An unclosed --- block is not retried as implicit key/value lines."""
    meta, start = extract_frontmatter("---\na: 1\n")
    assert meta == {}
    assert start == 0


def test_extract_frontmatter_picks_implicit():
    meta, start = extract_frontmatter("name: x\n\nbody")
    assert meta == {"name": "x"}
    assert start == 1


def test_extract_frontmatter_empty_text():
    assert extract_frontmatter("") == ({}, 0)


def test_extract_frontmatter_delimited_after_bom():
    """A leading byte-order mark does not hide the opening --- marker."""
    meta, start = extract_frontmatter("\ufeff---\nname: x\n---\nbody")
    assert meta == {"name": "x"}
    assert start == 3


def test_extract_frontmatter_implicit_after_bom():
    meta, start = extract_frontmatter("\ufeffname: x\n\nbody")
    assert meta == {"name": "x"}
    assert start == 1
