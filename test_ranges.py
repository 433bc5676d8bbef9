#!/usr/bin/env python3
"""Test plain-text reconstruction and overlap queries."""

from slidegen.layout.markup import parse
from slidegen.layout.models import FormatRange, Run, Style
from slidegen.layout.ranges import FormatIndex, index


def test_index_builds_plain_text_and_ranges():
    result = index(parse("Hello **world**! #demo"))

    assert result.plain_text == "Hello world! #demo"
    assert result.ranges == [
        FormatRange(6, 11, bold=True),
        FormatRange(13, 18, is_hashtag=True),
    ]


def test_plain_runs_produce_no_ranges():
    result = index([Run("a "), Run("b")])
    assert result.plain_text == "a b"
    assert result.ranges == []


def test_query_overlap_ors_all_intersecting_ranges():
    result = index([Run("bold", bold=True), Run(" mid "), Run("ital", italic=True)])

    assert result.query_overlap(0, 13) == Style(bold=True, italic=True)
    assert result.query_overlap(3, 6) == Style(bold=True)
    assert result.query_overlap(5, 8) == Style()
    assert result.query_overlap(8, 10) == Style(italic=True)


def test_query_overlap_uses_half_open_spans():
    result = index([Run("ab", bold=True), Run("cd")])

    # [2, 4) starts exactly where the bold range ends
    assert result.query_overlap(2, 4) == Style()
    assert result.query_overlap(1, 2) == Style(bold=True)


def test_empty_query_is_unstyled():
    result = index([Run("bold", bold=True)])
    assert result.query_overlap(2, 2) == Style()
    assert result.query_overlap(3, 1) == Style()


def test_query_finds_long_range_before_short_ones():
    # A long early range must still be found when later short ranges sit in between
    ranges = [
        FormatRange(0, 50, italic=True),
        FormatRange(5, 6, bold=True),
        FormatRange(10, 11, is_hashtag=True),
    ]
    result = FormatIndex("x" * 60, ranges)

    assert result.query_overlap(40, 45) == Style(italic=True)
    assert result.query_overlap(55, 60) == Style()


def test_query_matches_brute_force():
    ranges = [
        FormatRange(0, 4, bold=True),
        FormatRange(2, 9, italic=True),
        FormatRange(12, 15, is_hashtag=True),
        FormatRange(14, 20, bold=True),
    ]
    result = FormatIndex("y" * 24, ranges)

    for start in range(0, 24):
        for end in range(start + 1, 25):
            hits = [r for r in ranges if r.start < end and start < r.end]
            expected = Style(
                bold=any(r.bold for r in hits),
                italic=any(r.italic for r in hits),
                is_hashtag=any(r.is_hashtag for r in hits),
            )
            assert result.query_overlap(start, end) == expected, (start, end)
