#!/usr/bin/env python3
"""Test word wrapping, hashtag extraction and truncation."""

import re

from slidegen.config import CanvasSpec
from slidegen.layout.markup import parse
from slidegen.layout.models import Line
from slidegen.layout.ranges import index
from slidegen.layout.wrap import wrap

HASHTAG = re.compile(r"#\w+", re.ASCII)


def wrap_text(text: str, **spec_updates) -> list[Line]:
    spec = CanvasSpec(**spec_updates)
    format_index = index(parse(text))
    return wrap(format_index.plain_text, format_index, spec)


def test_bold_overlap_marks_whole_line_bold():
    lines = wrap_text("Hello **world**! #demo", max_chars_per_line=40)

    assert lines == [
        Line("Hello world!", 0, 12, bold=True),
        Line("#demo", 13, 18, is_hashtag=True),
    ]


def test_italic_only_line():
    (line,) = wrap_text("*quiet* note")
    assert line.text == "quiet note"
    assert line.italic is True
    assert line.bold is False


def test_greedy_wrap_respects_width():
    text = "the quick brown fox jumps over the lazy dog again and again"
    lines = wrap_text(text, max_chars_per_line=12, max_lines=20)

    assert [line.text for line in lines] == [
        "the quick",
        "brown fox",
        "jumps over",
        "the lazy dog",
        "again and",
        "again",
    ]
    assert all(len(line.text) <= 12 for line in lines)


def test_line_offsets_point_into_plain_text():
    text = "alpha beta gamma delta"
    for line in wrap_text(text, max_chars_per_line=11):
        assert text[line.start_offset:line.end_offset] == line.text


def test_long_word_is_hard_split():
    lines = wrap_text("abcdefghijklmnopqrstuvwxyz ok", max_chars_per_line=10)

    assert [line.text for line in lines] == ["abcdefghij", "klmnopqrst", "uvwxyz ok"]
    assert all(len(line.text) <= 10 for line in lines)


def test_hashtags_go_last_on_their_own_lines():
    lines = wrap_text("#first some **bold** words #second end", max_chars_per_line=40)

    assert [line.text for line in lines] == ["some bold words end", "#first", "#second"]
    assert [line.is_hashtag for line in lines] == [False, True, True]


def test_hashtag_lines_are_never_bold_or_italic():
    lines = wrap_text("**bold #tag** and *it #other*")

    hashtag_lines = [line for line in lines if line.is_hashtag]
    assert [line.text for line in hashtag_lines] == ["#tag", "#other"]
    assert not any(line.bold or line.italic for line in hashtag_lines)


def test_prose_lines_never_contain_hashtags():
    text = "one #two three #four five six #seven eight nine ten #eleven"
    for line in wrap_text(text, max_chars_per_line=8, max_lines=20):
        if line.is_hashtag:
            assert HASHTAG.fullmatch(line.text)
        else:
            assert not HASHTAG.search(line.text)


def test_many_words_truncate_to_max_lines():
    lines = wrap_text(" ".join(["word"] * 500), max_lines=6)

    assert len(lines) == 6
    assert all(line.text.startswith("word") for line in lines)


def test_prose_filling_max_lines_drops_hashtags():
    lines = wrap_text("aaa bbb ccc ddd #tag", max_chars_per_line=3, max_lines=4)
    assert [line.text for line in lines] == ["aaa", "bbb", "ccc", "ddd"]


def test_empty_and_whitespace_give_no_lines():
    assert wrap_text("") == []
    assert wrap_text("   \n\t ") == []


def test_whitespace_with_hashtags_keeps_hashtag_lines():
    lines = wrap_text("   #only   ")
    assert lines == [Line("#only", 3, 8, is_hashtag=True)]


def test_input_is_cut_before_wrapping():
    lines = wrap_text("x" * 100, max_input_chars=25, max_chars_per_line=10, max_lines=20)
    assert [line.text for line in lines] == ["x" * 10, "x" * 10, "x" * 5]


def test_raw_range_list_is_accepted():
    format_index = index(parse("**a** b"))
    lines = wrap(format_index.plain_text, format_index.ranges, CanvasSpec())
    assert lines == [Line("a b", 0, 3, bold=True)]


def test_long_hashtags_are_split_to_line_width():
    lines = wrap_text(
        "hi #averyveryverylonghashtag #anotherlonghashtag", max_chars_per_line=10, max_lines=20
    )

    assert [line.text for line in lines] == [
        "hi",
        "#averyvery",
        "verylongha",
        "shtag",
        "#anotherlo",
        "nghashtag",
    ]
    assert [line.is_hashtag for line in lines] == [False, True, True, True, True, True]
    assert all(len(line.text) <= 10 for line in lines)


def test_split_hashtag_offsets_point_into_plain_text():
    text = "go #supercalifragilistic"
    for line in wrap_text(text, max_chars_per_line=7, max_lines=20):
        assert text[line.start_offset:line.end_offset] == line.text


def test_width_bound_holds_with_hashtags_and_long_words():
    text = "#x " + "y" * 40 + " short words #" + "z" * 30 + " end"
    for width in (3, 5, 8, 13):
        lines = wrap_text(text, max_chars_per_line=width, max_lines=50)
        assert lines
        assert all(len(line.text) <= width for line in lines), width
