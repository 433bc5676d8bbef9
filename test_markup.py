#!/usr/bin/env python3
"""Test markup parsing into formatted runs."""

from slidegen.layout.markup import parse
from slidegen.layout.models import Run


def plain_text(runs: list[Run]) -> str:
    return "".join(run.text for run in runs)


def test_bold_italic_and_hashtag_runs():
    runs = parse("Hello **world** and *you* #demo")

    assert runs == [
        Run("Hello "),
        Run("world", bold=True),
        Run(" and "),
        Run("you", italic=True),
        Run(" "),
        Run("#demo", is_hashtag=True),
    ]


def test_no_markup_is_single_plain_run():
    assert parse("just words here") == [Run("just words here")]


def test_empty_string_is_single_empty_run():
    assert parse("") == [Run("")]


def test_non_string_input_degrades_to_empty_run():
    for value in (None, 42, ["**a**"], {"text": "x"}):
        assert parse(value) == [Run("")]


def test_parsing_is_idempotent():
    text = "Mix **bold**, *italic* and #tags *with* **more**"
    assert parse(text) == parse(text)


def test_round_trip_strips_delimiters_keeps_hash():
    runs = parse("**Big** news: *soon* #launch #v2")
    assert plain_text(runs) == "Big news: soon #launch #v2"


def test_unmatched_asterisk_stays_literal():
    runs = parse("5 * 3 is fifteen")
    assert runs == [Run("5 * 3 is fifteen")]


def test_unterminated_bold_stays_literal():
    runs = parse("**never closed")
    assert plain_text(runs) == "**never closed"
    assert not any(run.bold for run in runs)


def test_italic_inside_bold_span_is_ignored():
    runs = parse("**bold *not italic* here**")
    assert runs == [Run("bold *not italic* here", bold=True)]


def test_bold_delimiters_do_not_become_italic():
    runs = parse("**a** *b*")
    assert runs == [Run("a", bold=True), Run(" "), Run("b", italic=True)]


def test_italic_straddling_bold_is_dropped():
    runs = parse("*a **b** c*")
    assert Run("b", bold=True) in runs
    assert not any(run.italic for run in runs)


def test_hashtag_inside_bold_stays_bold():
    runs = parse("**#tag** rest")
    assert runs[0] == Run("#tag", bold=True)


def test_hashtag_uses_ascii_word_characters():
    runs = parse("#café")
    assert runs == [Run("#caf", is_hashtag=True), Run("é")]


def test_control_characters_are_stripped_emoji_kept():
    runs = parse("Hi\x07 there 🚀\x00")
    assert plain_text(runs) == "Hi there 🚀"


def test_mentions_stay_plain_text():
    assert parse("thanks @slidegen_team!") == [Run("thanks @slidegen_team!")]
