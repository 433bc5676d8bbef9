#!/usr/bin/env python3
"""Test vertical layout, style resolution and decorations."""

import pytest

from slidegen.config import CanvasSpec
from slidegen.layout.engine import (
    badge_line,
    centered_baselines,
    layout,
    layout_text,
    slide_number_line,
)
from slidegen.layout.models import Line

SPEC = CanvasSpec()


def test_hello_world_scenario():
    spec = CanvasSpec(max_chars_per_line=40)
    content, hashtag = layout_text("Hello **world**! #demo", spec)

    assert content.text == "Hello world!"
    assert content.bold is True
    assert content.italic is False
    assert content.color == spec.colors.text
    assert content.font_size == spec.font_sizes.content

    assert hashtag.text == "#demo"
    assert hashtag.kind == "hashtag"
    assert hashtag.bold is False
    assert hashtag.color == spec.colors.hashtag
    assert hashtag.font_size == spec.font_sizes.hashtag


def test_empty_input_gives_single_placeholder():
    (line,) = layout_text("")

    assert line.text == "No content"
    assert line.kind == "placeholder"
    assert line.color == SPEC.colors.secondary
    assert (line.x, line.y) == (SPEC.center_x, SPEC.center_y)


@pytest.mark.parametrize("raw", [None, 12, "   ", "\x00\x01"])
def test_any_input_renders_something(raw):
    lines = layout_text(raw)
    assert len(lines) >= 1


def test_many_words_are_truncated():
    spec = CanvasSpec(max_lines=6)
    lines = layout_text(" ".join(["lorem"] * 500), spec)
    assert len(lines) == 6


def test_italic_without_bold():
    (line,) = layout_text("*quiet* note")
    assert line.bold is False
    assert line.italic is True


def test_bold_wins_over_italic():
    (line,) = layout(
        [Line("both", 0, 4, bold=True, italic=True)], SPEC
    )
    assert line.bold is True
    assert line.italic is False


def test_hashtag_style_overrides_flags():
    (line,) = layout([Line("#x", 0, 2, bold=True, italic=True, is_hashtag=True)], SPEC)
    assert (line.bold, line.italic) == (False, False)
    assert line.color == SPEC.colors.hashtag


def test_all_lines_horizontally_centered():
    for line in layout_text("one two three four five six seven eight nine ten eleven #a #b"):
        assert line.x == SPEC.center_x
        assert line.anchor == "middle"


@pytest.mark.parametrize("count", [1, 2, 3, 6, 8])
def test_lines_are_evenly_spaced_and_symmetric(count):
    lines = [Line(f"line {i}", 0, 6) for i in range(count)]
    ys = [line.y for line in layout(lines, SPEC)]

    for i, y in enumerate(ys):
        assert y == pytest.approx(ys[0] + i * SPEC.line_height)
    for top, bottom in zip(ys, reversed(ys)):
        assert (top + bottom) / 2 == pytest.approx(SPEC.center_y)


def test_centered_baselines_formula():
    assert centered_baselines(2, 10, 100) == [95, 105]
    assert centered_baselines(1, 10, 100) == [100]
    assert centered_baselines(0, 10, 100) == []


def test_custom_line_height_and_canvas():
    spec = CanvasSpec(width=800, height=600, line_height=50)
    lines = layout([Line("a", 0, 1), Line("b", 2, 3)], spec)
    assert [line.y for line in lines] == [275, 325]
    assert all(line.x == 400 for line in lines)


def test_slide_number_decoration():
    line = slide_number_line(3, SPEC)

    assert line.text == "3"
    assert line.anchor == "end"
    assert line.x == SPEC.width - SPEC.padding
    assert line.y == pytest.approx(SPEC.padding + SPEC.decoration_offset)
    assert line.font_size == SPEC.font_sizes.slide_number


def test_badge_decoration():
    line = badge_line("NEWS", SPEC)

    assert line.anchor == "start"
    assert line.x == SPEC.padding
    assert line.bold is True
    assert line.color == SPEC.colors.hashtag
    assert line.font_size == SPEC.font_sizes.badge


def test_long_hashtags_stay_within_line_width():
    spec = CanvasSpec(max_chars_per_line=10)
    lines = layout_text("hi #averyveryverylonghashtag #anotherlonghashtag", spec)

    assert all(len(line.text) <= 10 for line in lines)
    assert [line.kind for line in lines[1:]] == ["hashtag"] * (len(lines) - 1)


def test_configured_font_sizes_reach_every_line_kind():
    spec = CanvasSpec(
        font_sizes={"content": 50, "hashtag": 20, "slide_number": 11, "badge": 9}
    )
    content, hashtag = layout_text("sizes #demo", spec)

    assert content.font_size == 50
    assert hashtag.font_size == 20
    assert layout_text("", spec)[0].font_size == 50
    assert slide_number_line(1, spec).font_size == 11
    assert badge_line("NEWS", spec).font_size == 9
