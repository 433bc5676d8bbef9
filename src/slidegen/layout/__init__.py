"""Formatted-text layout engine: markup in, positioned lines out."""

from slidegen.layout.engine import (
    badge_line,
    centered_baselines,
    layout,
    layout_text,
    slide_number_line,
)
from slidegen.layout.markup import parse
from slidegen.layout.models import FormatRange, LayoutLine, Line, Run, Style
from slidegen.layout.ranges import FormatIndex, index
from slidegen.layout.wrap import wrap

__all__ = [
    "FormatIndex",
    "FormatRange",
    "LayoutLine",
    "Line",
    "Run",
    "Style",
    "badge_line",
    "centered_baselines",
    "index",
    "layout",
    "layout_text",
    "parse",
    "slide_number_line",
    "wrap",
]
