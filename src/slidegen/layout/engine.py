"""Positioning and final styling of wrapped lines on the canvas."""

import logging

from slidegen.config import CanvasSpec
from slidegen.layout.markup import parse
from slidegen.layout.models import LayoutLine, Line
from slidegen.layout.ranges import index
from slidegen.layout.wrap import wrap

logger = logging.getLogger(__name__)


def centered_baselines(count: int, line_height: float, center_y: float) -> list[float]:
    """
    Vertical positions for a block of lines centered on center_y.

    Formula:
        total_height = count × line_height
        start_y = center_y - total_height / 2 + line_height / 2
        y_i = start_y + i × line_height

    Args:
        count: Number of lines in the block.
        line_height: Distance between consecutive lines.
        center_y: Vertical center of the block.

    Returns:
        One y per line, top to bottom.
    """
    total_height = count * line_height
    start_y = center_y - (total_height / 2) + (line_height / 2)
    return [start_y + i * line_height for i in range(count)]


def _placeholder(spec: CanvasSpec) -> LayoutLine:
    return LayoutLine(
        text=spec.placeholder_text,
        x=spec.center_x,
        y=spec.center_y,
        font_size=spec.font_sizes.for_kind("placeholder"),
        bold=False,
        italic=False,
        color=spec.colors.secondary,
        kind="placeholder",
    )


def _resolve_line(line: Line, x: float, y: float, spec: CanvasSpec) -> LayoutLine:
    """Apply style priority: hashtag, then bold, then italic, then plain."""
    if line.is_hashtag:
        return LayoutLine(
            text=line.text,
            x=x,
            y=y,
            font_size=spec.font_sizes.for_kind("hashtag"),
            bold=False,
            italic=False,
            color=spec.colors.hashtag,
            kind="hashtag",
        )

    return LayoutLine(
        text=line.text,
        x=x,
        y=y,
        font_size=spec.font_sizes.for_kind("content"),
        bold=line.bold,
        # Bold takes precedence when a line carries both flags
        italic=line.italic and not line.bold,
        color=spec.colors.text,
    )


def layout(lines: list[Line], spec: CanvasSpec) -> list[LayoutLine]:
    """
    Center wrapped lines on the canvas and resolve their final style.

    All lines are horizontally centered. An empty input produces a single
    placeholder line so there is always something to render.

    Args:
        lines: Output of wrap().
        spec: Canvas configuration.

    Returns:
        Positioned lines, top to bottom.
    """
    if not lines:
        logger.debug("Nothing to lay out, using placeholder line")
        return [_placeholder(spec)]

    ys = centered_baselines(len(lines), spec.line_height, spec.center_y)
    return [_resolve_line(line, spec.center_x, y, spec) for line, y in zip(lines, ys)]


def layout_text(raw: object, spec: CanvasSpec | None = None) -> list[LayoutLine]:
    """
    Run the whole pipeline: parse, index, wrap and lay out.

    Total for any input: never raises and always returns at least one line.

    Args:
        raw: Slide text with **bold**, *italic* and #hashtag markup.
        spec: Canvas configuration. If None, uses CanvasSpec() defaults.

    Returns:
        Positioned lines, top to bottom.
    """
    spec = spec or CanvasSpec()

    runs = parse(raw)
    format_index = index(runs)
    lines = wrap(format_index.plain_text, format_index, spec)

    return layout(lines, spec)


# ============================================================================
# Decorations
# ============================================================================

def _decoration_y(spec: CanvasSpec) -> float:
    (y,) = centered_baselines(1, spec.line_height, spec.padding + spec.decoration_offset)
    return y


def slide_number_line(number: int, spec: CanvasSpec) -> LayoutLine:
    """
    Slide index in the top-right corner, right-aligned to the padding.

    Args:
        number: Slide number to show.
        spec: Canvas configuration.
    """
    return LayoutLine(
        text=str(number),
        x=spec.width - spec.padding,
        y=_decoration_y(spec),
        font_size=spec.font_sizes.for_kind("slide_number"),
        bold=False,
        italic=False,
        color=spec.colors.secondary,
        kind="slide_number",
        anchor="end",
    )


def badge_line(label: str, spec: CanvasSpec) -> LayoutLine:
    """
    Template badge text in the top-left corner, left-aligned to the padding.

    Args:
        label: Badge text (e.g., "NEWS").
        spec: Canvas configuration.
    """
    return LayoutLine(
        text=label,
        x=spec.padding,
        y=_decoration_y(spec),
        font_size=spec.font_sizes.for_kind("badge"),
        bold=True,
        italic=False,
        color=spec.colors.hashtag,
        kind="badge",
        anchor="start",
    )
