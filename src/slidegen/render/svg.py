"""SVG markup for laid-out slides."""

from slidegen.config import CanvasSpec
from slidegen.layout.models import LayoutLine
from slidegen.utils.text import escape_markup

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _fmt(value: float) -> str:
    """Format a coordinate without a trailing '.0'."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def line_to_svg(line: LayoutLine, font_family: str) -> str:
    """
    Render one layout line as an SVG <text> element.

    Args:
        line: Positioned line.
        font_family: Font family attribute value.

    Returns:
        SVG text element.
    """
    return (
        f'<text x="{_fmt(line.x)}" y="{_fmt(line.y)}" '
        f'font-family="{escape_markup(font_family)}" '
        f'font-size="{_fmt(line.font_size)}" '
        f'font-weight="{"bold" if line.bold else "normal"}" '
        f'font-style="{"italic" if line.italic else "normal"}" '
        f'fill="{line.color}" '
        f'text-anchor="{line.anchor}" '
        f'dominant-baseline="middle">{escape_markup(line.text)}</text>'
    )


def slide_to_svg(lines: list[LayoutLine], spec: CanvasSpec) -> str:
    """
    Build a complete square SVG document for one slide.

    Args:
        lines: Content and decoration lines, in drawing order.
        spec: Canvas configuration (size, background, font family).

    Returns:
        SVG document as a string.
    """
    width, height = spec.size
    body = "\n  ".join(line_to_svg(line, spec.font_family) for line in lines)

    return (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="{spec.colors.background}" stroke="none"/>\n'
        f"  {body}\n"
        f"</svg>\n"
    )
