"""Data models passed between the layout stages."""

from dataclasses import dataclass

from slidegen.types import HexColor, LineKind, TextAnchor


@dataclass(frozen=True)
class Run:
    """A maximal piece of text sharing one formatting state."""

    text: str
    bold: bool = False
    italic: bool = False
    is_hashtag: bool = False

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.italic or self.is_hashtag)


@dataclass(frozen=True)
class Style:
    """Formatting flags recovered for a span of plain text."""

    bold: bool = False
    italic: bool = False
    is_hashtag: bool = False


@dataclass(frozen=True)
class FormatRange:
    """
    Styled interval into the reconstructed plain text.

    Attributes:
        start: First offset covered.
        end: Offset one past the last covered character.
        bold: Range came from a bold run.
        italic: Range came from an italic run.
        is_hashtag: Range came from a hashtag run.
    """

    start: int
    end: int
    bold: bool = False
    italic: bool = False
    is_hashtag: bool = False

    def overlaps(self, start: int, end: int) -> bool:
        """Check whether [start, end) intersects this range."""
        return self.start < end and start < self.end


@dataclass(frozen=True)
class Line:
    """
    One wrapped row of text, before positioning.

    Offsets point into the plain text the line was wrapped from.
    """

    text: str
    start_offset: int
    end_offset: int
    bold: bool = False
    italic: bool = False
    is_hashtag: bool = False


@dataclass(frozen=True)
class LayoutLine:
    """
    A fully positioned and styled line, ready for a rendering backend.

    Attributes:
        text: Text to draw (unescaped).
        x: Anchor x in canvas pixels.
        y: Vertical center of the line in canvas pixels.
        font_size: Resolved font size in pixels.
        bold: Draw with a bold weight.
        italic: Draw with an italic slant.
        color: Fill color as #RRGGBB.
        kind: Which kind of line this is (content, hashtag, decorations...).
        anchor: Horizontal anchor of x (start, middle or end).
    """

    text: str
    x: float
    y: float
    font_size: float
    bold: bool
    italic: bool
    color: HexColor
    kind: LineKind = "content"
    anchor: TextAnchor = "middle"

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "font_size": self.font_size,
            "bold": self.bold,
            "italic": self.italic,
            "color": self.color,
            "kind": self.kind,
            "anchor": self.anchor,
        }
