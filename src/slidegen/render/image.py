"""Raster rendering of laid-out slides using Pillow."""

import logging
from io import BytesIO

from PIL import Image, ImageDraw

from slidegen.config import CanvasSpec, hex_to_rgb
from slidegen.fonts import get_pil_font
from slidegen.layout.models import LayoutLine
from slidegen.types import ImageFormat

logger = logging.getLogger(__name__)

# Pillow anchors: horizontal (l/m/r) + vertical middle
_PIL_ANCHORS = {"start": "lm", "middle": "mm", "end": "rm"}


class RenderError(RuntimeError):
    """Raised when a slide cannot be turned into an image or document."""


def load_image_from_bytes(image_data: bytes) -> Image.Image:
    """
    Load image from raw bytes.

    Args:
        image_data: Raw image bytes (JPEG, PNG, etc.).

    Returns:
        PIL Image object.
    """
    return Image.open(BytesIO(image_data))


def save_image_to_bytes(img: Image.Image, format: str = "PNG") -> bytes:
    """
    Save PIL Image to bytes.

    Args:
        img: PIL Image object.
        format: Image format (PNG, JPEG, etc.).

    Returns:
        Image as bytes.
    """
    buffer = BytesIO()
    if format.upper() == "PNG":
        img.save(buffer, format="PNG", compress_level=6)
    else:
        img.save(buffer, format=format, quality=95)
    return buffer.getvalue()


def get_image_dimensions(image_data: bytes) -> tuple[int, int]:
    """
    Get dimensions of image without fully loading it.

    Args:
        image_data: Raw image bytes.

    Returns:
        Tuple of (width, height) in pixels.
    """
    img = load_image_from_bytes(image_data)
    return (img.width, img.height)


def draw_lines(img: Image.Image, lines: list[LayoutLine], font_family: str) -> None:
    """
    Draw positioned lines onto an image.

    Each line's y is its vertical center; x is interpreted according to the
    line's anchor. Bold lines without a bold font face get thicker strokes.

    Args:
        img: Target image (modified in place).
        lines: Lines to draw.
        font_family: Font family for all lines.
    """
    draw = ImageDraw.Draw(img)

    for line in lines:
        if not line.text:
            continue

        font, synthetic_bold = get_pil_font(font_family, line.font_size, line.bold, line.italic)
        color = hex_to_rgb(line.color)
        draw.text(
            (line.x, line.y),
            line.text,
            font=font,
            fill=color,
            anchor=_PIL_ANCHORS[line.anchor],
            stroke_width=1 if synthetic_bold else 0,
            stroke_fill=color,
        )


def rasterize(lines: list[LayoutLine], spec: CanvasSpec, format: ImageFormat = "PNG") -> bytes:
    """
    Render lines onto a square canvas and encode it.

    Args:
        lines: Content and decoration lines, in drawing order.
        spec: Canvas configuration (size, background, font family).
        format: Output image format.

    Returns:
        Encoded image bytes.

    Raises:
        RenderError: If the image cannot be drawn or encoded.
    """
    try:
        img = Image.new("RGB", spec.size, hex_to_rgb(spec.colors.background))
        draw_lines(img, lines, spec.font_family)
        data = save_image_to_bytes(img, format)
    except (OSError, ValueError) as e:
        raise RenderError(f"Failed to rasterize slide: {e}") from e

    logger.debug(f"Rasterized {len(lines)} line(s) to {len(data)} bytes of {format}")
    return data
