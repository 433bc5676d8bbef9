"""Type aliases used across the slidegen package."""

from typing import Literal

# Color types
HexColor = str  # "#RRGGBB"
RGBColor = tuple[int, int, int]  # RGB color in 0-255 range

# Line kinds, used to pick font size and color
LineKind = Literal["content", "hashtag", "placeholder", "slide_number", "badge"]

# Horizontal text anchor (matches SVG text-anchor values)
TextAnchor = Literal["start", "middle", "end"]

# Raster output formats
ImageFormat = Literal["PNG", "JPEG"]
