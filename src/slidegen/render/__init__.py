"""Rendering backends: SVG markup, raster images and PDF."""

from slidegen.render.image import (
    RenderError,
    get_image_dimensions,
    load_image_from_bytes,
    rasterize,
    save_image_to_bytes,
)
from slidegen.render.pdf import PDFRenderer
from slidegen.render.svg import slide_to_svg

__all__ = [
    "PDFRenderer",
    "RenderError",
    "get_image_dimensions",
    "load_image_from_bytes",
    "rasterize",
    "save_image_to_bytes",
    "slide_to_svg",
]
