"""Square social-media slide generator with lightweight markup layout."""

__version__ = "0.1.0"

# High-level Python API
from slidegen.api import (
    create_carousel_zip,
    render_carousel,
    render_carousel_to_pdf,
    render_slide,
    validate_slide,
)
from slidegen.api.models import CarouselProject, Slide, SlideImage
from slidegen.config import CanvasSpec, Config, load_config
from slidegen.layout import LayoutLine, layout_text
from slidegen.render import RenderError, slide_to_svg

__all__ = [
    "CanvasSpec",
    "CarouselProject",
    "Config",
    "LayoutLine",
    "RenderError",
    "Slide",
    "SlideImage",
    "create_carousel_zip",
    "layout_text",
    "load_config",
    "render_carousel",
    "render_carousel_to_pdf",
    "render_slide",
    "slide_to_svg",
    "validate_slide",
]
