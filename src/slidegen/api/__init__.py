"""High-level API for rendering slides and carousels."""

from slidegen.api.builder import (
    build_slide_lines,
    create_carousel_zip,
    render_carousel,
    render_carousel_to_pdf,
    render_slide,
    validate_slide,
    vector_slide,
)
from slidegen.api.models import CarouselProject, Slide, SlideImage, SlideValidation

__all__ = [
    "CarouselProject",
    "Slide",
    "SlideImage",
    "SlideValidation",
    "build_slide_lines",
    "create_carousel_zip",
    "render_carousel",
    "render_carousel_to_pdf",
    "render_slide",
    "validate_slide",
    "vector_slide",
]
