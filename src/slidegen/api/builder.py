"""High-level API for programmatic slide and carousel rendering."""

import logging
import zipfile
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from io import BytesIO
from pathlib import Path

from slidegen.api.models import CarouselProject, Slide, SlideImage, SlideValidation
from slidegen.config import CanvasSpec, OutputConfig, format_output_name, sanitize_filename
from slidegen.layout.engine import badge_line, layout_text, slide_number_line
from slidegen.layout.markup import HASHTAG_PATTERN
from slidegen.layout.models import LayoutLine
from slidegen.render.image import RenderError, rasterize
from slidegen.render.svg import slide_to_svg

logger = logging.getLogger(__name__)

CAPTION_FILE = "instagram-caption.txt"
CONTENT_FILE = "slide-content.txt"


def validate_slide(slide: Slide, spec: CanvasSpec | None = None) -> SlideValidation:
    """
    Check a slide for problems before rendering.

    Issues make the slide invalid; warnings only flag likely readability problems.

    Args:
        slide: Slide to check.
        spec: Canvas configuration with the validation limits.

    Returns:
        SlideValidation with issues and warnings.
    """
    spec = spec or CanvasSpec()
    result = SlideValidation()

    if not slide.content or not slide.content.strip():
        result.issues.append("Slide content is empty")

    if slide.content and len(slide.content) > spec.max_content_length:
        result.warnings.append(
            f"Content exceeds Instagram limit ({len(slide.content)}/{spec.max_content_length} characters)"
        )

    if slide.content and len(slide.content.split("\n")) > spec.max_lines:
        result.warnings.append("Too many line breaks may affect readability")

    hashtag_count = len(slide.hashtags) or len(HASHTAG_PATTERN.findall(slide.content or ""))
    if hashtag_count > spec.max_hashtags:
        result.warnings.append("Too many hashtags may clutter the image")

    return result


def build_slide_lines(
    slide: Slide,
    project: CarouselProject | None = None,
    spec: CanvasSpec | None = None,
    include_slide_number: bool = True,
) -> list[LayoutLine]:
    """
    Lay out a slide's content and add its decorations.

    Args:
        slide: Slide to lay out.
        project: Owning project; its template type becomes the badge.
        spec: Canvas configuration. If None, uses CanvasSpec() defaults.
        include_slide_number: Show the slide number in the top-right corner.

    Returns:
        Decoration lines followed by content lines.
    """
    spec = spec or CanvasSpec()
    lines: list[LayoutLine] = []

    if include_slide_number:
        lines.append(slide_number_line(slide.slide_number, spec))
    if project is not None and project.template_type:
        lines.append(badge_line(project.template_type, spec))

    lines.extend(layout_text(slide.content, spec))
    return lines


def render_slide(
    slide: Slide,
    project: CarouselProject | None = None,
    spec: CanvasSpec | None = None,
    output: OutputConfig | None = None,
) -> SlideImage:
    """
    Render one slide to an image.

    Args:
        slide: Slide to render.
        project: Owning project (badge and file name).
        spec: Canvas configuration. If None, uses CanvasSpec() defaults.
        output: Output settings (format, naming). If None, uses OutputConfig() defaults.

    Returns:
        SlideImage with encoded image and SVG markup.

    Raises:
        RenderError: If the raster backend fails.
    """
    spec = spec or CanvasSpec()
    output = output or OutputConfig()

    validation = validate_slide(slide, spec)
    for problem in validation.issues + validation.warnings:
        logger.warning(f"Slide {slide.slide_number}: {problem}")

    lines = build_slide_lines(slide, project, spec, output.include_slide_number)
    image = rasterize(lines, spec, output.image_format)

    ext = "jpg" if output.image_format == "JPEG" else "png"
    file_name = format_output_name(
        output.name_template, project.title if project else None, slide.slide_number, ext
    )

    logger.info(f"Rendered slide {slide.slide_number} ({len(image)} bytes) as {file_name}")

    return SlideImage(
        slide_id=slide.id,
        slide_number=slide.slide_number,
        content=slide.content,
        image=image,
        file_name=file_name,
        svg=slide_to_svg(lines, spec),
    )


def vector_slide(
    slide: Slide,
    project: CarouselProject | None = None,
    spec: CanvasSpec | None = None,
    output: OutputConfig | None = None,
) -> SlideImage:
    """
    Build a slide as SVG only, without rasterizing it.

    The returned SlideImage has empty image bytes and no file name.
    """
    spec = spec or CanvasSpec()
    output = output or OutputConfig()
    lines = build_slide_lines(slide, project, spec, output.include_slide_number)

    return SlideImage(
        slide_id=slide.id,
        slide_number=slide.slide_number,
        content=slide.content,
        image=b"",
        file_name="",
        svg=slide_to_svg(lines, spec),
    )


def render_carousel(
    slides: list[Slide],
    project: CarouselProject | None = None,
    spec: CanvasSpec | None = None,
    output: OutputConfig | None = None,
) -> list[SlideImage]:
    """
    Render all slides of a carousel, ordered by slide number.

    Slides are independent, so with output.workers > 1 they are rendered in a
    thread pool. The result is always in slide order.

    Args:
        slides: Slides to render.
        project: Owning project.
        spec: Canvas configuration.
        output: Output settings, including the number of workers.

    Returns:
        One SlideImage per slide.

    Raises:
        RenderError: If any slide fails to render.
    """
    output = output or OutputConfig()
    ordered = sorted(slides, key=lambda s: s.slide_number)

    logger.info(f"Rendering {len(ordered)} slide(s) with {output.workers} worker(s)...")

    if output.workers == 1:
        return [render_slide(slide, project, spec, output) for slide in ordered]

    with ThreadPoolExecutor(max_workers=output.workers) as pool:
        return list(pool.map(lambda slide: render_slide(slide, project, spec, output), ordered))


def build_caption(slides: list[Slide], project: CarouselProject) -> str:
    """
    Build the Instagram caption for a carousel.

    The caption is the project title, the first slide's text, a swipe hint
    for multi-slide carousels and a few hashtags.
    """
    lines = [project.title, ""]

    if slides:
        lines.append(slides[0].content)
        if len(slides) > 1:
            lines.append("")
            lines.append("💫 Swipe to see more!")

    hashtags = ["#carousel", "#instagram"]
    if project.template_type:
        hashtags.append(f"#{project.template_type.lower()}")

    lines.append("")
    lines.append(" ".join(hashtags))
    return "\n".join(lines)


def build_content_summary(slides: list[Slide], project: CarouselProject, generated: datetime) -> str:
    """Plain-text listing of every slide's content."""
    lines = [f"{project.title} - Slide Content", "=" * 50, ""]

    for i, slide in enumerate(slides):
        lines.append(f"Slide {slide.slide_number or i + 1}:")
        lines.append(slide.content)
        lines.append("")

    lines.append("")
    lines.append(f"Generated: {generated.isoformat(sep=' ', timespec='seconds')}")
    lines.append(f"Template: {project.template_type or 'Custom'}")
    return "\n".join(lines)


def create_carousel_zip(
    slide_images: list[SlideImage],
    project: CarouselProject,
    include_caption: bool = True,
    generated: datetime | None = None,
) -> tuple[bytes, str]:
    """
    Package rendered slides into a ZIP archive.

    Args:
        slide_images: Rendered slides.
        project: Owning project (title, template, slide texts).
        include_caption: Add the caption and slide-content text files.
        generated: Timestamp written into the content summary. Defaults to now.

    Returns:
        Tuple of (zip bytes, suggested file name).

    Raises:
        ValueError: If there are no slide images.
    """
    if not slide_images:
        raise ValueError("No slide images to zip")

    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for slide_image in slide_images:
            archive.writestr(slide_image.file_name, slide_image.image)

        if include_caption:
            slides = project.sorted_slides()
            archive.writestr(CAPTION_FILE, build_caption(slides, project))
            archive.writestr(
                CONTENT_FILE,
                build_content_summary(slides, project, generated or datetime.now()),
            )

    file_name = f"{sanitize_filename(project.title) or 'carousel'}_images.zip"
    logger.info(f"Packed {len(slide_images)} image(s) into {file_name}")
    return buffer.getvalue(), file_name


def render_carousel_to_pdf(
    project: CarouselProject,
    output_path: str | Path,
    spec: CanvasSpec | None = None,
    output: OutputConfig | None = None,
    page_size: str = "a4",
    text_only: bool = False,
) -> Path:
    """
    Render a project's slides to a PDF document.

    Args:
        project: Project with slides.
        output_path: Path to output PDF file.
        spec: Canvas configuration.
        output: Output settings.
        page_size: Page size ("a4", "a5", "letter").
        text_only: Only write the slide text, without slide images. Also used
            as the fallback when the slide images cannot be drawn.

    Returns:
        Path of the written PDF.

    Raises:
        ValueError: If the project has no slides.
    """
    from slidegen.render.pdf import PDFRenderer

    slides = project.sorted_slides()
    if not slides:
        raise ValueError("No slides provided to render")

    output_path = Path(output_path)
    spec = spec or CanvasSpec()
    output = output or OutputConfig()
    renderer = PDFRenderer(
        page_size=page_size,
        font_family=spec.font_family,
        title_font_size=spec.font_sizes.title,
    )

    if not text_only:
        try:
            # Slides are embedded as vector drawings, no raster images needed
            slide_images = [vector_slide(slide, project, spec, output) for slide in slides]
            renderer.render_carousel(slide_images, project, output_path)
        except RenderError as e:
            logger.warning(f"Slide images could not be drawn, falling back to text-only PDF: {e}")
            text_only = True

    if text_only:
        renderer.render_text_only(slides, project, output_path)

    logger.info(f"PDF saved to: {output_path}")
    return output_path
