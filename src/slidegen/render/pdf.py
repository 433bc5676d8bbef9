"""PDF generation using ReportLab."""

import logging
from datetime import date
from io import BytesIO
from pathlib import Path

from reportlab.graphics import renderPDF
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, A5, letter
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas
from svglib.svglib import svg2rlg

from slidegen.api.models import CarouselProject, Slide, SlideImage
from slidegen.fonts import get_font_path, pdf_font_name
from slidegen.render.image import RenderError
from slidegen.utils.text import has_non_latin_characters

logger = logging.getLogger(__name__)

# Registry of supported page sizes, in points
PAGE_SIZES = {
    "a4": A4,
    "a5": A5,
    "letter": letter,
}

MARGIN = 20 * mm


class PDFRenderer:
    """Renders carousels to PDF using ReportLab."""

    def __init__(
        self,
        page_size: str = "a4",
        slide_size: float = 120 * mm,
        font_family: str = "Helvetica",
        title_font_size: float = 24,
        author: str = "slidegen",
    ) -> None:
        """
        Initialize PDF renderer.

        Args:
            page_size: Page size name ("a4", "a5", "letter"). Unknown names fall back to A4.
            slide_size: Edge length of the slide image on the page, in points.
            font_family: Font family for headings and slide text.
            title_font_size: Size of the project title, in points.
            author: Author written into the PDF metadata.
        """
        self.page_width, self.page_height = PAGE_SIZES.get(page_size.lower(), A4)
        self.slide_size = slide_size
        self.font_family = font_family
        self.title_font_size = title_font_size
        self.author = author

    def _new_canvas(self, output: Path | BytesIO, title: str, subject: str) -> canvas.Canvas:
        target = str(output) if isinstance(output, Path) else output
        c = canvas.Canvas(target, pagesize=(self.page_width, self.page_height))
        c.setTitle(title)
        c.setSubject(subject)
        c.setAuthor(self.author)
        return c

    def _font(self, bold: bool = False) -> str:
        return pdf_font_name(self.font_family, bold=bold)

    def _draw_title(self, c: canvas.Canvas, title: str, top_y: float) -> float:
        """
        Draw the project title, wrapped to the page width.

        Returns:
            Y position below the last line.
        """
        font = self._font(bold=True)
        c.setFont(font, self.title_font_size)

        y = top_y
        for line in simpleSplit(title, font, self.title_font_size, self.page_width - 2 * MARGIN):
            c.drawString(MARGIN, y, line)
            y -= self.title_font_size * 1.2
        return y

    def _draw_cover_page(self, c: canvas.Canvas, project: CarouselProject, generated: date) -> None:
        top = self.page_height

        y = self._draw_title(c, project.title, top - 40 * mm)

        if project.template_type:
            c.setFont(self._font(bold=True), 12)
            template_y = min(top - 60 * mm, y - 10 * mm)
            c.drawString(MARGIN, template_y, f"Template: {project.template_type}")

        c.setFont(self._font(), 10)
        c.drawString(MARGIN, 17 * mm, f"Generated: {generated.isoformat()}")

    def _draw_svg(self, c: canvas.Canvas, svg: str, x: float, y: float) -> None:
        """Draw an SVG document scaled to slide_size, lower-left corner at (x, y)."""
        drawing = svg2rlg(BytesIO(svg.encode("utf-8")))
        if drawing is None:
            raise RenderError("svglib could not parse the slide SVG")

        scale_factor = self.slide_size / drawing.width
        drawing.width = drawing.width * scale_factor
        drawing.height = drawing.height * scale_factor
        drawing.scale(scale_factor, scale_factor)

        renderPDF.draw(drawing, c, x, y)

    def _draw_text_block(self, c: canvas.Canvas, text: str, top_y: float, font_size: float = 12) -> float:
        """
        Draw wrapped text starting at top_y.

        Returns:
            Y position below the last line.
        """
        font = self._font()
        if get_font_path(font) is None and has_non_latin_characters(text):
            logger.warning(
                f"Built-in PDF font {font} cannot draw some characters in: {text[:40]!r}. "
                "Add a TTF font to the fonts directory for full Unicode support."
            )

        c.setFont(font, font_size)
        c.setFillColor(HexColor("#000000"))

        # 6mm per line at 12pt
        leading = font_size * 0.5 * mm
        y = top_y
        for paragraph in text.splitlines() or [""]:
            for line in simpleSplit(paragraph, font, font_size, self.page_width - 2 * MARGIN) or [""]:
                if y < MARGIN:
                    # Continue long text on a fresh page
                    c.showPage()
                    c.setFont(font, font_size)
                    c.setFillColor(HexColor("#000000"))
                    y = self.page_height - MARGIN
                c.drawString(MARGIN, y, line)
                y -= leading
        return y

    def _draw_slide_page(self, c: canvas.Canvas, slide: SlideImage) -> None:
        top = self.page_height

        c.setFont(self._font(bold=True), 16)
        c.drawString(MARGIN, top - 30 * mm, f"Slide {slide.slide_number}")

        text_top = top - 60 * mm
        if slide.svg:
            image_x = (self.page_width - self.slide_size) / 2
            image_y = top - 50 * mm - self.slide_size
            self._draw_svg(c, slide.svg, image_x, image_y)
            text_top = image_y - 20 * mm

        self._draw_text_block(c, slide.content, text_top)

    def render_carousel(
        self,
        slide_images: list[SlideImage],
        project: CarouselProject,
        output: Path | BytesIO,
        generated: date | None = None,
    ) -> None:
        """
        Render a carousel to PDF: a cover page, then one page per slide.

        Args:
            slide_images: Rendered slides, in order.
            project: Project the slides belong to.
            output: Output PDF path or buffer.
            generated: Date printed on the cover page. Defaults to today.

        Raises:
            RenderError: If a slide cannot be drawn.
        """
        c = self._new_canvas(output, project.title, "Instagram Carousel")

        self._draw_cover_page(c, project, generated or date.today())

        for slide_image in slide_images:
            c.showPage()
            self._draw_slide_page(c, slide_image)

        c.save()
        logger.info(f"Rendered {len(slide_images)} slide(s) of '{project.title}' to PDF")

    def render_text_only(
        self,
        slides: list[Slide],
        project: CarouselProject,
        output: Path | BytesIO,
    ) -> None:
        """
        Render slide text without images, flowing across as many pages as needed.

        Args:
            slides: Slides, in order.
            project: Project the slides belong to.
            output: Output PDF path or buffer.
        """
        c = self._new_canvas(output, project.title, "Instagram Carousel Content")
        top = self.page_height

        y = self._draw_title(c, project.title, top - 30 * mm)
        y = min(top - 60 * mm, y - 10 * mm)
        for i, slide in enumerate(slides):
            if y < 60 * mm:
                c.showPage()
                y = top - 30 * mm

            c.setFont(self._font(bold=True), 16)
            c.drawString(MARGIN, y, f"Slide {slide.slide_number or i + 1}")
            y -= 15 * mm

            y = self._draw_text_block(c, slide.content, y) - 14 * mm

        c.save()
        logger.info(f"Rendered text of {len(slides)} slide(s) of '{project.title}' to PDF")
