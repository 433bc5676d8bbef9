#!/usr/bin/env python3
"""
Example: Building a Carousel

This example demonstrates how to use the Python API to render a
multi-slide carousel, package it as a ZIP with caption files and
export the same slides to a PDF.
"""

from pathlib import Path

from slidegen import CarouselProject, Slide, create_carousel_zip, load_config, render_carousel, render_carousel_to_pdf

# Uses ./slidegen.toml when present, defaults otherwise
config = load_config()
output = config.output.model_copy(update={"workers": 4, "image_format": "JPEG"})

project = CarouselProject(
    id="weekly",
    title="Weekly Roundup",
    template_type="NEWS",
    slides=[
        Slide(id="s1", slide_number=1, content="**Weekly roundup** for *March*"),
        Slide(id="s2", slide_number=2, content="New docs site is live #docs"),
        Slide(id="s3", slide_number=3, content="Faster exports and **fewer** bugs #release"),
        Slide(id="s4", slide_number=4, content="Thanks for reading! #community #python"),
    ],
)

# Render every slide (4 at a time) and zip them
slide_images = render_carousel(project.slides, project, config.canvas, output)
data, file_name = create_carousel_zip(slide_images, project)
Path(file_name).write_bytes(data)
print(f"✓ Carousel saved to: {file_name}")

# Cover page plus one page per slide
pdf_path = render_carousel_to_pdf(project, "weekly_roundup.pdf", config.canvas, output, page_size="letter")
print(f"✓ PDF saved to: {pdf_path}")
