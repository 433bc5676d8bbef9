#!/usr/bin/env python3
"""
Simple Example: Single Slide

This is the simplest way to render one slide programmatically.
"""

from pathlib import Path

from slidegen import CanvasSpec, Slide, layout_text, render_slide, slide_to_svg

# Narrower lines and pink hashtags
spec = CanvasSpec(max_chars_per_line=24, colors={"hashtag": "#E91E63"})

text = "Big news: **version 2** ships *today*! #launch #python"

# Inspect the positioned lines
for line in layout_text(text, spec):
    print(f"{line.y:7.1f}  {line.kind:<9} {line.text}")

# Render to PNG
slide = Slide(id="intro", slide_number=1, content=text)
slide_image = render_slide(slide, spec=spec)
Path("my_slide.png").write_bytes(slide_image.image)

# Same slide as SVG
Path("my_slide.svg").write_text(slide_to_svg(layout_text(text, spec), spec), encoding="utf-8")

print("✓ Slide saved to: my_slide.png")
