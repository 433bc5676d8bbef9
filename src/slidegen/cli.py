"""CLI interface for the slide generator."""

import json
import logging
import tomllib
from pathlib import Path

import click

from slidegen.api.builder import (
    build_slide_lines,
    create_carousel_zip,
    render_carousel,
    render_carousel_to_pdf,
)
from slidegen.api.models import CarouselProject, Slide
from slidegen.config import CanvasSpec, Config, load_config, sanitize_filename
from slidegen.fonts import register_fonts
from slidegen.layout.engine import layout_text
from slidegen.render.image import RenderError, rasterize
from slidegen.render.pdf import PAGE_SIZES
from slidegen.render.svg import slide_to_svg


def _read_text(text: str) -> str:
    """Read slide text from the argument, or from stdin when it is '-'."""
    if text == "-":
        return click.get_text_stream("stdin").read()
    return text


def _canvas_spec(cfg: Config, max_chars: int | None, max_lines: int | None) -> CanvasSpec:
    """Apply CLI overrides to the configured canvas."""
    updates = {}
    if max_chars is not None:
        updates["max_chars_per_line"] = max_chars
    if max_lines is not None:
        updates["max_lines"] = max_lines
    if not updates:
        return cfg.canvas
    return CanvasSpec(**{**cfg.canvas.model_dump(), **updates})


def load_project(path: Path) -> CarouselProject:
    """
    Load a carousel project from a TOML or JSON file.

    Expected shape:

        title = "My carousel"
        template_type = "NEWS"      # optional

        [[slides]]
        content = "Hello **world**! #demo"

    Slides without a slide_number are numbered in file order.

    Args:
        path: Path to a .toml or .json file.

    Returns:
        CarouselProject with its slides.

    Raises:
        ValueError: If the file has no slides or an unknown extension.
    """
    if path.suffix.lower() == ".toml":
        with open(path, "rb") as f:
            data = tomllib.load(f)
    elif path.suffix.lower() == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported project file type '{path.suffix}', use .toml or .json")

    raw_slides = data.get("slides") or []
    if not raw_slides:
        raise ValueError(f"No slides found in {path}")

    slides = [
        Slide(
            id=str(raw.get("id", f"slide-{i + 1}")),
            slide_number=int(raw.get("slide_number", i + 1)),
            content=str(raw.get("content", "")),
            title=raw.get("title"),
            hashtags=list(raw.get("hashtags", [])),
        )
        for i, raw in enumerate(raw_slides)
    ]

    return CarouselProject(
        id=str(data.get("id", path.stem)),
        title=str(data.get("title", path.stem)),
        template_type=data.get("template_type"),
        description=data.get("description"),
        slides=slides,
    )


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Show progress and debug logging.")
def main(verbose: bool) -> None:
    """Turn short marked-up text into square carousel slide images."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Register custom fonts at startup
    register_fonts()


config_option = click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to slidegen.toml. Defaults to ./slidegen.toml when present.",
)
max_chars_option = click.option(
    "--max-chars", type=int, help="Maximum characters per line (overrides config)."
)
max_lines_option = click.option(
    "--max-lines", type=int, help="Maximum lines per slide (overrides config)."
)


@main.command()
@click.argument("text")
@config_option
@max_chars_option
@max_lines_option
def layout(text: str, config: Path | None, max_chars: int | None, max_lines: int | None) -> None:
    """
    Print the positioned lines for TEXT as JSON.

    Use '-' to read TEXT from stdin.
    """
    try:
        cfg = load_config(config)
        spec = _canvas_spec(cfg, max_chars, max_lines)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    lines = layout_text(_read_text(text), spec)
    click.echo(json.dumps([line.to_dict() for line in lines], indent=2, ensure_ascii=False))


@main.command()
@click.argument("text")
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    required=True,
    help="Output file. A .svg suffix writes SVG markup, anything else a PNG/JPEG image.",
)
@click.option("--slide-number", type=int, help="Show this slide number in the top-right corner.")
@click.option("--badge", type=str, help="Template badge text for the top-left corner.")
@config_option
@max_chars_option
@max_lines_option
def render(
    text: str,
    output: Path,
    slide_number: int | None,
    badge: str | None,
    config: Path | None,
    max_chars: int | None,
    max_lines: int | None,
) -> None:
    """
    Render TEXT to a single slide image.

    Use '-' to read TEXT from stdin.
    """
    try:
        cfg = load_config(config)
        spec = _canvas_spec(cfg, max_chars, max_lines)

        slide = Slide(id="cli", slide_number=slide_number or 1, content=_read_text(text))
        project = CarouselProject(id="cli", title="", template_type=badge)
        lines = build_slide_lines(slide, project, spec, include_slide_number=slide_number is not None)

        if output.suffix.lower() == ".svg":
            output.write_text(slide_to_svg(lines, spec), encoding="utf-8")
        else:
            image_format = "JPEG" if output.suffix.lower() in (".jpg", ".jpeg") else "PNG"
            output.write_bytes(rasterize(lines, spec, image_format))

        click.echo(f"✓ Slide saved to: {output}")

    except (FileNotFoundError, ValueError, RenderError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("project_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, derived from the project title.",
)
@click.option(
    "--format",
    "export_format",
    type=click.Choice(["zip", "pdf", "text-pdf"], case_sensitive=False),
    default="zip",
    help="Export as a ZIP of images, a PDF with slide images, or a text-only PDF.",
)
@click.option("--no-caption", is_flag=True, help="Leave caption files out of the ZIP.")
@click.option("--workers", type=int, help="Slides rendered concurrently (overrides config).")
@click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    default="a4",
    help="Page size for PDF exports.",
)
@config_option
@max_chars_option
@max_lines_option
def carousel(
    project_file: Path,
    output: Path | None,
    export_format: str,
    no_caption: bool,
    workers: int | None,
    page_size: str,
    config: Path | None,
    max_chars: int | None,
    max_lines: int | None,
) -> None:
    """
    Render every slide in PROJECT_FILE (.toml or .json).

    The file holds a title, an optional template_type and a list of slides,
    each with its content and optional hashtags.
    """
    try:
        cfg = load_config(config)
        spec = _canvas_spec(cfg, max_chars, max_lines)
        output_cfg = cfg.output
        if workers is not None:
            output_cfg = output_cfg.model_copy(update={"workers": max(1, workers)})

        project = load_project(project_file)
        click.echo(f"Loaded '{project.title}' with {len(project.slides)} slide(s)")

        base_name = sanitize_filename(project.title) or "carousel"
        export_format = export_format.lower()

        if export_format == "zip":
            slide_images = render_carousel(project.slides, project, spec, output_cfg)
            data, file_name = create_carousel_zip(
                slide_images, project, include_caption=not no_caption
            )
            output = output or output_cfg.directory / file_name
            output.write_bytes(data)
        else:
            suffix = "carousel" if export_format == "pdf" else "content"
            output = output or output_cfg.directory / f"{base_name}_{suffix}.pdf"
            render_carousel_to_pdf(
                project,
                output,
                spec=spec,
                output=output_cfg,
                page_size=page_size,
                text_only=export_format == "text-pdf",
            )

        click.echo(f"✓ Carousel saved to: {output}")

    except (FileNotFoundError, ValueError, RenderError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
