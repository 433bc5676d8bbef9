"""Configuration loading and validation."""

import re
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slidegen.types import HexColor, ImageFormat, LineKind, RGBColor

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

DEFAULT_CONFIG_NAME = "slidegen.toml"


class FontSizes(BaseModel):
    """Font sizes in pixels, keyed by line type."""

    model_config = ConfigDict(frozen=True)

    title: float = 48
    """Project title on PDF cover and text-only pages, in points."""

    content: float = 36
    """Wrapped prose lines, including bold and italic lines."""

    hashtag: float = 32
    """Hashtag-only lines."""

    slide_number: float = 24
    """Slide index decoration in the top-right corner."""

    badge: float = 16
    """Template badge decoration in the top-left corner."""

    def for_kind(self, kind: LineKind) -> float:
        """
        Get the font size for a line kind.

        Placeholder lines use the content size.
        """
        if kind == "placeholder":
            return self.content
        return getattr(self, kind)


class Palette(BaseModel):
    """Color palette as #RRGGBB hex strings."""

    model_config = ConfigDict(frozen=True)

    background: HexColor = "#FFFFFF"
    text: HexColor = "#1A1A1A"
    secondary: HexColor = "#666666"
    hashtag: HexColor = "#1DA1F2"

    @field_validator("background", "text", "secondary", "hashtag")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"Expected a #RRGGBB color, got {value!r}")
        return value.upper()


class CanvasSpec(BaseModel):
    """
    Everything the layout engine needs to position text on a square canvas.

    The spec is immutable and passed explicitly into every stage. Build
    variants with Pydantic's model_copy():

        base = CanvasSpec()
        narrow = base.model_copy(update={"max_chars_per_line": 24})
    """

    model_config = ConfigDict(frozen=True)

    # ========================================================================
    # Canvas
    # ========================================================================
    width: int = Field(default=1080, gt=0)
    """Canvas width in pixels."""

    height: int = Field(default=1080, gt=0)
    """Canvas height in pixels."""

    padding: float = Field(default=80, ge=0)
    """Padding around the canvas edge in pixels."""

    decoration_offset: float = 30
    """Distance below the top padding at which decoration lines are centered."""

    # ========================================================================
    # Text layout
    # ========================================================================
    line_height: float = Field(default=46.8, gt=0)
    """Baseline-to-baseline distance in pixels (content size x 1.3)."""

    max_lines: int = Field(default=8, ge=1)
    """Maximum number of lines on a slide. Extra lines are dropped."""

    max_chars_per_line: int = Field(default=35, ge=1)
    """Maximum characters per wrapped line."""

    max_input_chars: int = Field(default=2000, ge=1)
    """Input is cut to this many characters before wrapping."""

    placeholder_text: str = "No content"
    """Text shown when a slide has nothing to render."""

    font_family: str = "Helvetica"
    """Font family for all slide text."""

    font_sizes: FontSizes = FontSizes()
    colors: Palette = Palette()

    # ========================================================================
    # Validation limits
    # ========================================================================
    max_content_length: int = 180
    """Content longer than this is flagged by slide validation."""

    max_hashtags: int = 5
    """More hashtags than this are flagged by slide validation."""

    # ========================================================================
    # Computed Properties
    # ========================================================================

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height / 2

    @property
    def size(self) -> tuple[int, int]:
        """Canvas size as (width, height) in pixels."""
        return (self.width, self.height)


class OutputConfig(BaseModel):
    """Where and how rendered slides are written."""

    directory: Path = Path(".")
    image_format: ImageFormat = "PNG"
    name_template: str = "{project}_slide_{number:02d}.{ext}"
    include_slide_number: bool = True
    workers: int = Field(default=1, ge=1)
    """Number of slides rendered concurrently."""


class Config(BaseModel):
    """Root configuration."""

    canvas: CanvasSpec = CanvasSpec()
    output: OutputConfig = OutputConfig()


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, looks for slidegen.toml in
            the current directory and falls back to defaults when it is absent.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return Config()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    return Config(**config_dict)


def hex_to_rgb(color: HexColor) -> RGBColor:
    """
    Convert a #RRGGBB string to an RGB tuple in 0-255 range.

    Args:
        color: Hex color string.

    Returns:
        Tuple of (red, green, blue).
    """
    value = color.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def format_output_name(
    template: str, project: str | None, number: int, ext: str = "png"
) -> str:
    """
    Format a slide filename using template.

    Args:
        template: Template string with {project}, {number} and {ext} placeholders.
        project: Project title, or None for untitled slides.
        number: Slide number.
        ext: File extension without the dot.

    Returns:
        Formatted filename.
    """
    safe_project = sanitize_filename(project or "") or "slide"
    return template.format(project=safe_project, number=number, ext=ext.lower())


def sanitize_filename(name: str) -> str:
    """
    Sanitize string for use in filename.

    Every character outside [A-Za-z0-9] becomes an underscore.

    Args:
        name: String to sanitize.

    Returns:
        Sanitized string safe for filenames.
    """
    return re.sub(r"[^A-Za-z0-9]", "_", name.strip())
