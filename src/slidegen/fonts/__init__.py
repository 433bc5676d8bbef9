"""Font registration and management."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from PIL import ImageFont
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

FONTS_DIR = Path(__file__).parent

# Font path registry: maps registered font names to their file paths
# This is needed for raster rendering with Pillow
_FONT_PATHS: dict[str, Path] = {}

# Face names of the PDF built-in families, indexed by (bold, italic)
_BUILTIN_FACES: dict[str, dict[tuple[bool, bool], str]] = {
    "Helvetica": {
        (False, False): "Helvetica",
        (True, False): "Helvetica-Bold",
        (False, True): "Helvetica-Oblique",
        (True, True): "Helvetica-BoldOblique",
    },
    "Courier": {
        (False, False): "Courier",
        (True, False): "Courier-Bold",
        (False, True): "Courier-Oblique",
        (True, True): "Courier-BoldOblique",
    },
    "Times-Roman": {
        (False, False): "Times-Roman",
        (True, False): "Times-Bold",
        (False, True): "Times-Italic",
        (True, True): "Times-BoldItalic",
    },
}

_TTF_SUFFIXES = {
    (False, False): ("-Regular", ""),
    (True, False): ("-Bold",),
    (False, True): ("-Italic", "-Oblique"),
    (True, True): ("-Bolditalic", "-Boldoblique"),
}


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Converts hyphen-separated parts to Title Case to match PostScript naming.

    Examples:
        "inter-regular" → "Inter-Regular"
        "helvetica-bold" → "Helvetica-Bold"
        "roboto-mono" → "Roboto-Mono"

    Args:
        name: Font name to normalize (can be any case)

    Returns:
        TitleCase font name
    """
    parts = name.split('-')
    return '-'.join(part.title() for part in parts)


def register_fonts(fonts_dir: Path | None = None) -> int:
    """
    Register custom fonts with ReportLab.

    Auto-discovers and registers all TTF font files in the fonts directory.
    Each font is registered with a TitleCase name based on its filename (without extension).

    Examples:
        - inter-regular.ttf → registered as "Inter-Regular"
        - Inter-Bold.ttf → registered as "Inter-Bold"

    Falls back to Helvetica (PDF built-in) if no fonts are found or registration fails.

    Args:
        fonts_dir: Directory to scan. Defaults to the package fonts directory.

    Returns:
        Number of fonts registered.
    """
    fonts_dir = fonts_dir or FONTS_DIR
    ttf_files = sorted(fonts_dir.glob("*.ttf"))

    if not ttf_files:
        logger.debug(f"No TTF font files found in {fonts_dir}, using built-in fonts")
        return 0

    registered_count = 0
    for font_path in ttf_files:
        font_name = _normalize_font_name(font_path.stem)

        try:
            pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        except Exception as e:
            logger.warning(
                f"Failed to register font {font_name} from {font_path.name}: {e}. "
                "Skipping this font."
            )
            continue

        _FONT_PATHS[font_name] = font_path
        logger.info(f"Registered font: {font_name} from {font_path.name}")
        registered_count += 1

    if registered_count > 0:
        # Cached Pillow fonts may now resolve to a different file
        get_pil_font.cache_clear()
        logger.info(f"Successfully registered {registered_count} custom font(s).")

    return registered_count


def get_font_path(font_name: str) -> Optional[Path]:
    """
    Get the file path for a registered font.

    Args:
        font_name: Registered font name (e.g., "Inter-Bold").

    Returns:
        Path to the font file, or None if font path is not tracked.
        Note: PDF built-in fonts (Helvetica, Courier, etc.) won't have paths.
    """
    return _FONT_PATHS.get(font_name)


def _ttf_face(family: str, bold: bool, italic: bool) -> Optional[str]:
    base = _normalize_font_name(family)
    for suffix in _TTF_SUFFIXES[(bold, italic)]:
        if f"{base}{suffix}" in _FONT_PATHS:
            return f"{base}{suffix}"
    return None


def pdf_font_name(family: str, bold: bool = False, italic: bool = False) -> str:
    """
    Resolve a family plus weight/slant to a ReportLab font name.

    Resolution priority:
    1. Registered TTF face (e.g., "Inter-Bold")
    2. PDF built-in face (e.g., "Helvetica-BoldOblique")
    3. Helvetica face with the same weight/slant

    Args:
        family: Font family (case-insensitive).
        bold: Bold weight.
        italic: Italic slant.

    Returns:
        Font name usable with canvas.setFont().
    """
    if face := _ttf_face(family, bold, italic):
        return face

    builtin = _BUILTIN_FACES.get(_normalize_font_name(family))
    if builtin is None:
        if (regular := _ttf_face(family, False, False)) is not None:
            logger.debug(f"No {'bold ' if bold else ''}{'italic ' if italic else ''}face for '{family}'")
            return regular
        logger.debug(f"Unknown font family '{family}', using Helvetica")
        builtin = _BUILTIN_FACES["Helvetica"]

    return builtin[(bold, italic)]


@lru_cache(maxsize=64)
def get_pil_font(
    family: str, size: float, bold: bool = False, italic: bool = False
) -> tuple[ImageFont.FreeTypeFont | ImageFont.ImageFont, bool]:
    """
    Load a Pillow font for raster rendering.

    Registered TTF faces are used when available. Otherwise Pillow's bundled
    default font is loaded at the requested size; it has no bold face, so the
    caller is told to thicken strokes instead.

    Args:
        family: Font family (case-insensitive).
        size: Font size in pixels.
        bold: Bold weight.
        italic: Italic slant.

    Returns:
        Tuple of (font, needs_synthetic_bold).
    """
    if face := _ttf_face(family, bold, italic):
        return ImageFont.truetype(str(_FONT_PATHS[face]), size), False

    if bold and (face := _ttf_face(family, False, italic)):
        return ImageFont.truetype(str(_FONT_PATHS[face]), size), True

    if face := _ttf_face(family, False, False):
        return ImageFont.truetype(str(_FONT_PATHS[face]), size), bold

    return ImageFont.load_default(size=size), bold
