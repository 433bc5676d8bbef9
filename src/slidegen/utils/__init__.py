"""Utility modules."""

from slidegen.utils.text import (
    escape_markup,
    has_non_latin_characters,
    strip_control_characters,
)

__all__ = [
    "escape_markup",
    "has_non_latin_characters",
    "strip_control_characters",
]
