"""Text cleanup and escaping helpers."""

import re

# C0 controls except tab/LF/CR, DEL, and C1 controls except NEL
_CONTROL_CHARS = re.compile("[\u0000-\u0008\u000b\u000c\u000e-\u001f\u007f-\u0084\u0086-\u009f]")

_MARKUP_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


def strip_control_characters(text: str) -> str:
    """
    Remove control characters that renderers cannot draw.

    Printable text, whitespace (tab, newline, carriage return) and
    pictographic characters such as emoji pass through untouched.

    Args:
        text: Raw text.

    Returns:
        Text without control characters.
    """
    return _CONTROL_CHARS.sub("", text)


def escape_markup(text: str) -> str:
    """
    Escape the five XML-structural characters for SVG/XML output.

    Args:
        text: Text to escape.

    Returns:
        Escaped text with control characters removed.
    """
    if not text:
        return ""
    escaped = "".join(_MARKUP_ESCAPES.get(char, char) for char in text)
    return strip_control_characters(escaped)


def has_non_latin_characters(text: str) -> bool:
    """
    Check if text contains characters outside the Latin-1 range (0x0000-0x00FF).

    Built-in PDF fonts like Helvetica only cover Latin-1; anything beyond it
    needs a Unicode-capable TTF font.
    """
    return any(ord(char) > 0x00FF for char in text)
