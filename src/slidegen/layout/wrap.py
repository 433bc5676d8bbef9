"""Greedy word wrapping with hashtags pulled onto their own lines."""

import logging
import re
from typing import Iterator

from slidegen.config import CanvasSpec
from slidegen.layout.markup import HASHTAG_PATTERN
from slidegen.layout.models import FormatRange, Line
from slidegen.layout.ranges import FormatIndex

logger = logging.getLogger(__name__)

_WORD_PATTERN = re.compile(r"\S+")


def _pieces(word: str, start: int, max_chars: int) -> Iterator[tuple[str, int]]:
    """Cut a word into pieces of exactly max_chars characters; the last may be shorter."""
    for i in range(0, len(word), max_chars):
        yield word[i:i + max_chars], start + i


def _extract_hashtags(text: str, max_chars: int, max_lines: int) -> tuple[list[Line], str]:
    """
    Pull hashtags out of text.

    Hashtag characters are replaced by spaces in the returned text, so the
    offsets of the remaining words still point into the original text.
    Hashtags longer than max_chars are split over several hashtag lines.

    Returns:
        Tuple of (hashtag lines, text left for word wrapping).
    """
    hashtag_lines: list[Line] = []
    chars = list(text)

    for match in HASHTAG_PATTERN.finditer(text):
        for piece, piece_start in _pieces(match.group(0), match.start(), max_chars):
            if len(hashtag_lines) < max_lines:
                hashtag_lines.append(Line(
                    text=piece,
                    start_offset=piece_start,
                    end_offset=piece_start + len(piece),
                    is_hashtag=True,
                ))
        chars[match.start():match.end()] = " " * (match.end() - match.start())

    return hashtag_lines, "".join(chars)


def _chunks(text: str, max_chars: int) -> Iterator[tuple[str, int]]:
    """
    Yield (chunk, start offset) for every word, hard-splitting long words.

    Words longer than max_chars are hard-split with _pieces().
    """
    for match in _WORD_PATTERN.finditer(text):
        yield from _pieces(match.group(0), match.start(), max_chars)


def _styled_line(text: str, start: int, end: int, format_index: FormatIndex) -> Line:
    style = format_index.query_overlap(start, end)
    return Line(
        text=text,
        start_offset=start,
        end_offset=end,
        bold=style.bold,
        italic=style.italic,
        is_hashtag=False,
    )


def _wrap_prose(text: str, format_index: FormatIndex, max_chars: int, max_lines: int) -> list[Line]:
    lines: list[Line] = []
    current = ""
    current_start = current_end = 0

    for chunk, chunk_start in _chunks(text, max_chars):
        chunk_end = chunk_start + len(chunk)

        if not current:
            current, current_start, current_end = chunk, chunk_start, chunk_end
        elif len(current) + 1 + len(chunk) <= max_chars:
            current = f"{current} {chunk}"
            current_end = chunk_end
        else:
            lines.append(_styled_line(current, current_start, current_end, format_index))
            if len(lines) >= max_lines:
                # Everything after this is truncated anyway
                return lines
            current, current_start, current_end = chunk, chunk_start, chunk_end

    if current:
        lines.append(_styled_line(current, current_start, current_end, format_index))

    return lines


def wrap(
    plain_text: str,
    ranges: FormatIndex | list[FormatRange],
    spec: CanvasSpec,
) -> list[Line]:
    """
    Wrap plain text into lines no wider than spec.max_chars_per_line.

    Every hashtag becomes its own line (never bold or italic), split like
    any other word when it is wider than a line. The remaining
    words are wrapped greedily and each line gets its style back from the
    format ranges it overlaps. Prose lines come first, hashtag lines last,
    and the list is cut to spec.max_lines.

    Never raises. Empty or whitespace-only text produces no prose lines;
    hashtag lines still appear.

    Args:
        plain_text: Text rebuilt from parser runs.
        ranges: FormatIndex for plain_text, or its raw format ranges.
        spec: Canvas configuration.

    Returns:
        Wrapped lines.
    """
    if isinstance(ranges, FormatIndex):
        format_index = ranges
    else:
        format_index = FormatIndex(plain_text, ranges)

    text = plain_text
    if len(text) > spec.max_input_chars:
        logger.warning(
            f"Slide text is {len(text)} characters, only the first "
            f"{spec.max_input_chars} are laid out"
        )
        text = text[:spec.max_input_chars]

    hashtag_lines, prose = _extract_hashtags(text, spec.max_chars_per_line, spec.max_lines)
    prose_lines = _wrap_prose(prose, format_index, spec.max_chars_per_line, spec.max_lines)

    lines = (prose_lines + hashtag_lines)[:spec.max_lines]
    logger.debug(
        f"Wrapped {len(text)} characters into {len(prose_lines)} prose and "
        f"{len(hashtag_lines)} hashtag line(s), keeping {len(lines)}"
    )
    return lines
