"""Lightweight markup parsing: **bold**, *italic* and #hashtags."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from slidegen.layout.models import Run
from slidegen.utils.text import strip_control_characters

logger = logging.getLogger(__name__)

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^*]+?)\*")
# ASCII word characters only, so "#café" tags as "#caf"
HASHTAG_PATTERN = re.compile(r"#\w+", re.ASCII)


@dataclass(frozen=True)
class _Match:
    start: int
    end: int
    text: str
    bold: bool = False
    italic: bool = False
    is_hashtag: bool = False

    def overlaps(self, other: _Match) -> bool:
        return self.start < other.end and other.start < self.end

    def to_run(self) -> Run:
        return Run(self.text, bold=self.bold, italic=self.italic, is_hashtag=self.is_hashtag)


def _mask(text: str, matches: list[_Match]) -> str:
    """Blank out matched spans so later passes cannot reuse their delimiters."""
    chars = list(text)
    for match in matches:
        chars[match.start:match.end] = " " * (match.end - match.start)
    return "".join(chars)


def _find_matches(text: str) -> list[_Match]:
    bold = [
        _Match(m.start(), m.end(), m.group(1), bold=True)
        for m in BOLD_PATTERN.finditer(text)
    ]

    italic = [
        _Match(m.start(), m.end(), m.group(1), italic=True)
        for m in ITALIC_PATTERN.finditer(_mask(text, bold))
    ]
    # An italic span can still straddle a masked bold span ("*a **b** c*")
    italic = [i for i in italic if not any(i.overlaps(b) for b in bold)]

    styled = bold + italic
    hashtags = [
        _Match(m.start(), m.end(), m.group(0), is_hashtag=True)
        for m in HASHTAG_PATTERN.finditer(_mask(text, styled))
    ]

    return sorted(styled + hashtags, key=lambda m: m.start)


def parse(raw: object) -> list[Run]:
    """
    Split raw slide text into formatted runs.

    Bold spans are matched first, then italic spans outside bold spans, then
    hashtags outside both. Delimiters are stripped from bold and italic runs;
    hashtags keep their "#". Text between matches becomes plain runs, and
    unbalanced delimiters stay in the plain text as literal characters.

    Never raises: anything that is not a string parses to a single empty run.

    Args:
        raw: Slide text.

    Returns:
        Ordered runs whose texts concatenate to the plain text.
    """
    if not isinstance(raw, str):
        logger.debug(f"Non-string markup input of type {type(raw).__name__}, using empty run")
        return [Run("")]

    text = strip_control_characters(raw)
    matches = _find_matches(text)

    if not matches:
        return [Run(text)]

    runs: list[Run] = []
    position = 0
    for match in matches:
        if match.start > position:
            runs.append(Run(text[position:match.start]))
        runs.append(match.to_run())
        position = match.end

    if position < len(text):
        runs.append(Run(text[position:]))

    return runs
