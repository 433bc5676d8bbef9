"""Plain-text reconstruction and style lookup by offset range."""

from bisect import bisect_left
from itertools import accumulate

from slidegen.layout.models import FormatRange, Run, Style


class FormatIndex:
    """
    Plain text rebuilt from runs, plus the styled ranges inside it.

    Wrapping happens on the plain text only; afterwards each wrapped line gets
    its style back through query_overlap(). A line touching any part of a
    styled range picks up that range's flags, so a line mixing a bold phrase
    and plain words is reported bold as a whole.
    """

    def __init__(self, plain_text: str, ranges: list[FormatRange]) -> None:
        self.plain_text = plain_text
        self.ranges = sorted(ranges, key=lambda r: (r.start, r.end))
        self._starts = [r.start for r in self.ranges]
        # _max_ends[i] is the largest end among ranges[:i + 1]
        self._max_ends = list(accumulate((r.end for r in self.ranges), max))

    def query_overlap(self, start: int, end: int) -> Style:
        """
        OR together the flags of every range intersecting [start, end).

        Args:
            start: First offset of the span.
            end: Offset one past the end of the span.

        Returns:
            Combined style, all flags False for an empty span.
        """
        if end <= start or not self.ranges:
            return Style()

        # Ranges at or past this index start at or after `end`
        upper = bisect_left(self._starts, end)
        # Ranges before this index all end at or before `start`
        lower = bisect_left(self._max_ends, start + 1, hi=upper)

        bold = italic = is_hashtag = False
        for format_range in self.ranges[lower:upper]:
            if format_range.overlaps(start, end):
                bold = bold or format_range.bold
                italic = italic or format_range.italic
                is_hashtag = is_hashtag or format_range.is_hashtag

        return Style(bold=bold, italic=italic, is_hashtag=is_hashtag)


def index(runs: list[Run]) -> FormatIndex:
    """
    Rebuild the plain text from runs and record where each styled run sits.

    Args:
        runs: Parser output, in order.

    Returns:
        FormatIndex over the concatenated run texts.
    """
    ranges: list[FormatRange] = []
    parts: list[str] = []
    offset = 0

    for run in runs:
        end = offset + len(run.text)
        if not run.is_plain and end > offset:
            ranges.append(FormatRange(
                start=offset,
                end=end,
                bold=run.bold,
                italic=run.italic,
                is_hashtag=run.is_hashtag,
            ))
        parts.append(run.text)
        offset = end

    return FormatIndex("".join(parts), ranges)
