"""
Fixed-width (space-aligned) table detection and parsing.

Column boundaries are inferred from vertical "rivers" of whitespace: a
character column where nearly every content line holds a space. A run
of at least ``min_gap_width`` such columns separates two table columns,
and the table is cut at the middle of each run.
"""

import logging
from typing import List, Tuple

from formatking.core.models import SourceFormat, Table
from formatking.parsers.base import BaseParser
from formatking.parsers.patterns import RULE_CHARS_ONLY_RE, RULE_RUN_RE

logger = logging.getLogger(__name__)


def is_underline(line: str) -> bool:
    """Return True for ``----`` / ``====`` rows under a header."""
    return bool(RULE_CHARS_ONLY_RE.match(line) and RULE_RUN_RE.search(line))


def space_counts(lines: List[str], width: int) -> List[int]:
    """Count, per column index, the lines holding a space there.

    Positions past the end of a line count as spaces.
    """
    counts = [0] * width
    for line in lines:
        for i in range(width):
            if i >= len(line) or line[i] == " ":
                counts[i] += 1
    return counts


def find_gaps(
    counts: List[int], line_count: int, threshold: float, min_width: int
) -> List[Tuple[int, int, bool]]:
    """Find maximal runs of gap columns.

    A column is a gap column when at least ``threshold`` of the lines hold
    a space there.

    Returns:
        ``(start, end, closed)`` triples with *end* exclusive, for runs at
        least *min_width* wide; *closed* is False for a run that reaches the
        last column
    """
    required = line_count * threshold
    gaps: List[Tuple[int, int, bool]] = []
    start = -1
    for i, count in enumerate(counts):
        if count >= required:
            if start < 0:
                start = i
        elif start >= 0:
            if i - start >= min_width:
                gaps.append((start, i, True))
            start = -1
    if start >= 0 and len(counts) - start >= min_width:
        gaps.append((start, len(counts), False))
    return gaps


def slice_line(line: str, cuts: List[int]) -> List[str]:
    """Cut *line* at the given positions and trim each piece."""
    cells = []
    prev = 0
    for cut in cuts:
        cells.append(line[prev:cut].strip())
        prev = cut
    cells.append(line[prev:].strip())
    return cells


class FixedWidthParser(BaseParser):
    """Parser for space-aligned tables such as ``ps``/``df`` output.

    Example:
        >>> table = FixedWidthParser().parse("Name   Age\\nAlice  30\\nBob    25")[0]
        >>> table.headers, table.data
        (['Name', 'Age'], [['Alice', '30'], ['Bob', '25']])
    """

    source_format = SourceFormat.FIXED_WIDTH

    def detect(self, text: str) -> bool:
        """Require enough aligned lines and at least one whitespace river."""
        lines = [line.rstrip("\r") for line in text.split("\n") if line.strip()]
        if len(lines) < self.config.fixed_width_min_lines:
            return False

        width = max(len(line) for line in lines)
        if width < self.config.fixed_width_min_line_length:
            return False

        content_lines = [line for line in lines if not RULE_CHARS_ONLY_RE.match(line)]
        if len(content_lines) < 2:
            return False

        gaps = find_gaps(
            space_counts(content_lines, width),
            len(content_lines),
            self.config.space_fraction_threshold,
            self.config.min_gap_width,
        )
        logger.debug("Fixed-width detection found %d gap(s)", len(gaps))
        return len(gaps) >= 1

    def parse(self, text: str) -> List[Table]:
        lines = [line.rstrip("\r") for line in text.split("\n") if line.strip()]
        if len(lines) < 2:
            return []

        width = max(len(line) for line in lines)
        padded = [line.ljust(width) for line in lines]

        content_lines = [line for line in padded if not is_underline(line)]
        if len(content_lines) < 2:
            return []

        gaps = find_gaps(
            space_counts(content_lines, width),
            len(content_lines),
            self.config.space_fraction_threshold,
            self.config.min_gap_width,
        )
        # Only gaps followed by content separate columns
        cuts = [(start + end) // 2 for start, end, closed in gaps if closed]
        if not cuts:
            logger.debug("No column boundaries found in fixed-width text")
            return []

        headers = slice_line(content_lines[0], cuts)
        data = [
            row
            for row in (slice_line(line, cuts) for line in content_lines[1:])
            if any(cell != "" for cell in row)
        ]
        if not data:
            return []

        logger.info("Parsed fixed-width table: %d rows, %d columns", len(data), len(headers))
        return [Table(name="Table 1", headers=headers, data=data)]
