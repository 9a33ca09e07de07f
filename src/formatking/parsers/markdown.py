"""
Markdown (GitHub flavored) pipe-table detection and parsing.

A table is a header row followed by a separator row of dashes such as
``| --- | :---: |``. Tables are separated by blank lines, so one input may
hold several of them mixed with prose.
"""

import logging
from typing import List

from formatking.core.models import SourceFormat, Table
from formatking.parsers.base import BaseParser
from formatking.parsers.patterns import (
    BLANK_LINE_SPLIT_RE,
    MARKDOWN_SEPARATOR_ANY_LINE_RE,
    MARKDOWN_SEPARATOR_ONLY_RE,
    MARKDOWN_SEPARATOR_RE,
)

logger = logging.getLogger(__name__)


def split_markdown_row(line: str) -> List[str]:
    """Split a pipe row, dropping one leading and one trailing pipe."""
    s = line.strip()
    if s.startswith("|"):
        s = s[1:]
    if s.endswith("|"):
        s = s[:-1]
    return [cell.strip() for cell in s.split("|")]


class MarkdownTableParser(BaseParser):
    """Parser for Markdown pipe tables.

    Example:
        >>> table = MarkdownTableParser().parse("| a | b |\\n|---|---|\\n| 1 | 2 |")[0]
        >>> table.headers, table.data
        (['a', 'b'], [['1', '2']])
    """

    source_format = SourceFormat.MARKDOWN

    def detect(self, text: str) -> bool:
        """Require a separator row plus at least one pipe row with content."""
        if not MARKDOWN_SEPARATOR_ANY_LINE_RE.search(text):
            return False
        lines = [line for line in text.split("\n") if line.strip()]
        return any(
            "|" in line and not MARKDOWN_SEPARATOR_ONLY_RE.match(line.strip()) for line in lines
        )

    def parse(self, text: str) -> List[Table]:
        tables: List[Table] = []

        for block in BLANK_LINE_SPLIT_RE.split(text):
            lines = [line for line in block.split("\n") if line.strip()]
            sep_index = next(
                (i for i, line in enumerate(lines) if MARKDOWN_SEPARATOR_RE.match(line.strip())),
                -1,
            )
            # The separator needs a header row above it
            if sep_index < 1:
                continue

            headers = split_markdown_row(lines[sep_index - 1])
            data = [split_markdown_row(line) for line in lines[sep_index + 1 :] if "|" in line]

            if headers and data:
                tables.append(Table(name=f"Table {len(tables) + 1}", headers=headers, data=data))

        logger.info("Parsed %d Markdown table(s)", len(tables))
        return tables
