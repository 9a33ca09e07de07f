"""
Box-drawn table detection and parsing.

Handles SQL/Databricks style ASCII tables (``+----+`` borders and ``|``
cells) and Unicode box tables (``┌─┬─┐`` borders and ``│`` cells), as
printed by database shells and terminal tools. Several tables may share
one input when each is introduced by a ``TABLE: <name>`` marker line.
"""

import logging
from typing import List, Optional

from formatking.core.models import SourceFormat, Table
from formatking.parsers.base import BaseParser
from formatking.parsers.patterns import (
    ASCII_BORDER_LINE_RE,
    ASCII_DATA_LINE_RE,
    ASCII_SEPARATOR_RE,
    BORDER_START_CHARS,
    DATA_LINE_CHARS,
    EQUALS_SEPARATOR_RE,
    TABLE_BODY_START_CHARS,
    TABLE_HEADER_BLOCK_RE,
    TABLE_NAME_RE,
    TOP_BORDER_CHARS,
    TRAILING_COMMAS_RE,
    UNICODE_BORDER_CHAR_RE,
    UNICODE_DATA_LINE_RE,
    UNICODE_SEPARATOR_RE,
)

logger = logging.getLogger(__name__)


def clean_line(line: str) -> str:
    """Trim *line* and drop trailing artifact commas."""
    return TRAILING_COMMAS_RE.sub("", line.strip()).strip()


def is_separator_line(line: str) -> bool:
    """Return True for ``====``, ASCII ``+---+`` and Unicode border lines."""
    return bool(
        EQUALS_SEPARATOR_RE.match(line)
        or ASCII_SEPARATOR_RE.match(line)
        or UNICODE_SEPARATOR_RE.match(line)
    )


def split_data_line(line: str) -> Optional[List[str]]:
    """Split a ``| a | b |`` or ``│ a │ b │`` line into trimmed cells.

    The opening character selects the delimiter. The closing delimiter is
    optional so rows truncated by a copy/paste still parse.

    Args:
        line: A cleaned line (see :func:`clean_line`)

    Returns:
        Cells, or None if *line* is not a data line
    """
    if line.startswith("│"):
        delimiter = "│"
    elif line.startswith("|"):
        delimiter = "|"
    else:
        return None

    content = line[1:]
    if content.endswith(delimiter):
        content = content[:-1]
    return [cell.strip() for cell in content.split(delimiter)]


class BoxTableParser(BaseParser):
    """Parser for ASCII and Unicode box-drawn tables.

    Example:
        >>> text = "+---+---+\\n| a | b |\\n+---+---+\\n| 1 | 2 |\\n+---+---+"
        >>> BoxTableParser().parse(text)[0].data
        [['1', '2']]
    """

    source_format = SourceFormat.BOX

    def detect(self, text: str) -> bool:
        """Match ASCII borders with ``|`` rows, a ``====``/``TABLE:`` block,
        or Unicode borders with ``│`` rows."""
        has_ascii_table = bool(ASCII_BORDER_LINE_RE.search(text) and ASCII_DATA_LINE_RE.search(text))
        has_table_header = bool(TABLE_HEADER_BLOCK_RE.search(text))
        has_unicode_table = bool(
            UNICODE_BORDER_CHAR_RE.search(text) and UNICODE_DATA_LINE_RE.search(text)
        )
        return has_ascii_table or has_table_header or has_unicode_table

    def parse(self, text: str) -> List[Table]:
        """Parse one or more box tables.

        ``TABLE: <name>`` lines start a new table. Without any such marker
        yielding a table, the whole input is parsed as a single table,
        optionally named by a title line just above its top border.
        """
        lines = text.split("\n")
        tables: List[Table] = []

        table_name: Optional[str] = None
        headers: List[str] = []
        rows: List[List[str]] = []
        header_parsed = False

        def flush() -> None:
            # Headers alone do not make a table
            if headers and rows:
                tables.append(
                    Table(
                        name=table_name or f"Table {len(tables) + 1}",
                        headers=headers,
                        data=rows,
                    )
                )

        for raw_line in lines:
            name_match = TABLE_NAME_RE.match(raw_line.strip())
            if name_match:
                flush()
                table_name = name_match.group(1).strip()
                headers, rows, header_parsed = [], [], False
                continue

            line = clean_line(raw_line)
            if is_separator_line(line):
                continue

            cells = split_data_line(line)
            if cells is None:
                continue
            if not header_parsed:
                headers = cells
                header_parsed = True
            else:
                rows.append(cells)

        flush()

        if not tables:
            single = self._parse_single_table(lines)
            if single is not None:
                tables.append(single)

        logger.info("Parsed %d box table(s)", len(tables))
        return tables

    def _parse_single_table(self, lines: List[str]) -> Optional[Table]:
        """Parse the whole input as one table without ``TABLE:`` markers."""
        headers: List[str] = []
        data: List[List[str]] = []
        header_parsed = False

        for raw_line in lines:
            line = clean_line(raw_line)
            if is_separator_line(line):
                continue

            cells = split_data_line(line)
            if cells is None:
                continue
            if not header_parsed:
                headers = cells
                header_parsed = True
            else:
                data.append(cells)

        if not headers:
            return None
        return Table(name=self._find_title(lines) or "Table 1", headers=headers, data=data)

    def _find_title(self, lines: List[str]) -> Optional[str]:
        """Find a title line shortly above the table's top border.

        A candidate is a non-empty line that is neither a border, a data
        line, nor a ``====`` rule. It becomes the title if a top border
        (``┌`` or ``+``) follows within ``title_lookahead`` lines before
        any data line does.
        """
        lookahead = self.config.title_lookahead

        for i, raw_line in enumerate(lines):
            trimmed = raw_line.strip()
            is_candidate = (
                trimmed
                and not trimmed.startswith(BORDER_START_CHARS)
                and not trimmed.startswith(DATA_LINE_CHARS)
                and not EQUALS_SEPARATOR_RE.match(trimmed)
            )
            if is_candidate:
                for j in range(1, lookahead + 1):
                    if i + j >= len(lines):
                        break
                    next_line = lines[i + j].strip()
                    if next_line.startswith(TOP_BORDER_CHARS):
                        logger.debug("Using %r as box table title", trimmed)
                        return trimmed
                    if next_line.startswith(DATA_LINE_CHARS):
                        break

            if trimmed.startswith(TABLE_BODY_START_CHARS):
                break

        return None
