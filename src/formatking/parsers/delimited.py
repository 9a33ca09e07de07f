"""
Delimited-text detection and parsing.

Guesses the delimiter of CSV-like text from the consistency of per-line
counts, and tokenizes RFC 4180 style quoted fields with a two-state
character machine. This is the terminal fallback of the format classifier,
so it accepts any text.
"""

import logging
from statistics import fmean, pvariance
from typing import List, Optional

from formatking.core.config import DetectionConfig
from formatking.core.models import SourceFormat, Table, column_name
from formatking.parsers.base import BaseParser
from formatking.parsers.patterns import CANDIDATE_DELIMITERS, DELIMITER_NAMES
from formatking.utils.exceptions import InvalidDelimiterError

logger = logging.getLogger(__name__)

AUTO = "auto"
DEFAULT_DELIMITER = ","


def detect_delimiter(text: str, sample_lines: int = 5) -> str:
    """Guess the single-character delimiter of *text*.

    Each candidate is scored on the first *sample_lines* non-empty lines as
    ``mean / (variance + 1)`` of its per-line occurrence count, so a
    delimiter that appears often and consistently wins. A candidate that
    never appears scores 0. Ties keep the earlier candidate, which makes
    comma the default when there is no signal.

    Args:
        text: Raw input
        sample_lines: Number of non-empty lines to sample

    Returns:
        The chosen delimiter character
    """
    lines = [line for line in text.splitlines() if line.strip()][:sample_lines]
    if not lines:
        return DEFAULT_DELIMITER

    best_delimiter = DEFAULT_DELIMITER
    best_score = 0.0
    for delimiter in CANDIDATE_DELIMITERS:
        counts = [line.count(delimiter) for line in lines]
        mean = fmean(counts)
        score = mean / (pvariance(counts) + 1) if mean > 0 else 0.0
        if score > best_score:
            best_score = score
            best_delimiter = delimiter

    logger.debug("Detected delimiter %r (score=%.3f)", best_delimiter, best_score)
    return best_delimiter


def resolve_delimiter(value: Optional[str], text: str = "", sample_lines: int = 5) -> str:
    """Turn a delimiter setting into a delimiter character.

    Args:
        value: ``"auto"``/None, a name (comma, semicolon, tab, pipe),
            the escape ``\\t``, or a single character
        text: Input used for auto-detection
        sample_lines: Lines sampled when auto-detecting

    Returns:
        A single delimiter character

    Raises:
        InvalidDelimiterError: If *value* cannot be resolved
    """
    if value is None or value.lower() == AUTO:
        return detect_delimiter(text, sample_lines)
    if value == "\\t":
        return "\t"
    if value.lower() in DELIMITER_NAMES:
        return DELIMITER_NAMES[value.lower()]
    if len(value) != 1:
        raise InvalidDelimiterError(delimiter=value)
    return value


def parse_delimited(text: str, delimiter: str) -> List[List[str]]:
    """Tokenize delimited text into raw rows.

    A quote opens a quoted section; inside it a doubled quote is a literal
    quote and everything else (delimiters and newlines included) is cell
    text. Outside quotes the delimiter ends a cell, ``\\n`` or ``\\r\\n``
    ends a row, and a lone ``\\r`` is dropped. Cells are trimmed, and a row
    is kept only if at least one of its cells is non-empty.

    Args:
        text: Raw input
        delimiter: Single delimiter character

    Returns:
        Rows of cells; rows may differ in length
    """
    rows: List[List[str]] = []
    row: List[str] = []
    cell: List[str] = []
    in_quotes = False

    def end_row() -> None:
        row.append("".join(cell).strip())
        if any(c != "" for c in row):
            rows.append(list(row))
        row.clear()
        cell.clear()

    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        next_char = text[i + 1] if i + 1 < n else ""

        if in_quotes:
            if char == '"' and next_char == '"':
                cell.append('"')
                i += 1
            elif char == '"':
                in_quotes = False
            else:
                cell.append(char)
        elif char == '"':
            in_quotes = True
        elif char == delimiter:
            row.append("".join(cell).strip())
            cell.clear()
        elif char == "\n" or (char == "\r" and next_char == "\n"):
            end_row()
            if char == "\r":
                i += 1
        elif char != "\r":
            cell.append(char)
        i += 1

    if cell or row:
        end_row()

    return rows


def rows_to_table(
    rows: List[List[str]], first_row_header: bool = True, name: str = "Table 1"
) -> Table:
    """Build a table from raw delimited rows.

    Rows are normalized to the widest row. With *first_row_header* the
    first row supplies the headers; otherwise headers are synthesized as
    ``Column 1`` .. ``Column N`` and every row is data.

    Args:
        rows: Raw rows (at least one)
        first_row_header: Use the first row as headers
        name: Table name

    Returns:
        The normalized table
    """
    width = max(len(row) for row in rows)
    padded = [row + [""] * (width - len(row)) for row in rows]

    if first_row_header:
        return Table(name=name, headers=padded[0], data=padded[1:])
    return Table(name=name, headers=[column_name(i) for i in range(width)], data=padded)


class DelimitedTextParser(BaseParser):
    """Fallback parser for comma, semicolon, tab or pipe separated text.

    Example:
        >>> parser = DelimitedTextParser(delimiter="auto")
        >>> tables = parser.parse("a,b\\n1,2")
        >>> tables[0].headers
        ['a', 'b']
    """

    source_format = SourceFormat.DELIMITED

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        delimiter: Optional[str] = AUTO,
        first_row_header: bool = True,
    ):
        """Initialize the parser.

        Args:
            config: Detection thresholds
            delimiter: Delimiter setting (see :func:`resolve_delimiter`)
            first_row_header: Use the first row as headers
        """
        super().__init__(config)
        self.delimiter = delimiter
        self.first_row_header = first_row_header

    def detect(self, text: str) -> bool:
        """Delimited text is the fallback: any text is accepted."""
        return True

    def parse(self, text: str) -> List[Table]:
        delimiter = resolve_delimiter(
            self.delimiter, text, sample_lines=self.config.delimiter_sample_lines
        )
        rows = parse_delimited(text, delimiter)
        if not rows:
            return []

        logger.info("Parsed %d delimited rows (delimiter=%r)", len(rows), delimiter)
        return [rows_to_table(rows, first_row_header=self.first_row_header)]
