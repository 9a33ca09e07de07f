"""
Format classifier for Format King.

Runs the structured-format detectors in fixed priority order and hands
the input to the first parser that produces tables, falling back to
delimited-text parsing when nothing else matches.
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from formatking.core.config import DetectionConfig, FormatKingConfig
from formatking.core.models import SourceFormat, Table, TableSet
from formatking.parsers.box import BoxTableParser
from formatking.parsers.delimited import AUTO, DelimitedTextParser, resolve_delimiter
from formatking.parsers.fixed_width import FixedWidthParser
from formatking.parsers.json_array import JsonArrayParser
from formatking.parsers.markdown import MarkdownTableParser
from formatking.utils.exceptions import EmptyInputError, NoTableFoundError
from formatking.utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


class FormatHandler(NamedTuple):
    """A detector paired with the parser that owns matching input."""

    source_format: SourceFormat
    detect: Callable[[str], bool]
    parse: Callable[[str], List[Table]]


def build_handlers(config: Optional[DetectionConfig] = None) -> List[FormatHandler]:
    """Build the structured-format handlers in priority order.

    Box tables come first because their ``|`` rows would also satisfy the
    Markdown detector; fixed-width comes last because any aligned text
    satisfies it.
    """
    parsers = [
        BoxTableParser(config),
        MarkdownTableParser(config),
        JsonArrayParser(config),
        FixedWidthParser(config),
    ]
    return [FormatHandler(p.source_format, p.safe_detect, p.parse) for p in parsers]


def classify_and_parse(
    raw_text: str,
    delimiter: Optional[str] = AUTO,
    first_row_header: bool = True,
    config: Optional[FormatKingConfig] = None,
) -> TableSet:
    """Detect the format of *raw_text* and parse it into a table set.

    Args:
        raw_text: Pasted or loaded text
        delimiter: Delimiter setting for the delimited fallback ("auto" to detect)
        first_row_header: Whether the delimited fallback's first row is a header
        config: Optional configuration supplying detector thresholds

    Returns:
        A fresh TableSet

    Raises:
        EmptyInputError: If the text is blank
        NoTableFoundError: If no parser produced any rows
        InvalidDelimiterError: If a manual delimiter cannot be resolved

    Example:
        >>> table_set = classify_and_parse("a,b\\n1,2\\n3,4")
        >>> table_set.source_format, table_set[0].headers
        (<SourceFormat.DELIMITED: 'delimited'>, ['a', 'b'])
    """
    text = raw_text.strip() if raw_text else ""
    if not text:
        raise EmptyInputError()

    detection = config.detection if config else DetectionConfig()

    with PerformanceLogger("Classifying input", logger, level="DEBUG"):
        for handler in build_handlers(detection):
            if not handler.detect(text):
                continue
            logger.debug("Input matches %s format", handler.source_format.value)

            tables = handler.parse(text)
            if tables:
                table_set = TableSet(tables=tables, source_format=handler.source_format)
                logger.info("Loaded %s", table_set.summary())
                return table_set
            logger.debug("%s parser found no tables, trying next format", handler.source_format.value)

        resolved = resolve_delimiter(delimiter, text, sample_lines=detection.delimiter_sample_lines)
        fallback = DelimitedTextParser(detection, delimiter=resolved, first_row_header=first_row_header)
        tables = fallback.parse(text)

    if not tables:
        raise NoTableFoundError()

    table_set = TableSet(tables=tables, source_format=SourceFormat.DELIMITED, delimiter=resolved)
    logger.info("Loaded %s", table_set.summary())
    return table_set
