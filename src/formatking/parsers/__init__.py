"""
Format detectors and parsers for Format King.

This package turns raw pasted text into tables. Each structured format
has a parser class pairing a conservative detector with its parser, and
the classifier dispatches between them in fixed priority order.

Supported Formats:
    - Box tables: ASCII (``+---+``) and Unicode (``┌─┐``) bordered tables
    - Markdown: pipe tables with a ``|---|`` separator row
    - JSON: arrays of flat objects
    - Fixed-width: space-aligned columns
    - Delimited: comma, semicolon, tab or pipe separated text (fallback)

Example:
    >>> from formatking.parsers import classify_and_parse
    >>>
    >>> table_set = classify_and_parse("| a | b |\\n|---|---|\\n| 1 | 2 |")
    >>> table_set.source_format.value
    'markdown'
"""

from .base import BaseParser
from .box import BoxTableParser
from .classifier import FormatHandler, build_handlers, classify_and_parse
from .delimited import (
    DelimitedTextParser,
    detect_delimiter,
    parse_delimited,
    resolve_delimiter,
    rows_to_table,
)
from .fixed_width import FixedWidthParser
from .json_array import JsonArrayParser
from .markdown import MarkdownTableParser

from formatking.core.config import DetectionConfig
from formatking.core.models import SourceFormat


def get_parser(name: str, config: DetectionConfig = None) -> BaseParser:
    """Get a parser instance by format name.

    Args:
        name: Format name (box, markdown, json, fixed_width, delimited)
        config: Detection thresholds

    Returns:
        Parser instance

    Raises:
        ValueError: If format name is unknown
    """
    parser_map = {
        SourceFormat.BOX.value: BoxTableParser,
        SourceFormat.MARKDOWN.value: MarkdownTableParser,
        SourceFormat.JSON.value: JsonArrayParser,
        SourceFormat.FIXED_WIDTH.value: FixedWidthParser,
        SourceFormat.DELIMITED.value: DelimitedTextParser,
    }

    name_lower = name.lower()
    if name_lower not in parser_map:
        raise ValueError(
            f"Unknown format '{name}'. "
            f"Available: {', '.join(parser_map.keys())}"
        )

    return parser_map[name_lower](config)


__all__ = [
    # Base parser
    "BaseParser",
    "get_parser",
    # Classification
    "FormatHandler",
    "build_handlers",
    "classify_and_parse",
    # Delimited text
    "DelimitedTextParser",
    "detect_delimiter",
    "parse_delimited",
    "resolve_delimiter",
    "rows_to_table",
    # Structured formats
    "BoxTableParser",
    "MarkdownTableParser",
    "JsonArrayParser",
    "FixedWidthParser",
]
