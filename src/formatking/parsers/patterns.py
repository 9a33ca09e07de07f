"""Compiled regex patterns and constant tuples for table format detection.

These patterns recognize the structural anchors of each supported text
encoding: box-table borders and data lines, ``TABLE:`` markers, Markdown
separator rows, and fixed-width underline rows. Used by the detectors and
parsers in this package.
"""

import re

# ─── Delimited Text ───────────────────────────────────────────────────────────

# Candidate delimiters in priority order; ties keep the earlier entry
CANDIDATE_DELIMITERS = (",", ";", "\t", "|")

# Human-friendly names accepted wherever a delimiter may be chosen manually
DELIMITER_NAMES = {
    "comma": ",",
    "semicolon": ";",
    "tab": "\t",
    "pipe": "|",
}


# ─── Box Tables: Detection ───────────────────────────────────────────────────

# ASCII border line such as "+----+-----+" (leading whitespace allowed)
ASCII_BORDER_LINE_RE = re.compile(r"^\s*\+[-+]+\+", re.MULTILINE)

# ASCII data line such as "| a | b |"
ASCII_DATA_LINE_RE = re.compile(r"^\s*\|.+\|", re.MULTILINE)

# "====" separator immediately followed by a "TABLE: name" line
TABLE_HEADER_BLOCK_RE = re.compile(r"^=+\s*\n\s*TABLE:", re.MULTILINE)

# Unicode border characters (the vertical bar alone is not a border)
UNICODE_BORDER_CHAR_RE = re.compile(r"[┌┐└┘├┤┬┴┼─]")

# Unicode data line such as "│ a │ b │"
UNICODE_DATA_LINE_RE = re.compile(r"^\s*│.+│", re.MULTILINE)


# ─── Box Tables: Parsing (applied to trimmed lines) ──────────────────────────

# Table name marker, e.g. "TABLE: blasts"
TABLE_NAME_RE = re.compile(r"^TABLE:\s*(.+)$")

# "=====" separator
EQUALS_SEPARATOR_RE = re.compile(r"^=+$")

# "+----+----+" border, closing "+" optional for truncated lines
ASCII_SEPARATOR_RE = re.compile(r"^\+[-+]+\+?$")

# "┌──┬──┐", "├──┼──┤", "└──┴──┘", closing corner optional
UNICODE_SEPARATOR_RE = re.compile(r"^[┌├└][─┬┼┴]+[┐┤┘]?$")

# Trailing commas left behind when tables are copied out of CSV cells
TRAILING_COMMAS_RE = re.compile(r",+$")

# Border characters that open a box-table line without being a title
BORDER_START_CHARS = ("┌", "├", "└", "+")

# Characters that end the search for a title line
TABLE_BODY_START_CHARS = ("┌", "+", "│", "|")

# Top borders that mark the line above as a table title
TOP_BORDER_CHARS = ("┌", "+")

# Data-line openers
DATA_LINE_CHARS = ("│", "|")


# ─── Markdown Tables ─────────────────────────────────────────────────────────

# Header separator row such as "| --- | :---: |" or "---|---"
MARKDOWN_SEPARATOR_RE = re.compile(r"^\|?\s*:?-{2,}:?\s*(\|\s*:?-{2,}:?\s*)+\|?\s*$")

# Same pattern, searched across a whole multi-line input
MARKDOWN_SEPARATOR_ANY_LINE_RE = re.compile(
    r"^\|?\s*:?-{2,}:?\s*(\|\s*:?-{2,}:?\s*)+\|?\s*$", re.MULTILINE
)

# Lines made only of separator characters (no cell content)
MARKDOWN_SEPARATOR_ONLY_RE = re.compile(r"^[\s|:*-]+$")

# Blank line between Markdown blocks
BLANK_LINE_SPLIT_RE = re.compile(r"\n\s*\n")


# ─── Fixed-Width Tables ──────────────────────────────────────────────────────

# Lines consisting only of whitespace, dashes and equals signs
RULE_CHARS_ONLY_RE = re.compile(r"^[\s\-=]+$")

# At least two consecutive rule characters
RULE_RUN_RE = re.compile(r"[-=]{2,}")


# ─── Sorting ─────────────────────────────────────────────────────────────────

# Plain decimal number with optional sign and exponent; no inf/nan/hex
NUMERIC_CELL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
