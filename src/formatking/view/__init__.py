"""
View state for Format King.

Example:
    >>> from formatking.parsers import classify_and_parse
    >>> from formatking.view import load_table_set, sort_by, apply_filter
    >>>
    >>> state = load_table_set(classify_and_parse(text))
    >>> state = sort_by(state, 0)
    >>> state = apply_filter(state, "alice")
"""

from formatking.view.sorting import is_numeric_cell, sort_key, sort_rows
from formatking.view.state import (
    ALL_TABLES,
    DocumentState,
    SortDirection,
    apply_filter,
    default_view_index,
    load_table_set,
    select_view,
    sort_by,
)

__all__ = [
    "ALL_TABLES",
    "DocumentState",
    "SortDirection",
    "apply_filter",
    "default_view_index",
    "is_numeric_cell",
    "load_table_set",
    "select_view",
    "sort_by",
    "sort_key",
    "sort_rows",
]
