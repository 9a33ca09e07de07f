"""
Reconciliation module for Format King.

This module merges the tables of one input into a unified view.

Example:
    >>> from formatking.parsers import classify_and_parse
    >>> from formatking.reconcile import build_all_tables_view
    >>>
    >>> table_set = classify_and_parse(text)
    >>> view = build_all_tables_view(table_set)
    >>> view.headers[0]
    'Table'
"""

from formatking.reconcile.reconciler import (
    ALL_TABLES_NAME,
    SOURCE_TABLE_HEADER,
    build_all_tables_view,
    get_common_headers,
    pad_row_to_headers,
)

__all__ = [
    "ALL_TABLES_NAME",
    "SOURCE_TABLE_HEADER",
    "build_all_tables_view",
    "get_common_headers",
    "pad_row_to_headers",
]
