"""
Table set reconciliation for Format King.

Merges tables with differing columns into a single "All Tables" view: a
common header list plus one row per source row, each tagged with the
name of the table it came from.
"""

import logging
from typing import List, Sequence

from formatking.core.models import Table, TableSet

logger = logging.getLogger(__name__)

ALL_TABLES_NAME = "All Tables"
SOURCE_TABLE_HEADER = "Table"


def get_common_headers(tables: Sequence[Table]) -> List[str]:
    """Get the header list shared by all tables.

    When every table has exactly the same headers (same length and same
    value at each position) that list is returned as-is, duplicates
    included. Otherwise the union of all headers in first-seen order is
    returned.

    Args:
        tables: Tables to reconcile

    Returns:
        Common header list (empty for no tables)
    """
    if not tables:
        return []

    first_headers = tables[0].headers
    if all(table.headers == first_headers for table in tables):
        return list(first_headers)

    seen = set()
    all_headers: List[str] = []
    for table in tables:
        for header in table.headers:
            if header not in seen:
                seen.add(header)
                all_headers.append(header)
    return all_headers


def pad_row_to_headers(
    row: Sequence[str], table_headers: Sequence[str], common_headers: Sequence[str]
) -> List[str]:
    """Project a row onto the common headers.

    Each cell is placed at the first position of its header in
    *common_headers*. Cells whose header is missing from the common list,
    or whose position is past the end of *row*, are dropped; every other
    position is an empty string.

    Args:
        row: Source row
        table_headers: Headers of the row's source table
        common_headers: Target header list

    Returns:
        A new row of ``len(common_headers)`` cells
    """
    result = [""] * len(common_headers)
    positions = {}
    for i, header in enumerate(common_headers):
        positions.setdefault(header, i)

    for i, header in enumerate(table_headers):
        common_index = positions.get(header)
        if common_index is not None and i < len(row):
            result[common_index] = row[i]
    return result


def build_all_tables_view(table_set: TableSet) -> Table:
    """Combine every table into one view tagged by source table name.

    Args:
        table_set: Tables to combine

    Returns:
        A table named "All Tables" with a leading "Table" column
    """
    common_headers = get_common_headers(table_set.tables)

    data: List[List[str]] = []
    for table in table_set:
        for row in table.data:
            data.append([table.name] + pad_row_to_headers(row, table.headers, common_headers))

    logger.debug(
        "Reconciled %d tables into %d columns, %d rows",
        len(table_set),
        len(common_headers),
        len(data),
    )
    return Table(name=ALL_TABLES_NAME, headers=[SOURCE_TABLE_HEADER] + common_headers, data=data)
